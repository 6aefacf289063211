"""Render domain exceptions as `{message, ...extra}` JSON responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from barangay_records.domain.exceptions import BarangayRecordsException


async def barangay_records_exception_handler(
    request: Request, exc: BarangayRecordsException
) -> JSONResponse:
    headers = None
    if exc.http_status == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(), headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BarangayRecordsException, barangay_records_exception_handler)
