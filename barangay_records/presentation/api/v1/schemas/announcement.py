from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AnnouncementResponse(BaseModel):
    id: str
    barangay_id: str
    title: str
    content: str
    category: str
    is_pinned: bool
    published_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
