"""Test public announcements with optional authentication"""

import pytest

from barangay_records.infrastructure.persistence.models.announcement import Announcement
from barangay_records.shared.utils.datetime import utc_now


@pytest.fixture
def announcements(announcement_repo):
    now = utc_now()
    announcement_repo.announcements.extend(
        Announcement(
            id=f"ann-{barangay_id}",
            barangay_id=barangay_id,
            title=f"Clean-up drive {barangay_id}",
            content="Bring gloves.",
            category="general",
            is_published=True,
            is_pinned=False,
            published_at=now,
        )
        for barangay_id in ("brgy-a", "brgy-b")
    )
    return announcement_repo.announcements


@pytest.mark.asyncio
async def test_anonymous_sees_all(client, announcements):
    response = await client.get("/announcements/public")

    assert response.status_code == 200
    assert {a["barangay_id"] for a in response.json()} == {"brgy-a", "brgy-b"}


@pytest.mark.asyncio
async def test_signed_in_defaults_to_own_barangay(client, announcements, users, auth_headers):
    response = await client.get("/announcements/public", headers=auth_headers(users["admin-b"]))

    assert [a["barangay_id"] for a in response.json()] == ["brgy-b"]


@pytest.mark.asyncio
async def test_bad_token_falls_back_to_anonymous(client, announcements):
    response = await client.get(
        "/announcements/public", headers={"Authorization": "Bearer garbage"}
    )

    assert response.status_code == 200
    assert len(response.json()) == 2
