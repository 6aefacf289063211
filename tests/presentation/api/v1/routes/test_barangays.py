"""Test barangay endpoints"""

import pytest
from fastapi import status


@pytest.mark.asyncio
async def test_list_is_public_and_active_only(client, barangays):
    barangays["brgy-b"].is_active = False

    response = await client.get("/barangays/")

    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == ["brgy-a"]


@pytest.mark.asyncio
async def test_toggle_requires_super_admin(client, users, auth_headers):
    response = await client.put(
        "/barangays/brgy-a/toggle-status", headers=auth_headers(users["admin-a"])
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.asyncio
async def test_toggle_locks_out_members(client, users, auth_headers, barangays):
    """
    GIVEN a super admin deactivating barangay A
    WHEN an admin of A makes the next request
    THEN it is rejected while barangay B's admin is unaffected
    """
    response = await client.put(
        "/barangays/brgy-a/toggle-status", headers=auth_headers(users["root"])
    )

    assert response.status_code == 200
    assert response.json()["barangay"]["is_active"] is False
    assert barangays["brgy-a"].is_active is False

    locked = await client.get("/auth/me", headers=auth_headers(users["admin-a"]))
    other = await client.get("/auth/me", headers=auth_headers(users["admin-b"]))
    assert locked.status_code == status.HTTP_401_UNAUTHORIZED
    assert other.status_code == 200


@pytest.mark.asyncio
async def test_regional_super_admin_cannot_toggle_foreign(client, users, auth_headers, barangays):
    response = await client.put(
        "/barangays/brgy-b/toggle-status", headers=auth_headers(users["regional"])
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert barangays["brgy-b"].is_active is True


@pytest.mark.asyncio
async def test_unbound_staff_rejected(client, users, auth_headers):
    """An account with no barangay that is not a super admin is refused."""
    users["staff-a"].barangay_id = None

    response = await client.get("/residents/", headers=auth_headers(users["staff-a"]))

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "No barangay assigned to this user"}
