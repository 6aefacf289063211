"""Test barangay isolation on resident endpoints"""

import pytest
from fastapi import status

NEW_RESIDENT = {
    "first_name": "Ana",
    "last_name": "Santos",
    "address": "45 Mabini St",
}


class TestListResidents:
    @pytest.mark.asyncio
    async def test_staff_sees_only_own_barangay(self, client, users, auth_headers, resident_repo):
        """
        GIVEN residents in barangays A and B
        WHEN staff of A lists residents
        THEN only A's residents are returned
        """
        response = await client.get("/residents/", headers=auth_headers(users["staff-a"]))

        assert response.status_code == 200
        data = response.json()
        assert {r["barangay_id"] for r in data["residents"]} == {"brgy-a"}
        assert data["pagination"]["total"] == 2
        assert resident_repo.last_filters == {"barangay_id": "brgy-a"}

    @pytest.mark.asyncio
    async def test_unbound_super_admin_sees_all(self, client, users, auth_headers, resident_repo):
        response = await client.get("/residents/", headers=auth_headers(users["root"]))

        assert response.status_code == 200
        assert response.json()["pagination"]["total"] == 3
        assert resident_repo.last_filters == {}

    @pytest.mark.asyncio
    async def test_regional_super_admin_is_scoped(self, client, users, auth_headers):
        response = await client.get("/residents/", headers=auth_headers(users["regional"]))

        assert {r["barangay_id"] for r in response.json()["residents"]} == {"brgy-a"}

    @pytest.mark.asyncio
    async def test_resident_role_denied(self, client, users, auth_headers):
        response = await client.get("/residents/", headers=auth_headers(users["resident-a"]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {
            "message": "Access denied. Insufficient permissions.",
            "required": "residents:view",
            "current": "resident",
        }

    @pytest.mark.asyncio
    async def test_deactivated_barangay_locks_out_valid_token(
        self, client, users, auth_headers, barangays
    ):
        """A token issued before deactivation stops working on the next request."""
        headers = auth_headers(users["staff-a"])
        assert (await client.get("/residents/", headers=headers)).status_code == 200

        barangays["brgy-a"].is_active = False

        response = await client.get("/residents/", headers=headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Barangay is currently inactive"


class TestResidentById:
    @pytest.mark.asyncio
    async def test_own_record(self, client, users, auth_headers):
        response = await client.get("/residents/res-a1", headers=auth_headers(users["staff-a"]))

        assert response.status_code == 200
        assert response.json()["first_name"] == "Juan"

    @pytest.mark.asyncio
    async def test_foreign_record_looks_missing(self, client, users, auth_headers):
        """
        GIVEN a resident in barangay B
        WHEN staff of A requests it by id
        THEN the response is identical to a nonexistent id
        """
        headers = auth_headers(users["staff-a"])

        foreign = await client.get("/residents/res-b1", headers=headers)
        missing = await client.get("/residents/does-not-exist", headers=headers)

        assert foreign.status_code == missing.status_code == status.HTTP_404_NOT_FOUND
        assert foreign.json() == missing.json() == {"message": "Resident not found"}

    @pytest.mark.asyncio
    async def test_foreign_update_is_blocked(self, client, users, auth_headers, residents):
        response = await client.put(
            "/residents/res-b1",
            json={"first_name": "Hacked"},
            headers=auth_headers(users["staff-a"]),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert residents["res-b1"].first_name == "Pedro"

    @pytest.mark.asyncio
    async def test_update_cannot_move_barangay(self, client, users, auth_headers, residents):
        response = await client.put(
            "/residents/res-a1",
            json={"first_name": "Juanito", "barangay_id": "brgy-b"},
            headers=auth_headers(users["staff-a"]),
        )

        assert response.status_code == 200
        assert residents["res-a1"].first_name == "Juanito"
        assert residents["res-a1"].barangay_id == "brgy-a"

    @pytest.mark.asyncio
    async def test_staff_cannot_delete(self, client, users, auth_headers, residents):
        response = await client.delete("/residents/res-a1", headers=auth_headers(users["staff-a"]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["required"] == ["admin", "super_admin"]
        assert "res-a1" in residents

    @pytest.mark.asyncio
    async def test_admin_cannot_delete_foreign(self, client, users, auth_headers, residents):
        response = await client.delete("/residents/res-b1", headers=auth_headers(users["admin-a"]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "res-b1" in residents

    @pytest.mark.asyncio
    async def test_admin_deletes_own(self, client, users, auth_headers, residents):
        response = await client.delete("/residents/res-a2", headers=auth_headers(users["admin-a"]))

        assert response.status_code == 200
        assert "res-a2" not in residents


class TestCreateResident:
    @pytest.mark.asyncio
    async def test_forged_barangay_is_overwritten(self, client, users, auth_headers, residents):
        """
        GIVEN staff of A posting a resident with barangay_id B
        WHEN the record is created
        THEN it lands in A
        """
        response = await client.post(
            "/residents/",
            json={**NEW_RESIDENT, "barangay_id": "brgy-b"},
            headers=auth_headers(users["staff-a"]),
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["barangay_id"] == "brgy-a"
        assert data["created_by"] == "staff-a"
        assert residents[data["id"]].barangay_id == "brgy-a"

    @pytest.mark.asyncio
    async def test_unbound_super_admin_must_name_barangay(self, client, users, auth_headers):
        response = await client.post(
            "/residents/", json=NEW_RESIDENT, headers=auth_headers(users["root"])
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "barangay_id is required for Super Admin operations"}

    @pytest.mark.asyncio
    async def test_unbound_super_admin_creates_in_named_barangay(self, client, users, auth_headers):
        response = await client.post(
            "/residents/",
            json={**NEW_RESIDENT, "barangay_id": "brgy-b"},
            headers=auth_headers(users["root"]),
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["barangay_id"] == "brgy-b"

    @pytest.mark.asyncio
    async def test_unbound_super_admin_unknown_barangay(self, client, users, auth_headers, residents):
        response = await client.post(
            "/residents/",
            json={**NEW_RESIDENT, "barangay_id": "no-such-barangay"},
            headers=auth_headers(users["root"]),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "Barangay not found"}
        assert len(residents) == 3
