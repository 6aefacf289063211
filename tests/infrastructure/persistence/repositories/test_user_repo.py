"""Test user repository principal lookups"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from barangay_records.domain.enums import AccountStatus, Role
from barangay_records.infrastructure.persistence.models.user import User
from barangay_records.infrastructure.persistence.repositories.resident_repo import \
    ResidentRepository
from barangay_records.infrastructure.persistence.repositories.user_repo import \
    UserRepository


def result_with(row):
    result = MagicMock()
    result.one_or_none.return_value = row
    return result


@pytest.fixture
def mock_db():
    """Mock async session"""
    return AsyncMock()


@pytest.fixture
def user_repo(mock_db):
    return UserRepository(mock_db)


def make_user(barangay_id="brgy-a", role=Role.STAFF, status=AccountStatus.ACTIVE):
    return User(
        id="user-1",
        barangay_id=barangay_id,
        email="user@example.com",
        hashed_password="x",
        role=role.value,
        status=status.value,
    )


@pytest.mark.asyncio
async def test_get_principal_joins_barangay(user_repo, mock_db):
    """Principal carries the live role, status and barangay active flag"""
    mock_db.execute.return_value = result_with((make_user(), False))

    principal = await user_repo.get_principal("user-1")

    assert principal.id == "user-1"
    assert principal.role == Role.STAFF
    assert principal.tenant_id == "brgy-a"
    assert principal.tenant_active is False
    assert principal.status == AccountStatus.ACTIVE

    stmt = mock_db.execute.await_args.args[0]
    assert "LEFT OUTER JOIN barangay" in str(stmt)


@pytest.mark.asyncio
async def test_get_principal_unknown_user(user_repo, mock_db):
    mock_db.execute.return_value = result_with(None)
    assert await user_repo.get_principal("ghost") is None


@pytest.mark.asyncio
async def test_get_principal_unbound_super_admin(user_repo, mock_db):
    mock_db.execute.return_value = result_with(
        (make_user(barangay_id=None, role=Role.SUPER_ADMIN), None)
    )

    principal = await user_repo.get_principal("user-1")

    assert principal.tenant_id is None
    assert principal.tenant_active is None
    assert principal.is_unrestricted


@pytest.mark.asyncio
async def test_get_principal_reads_every_time(user_repo, mock_db):
    mock_db.execute.return_value = result_with((make_user(), True))

    await user_repo.get_principal("user-1")
    await user_repo.get_principal("user-1")

    assert mock_db.execute.await_count == 2


@pytest.mark.asyncio
async def test_resident_search_applies_scope_filter(mock_db):
    """The barangay filter lands in both the page and the count query"""
    page = MagicMock()
    page.scalars.return_value.all.return_value = []
    count = MagicMock()
    count.scalar_one.return_value = 0
    mock_db.execute.side_effect = [page, count]

    residents, total = await ResidentRepository(mock_db).search({"barangay_id": "brgy-a"})

    assert residents == [] and total == 0
    for call in mock_db.execute.await_args_list:
        assert "resident.barangay_id = :barangay_id_1" in str(call.args[0])


@pytest.mark.asyncio
async def test_find_all_applies_every_filter(user_repo, mock_db):
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    mock_db.execute.return_value = result

    await user_repo.find_all({"approval_status": "pending", "barangay_id": "brgy-a"})

    sql = str(mock_db.execute.await_args.args[0])
    assert '"user".approval_status = :approval_status_1' in sql
    assert '"user".barangay_id = :barangay_id_1' in sql
