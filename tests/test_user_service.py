"""
Tests for UserService against a real SQLite database.

Each ``unit_of_work`` block is one committed transaction, mirroring one request.
"""

from unittest.mock import AsyncMock

import pytest

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.services.user_service import UserService
from app.shared.core.exceptions import (
    ConcurrentModificationError,
    DuplicateResourceError,
    NotFoundError,
    OptimisticLockFailure,
    UniqueConstraintViolation,
    ValidationError,
)


async def _create_user(unit_of_work, username: str) -> User:
    async with unit_of_work() as uow:
        return await uow.users.create_user(username)


# ---------------------------------------------------------------------------
# create_user
# ---------------------------------------------------------------------------

async def test_create_user_starts_at_version_zero(unit_of_work) -> None:
    """A new user gets an id and version 0."""
    user = await _create_user(unit_of_work, "alice")

    assert user.id is not None
    assert user.username == "alice"
    assert user.version == 0


async def test_create_user_keeps_username_verbatim(unit_of_work) -> None:
    """Usernames are not trimmed or case-folded."""
    user = await _create_user(unit_of_work, "  Alice ")

    async with unit_of_work() as uow:
        stored = await uow.users.get_user_by_id(user.id)

    assert stored.username == "  Alice "


@pytest.mark.parametrize("username", [None, "", "   ", "\t\n"])
async def test_create_user_rejects_blank_username(unit_of_work, username) -> None:
    """Missing or whitespace-only usernames fail validation."""
    with pytest.raises(ValidationError) as exc_info:
        await _create_user(unit_of_work, username)

    assert exc_info.value.message == (
        "Invalid data when trying to create a user: Username is empty or missing"
    )


async def test_create_user_rejects_duplicate_username(unit_of_work) -> None:
    """A second user with the same username is refused and nothing is stored."""
    first = await _create_user(unit_of_work, "alice")

    with pytest.raises(DuplicateResourceError) as exc_info:
        await _create_user(unit_of_work, "alice")

    assert exc_info.value.message == "User with this username already exists"
    async with unit_of_work() as uow:
        assert (await uow.users.get_user_by_username("alice")).id == first.id


async def test_create_user_usernames_are_case_sensitive(unit_of_work) -> None:
    """'alice' and 'Alice' are distinct usernames."""
    lower = await _create_user(unit_of_work, "alice")
    upper = await _create_user(unit_of_work, "Alice")

    assert lower.id != upper.id


async def test_create_user_translates_lost_race_to_duplicate() -> None:
    """When the store rejects the insert after the pre-check passed, callers still see a duplicate."""
    user_repository = AsyncMock()
    user_repository.get_by_username.return_value = None
    user_repository.create.side_effect = UniqueConstraintViolation("unique violation")
    service = UserService(user_repository, AsyncMock())

    with pytest.raises(DuplicateResourceError) as exc_info:
        await service.create_user("alice")

    assert exc_info.value.message == "Username already exists"


# ---------------------------------------------------------------------------
# get_user_by_id / get_user_by_username
# ---------------------------------------------------------------------------

async def test_get_user_by_id_missing_raises_not_found(unit_of_work) -> None:
    """Unknown ids raise NotFoundError with the id in the message."""
    async with unit_of_work() as uow:
        with pytest.raises(NotFoundError) as exc_info:
            await uow.users.get_user_by_id(99)

    assert exc_info.value.message == "User not found with id: 99"


async def test_get_user_by_username_missing_returns_none(unit_of_work) -> None:
    """Lookup by username is optional and never raises."""
    async with unit_of_work() as uow:
        assert await uow.users.get_user_by_username("nobody") is None


# ---------------------------------------------------------------------------
# update_user
# ---------------------------------------------------------------------------

async def test_update_user_renames_and_bumps_version(unit_of_work) -> None:
    """A successful rename stores the new name and increments the version."""
    user = await _create_user(unit_of_work, "alice")

    async with unit_of_work() as uow:
        updated = await uow.users.update_user(user.id, "alicia")

    assert updated.username == "alicia"
    assert updated.version == 1
    async with unit_of_work() as uow:
        assert await uow.users.get_user_by_username("alice") is None
        assert (await uow.users.get_user_by_id(user.id)).username == "alicia"


async def test_update_user_same_name_is_noop(unit_of_work) -> None:
    """Renaming to the current name succeeds without bumping the version."""
    user = await _create_user(unit_of_work, "alice")

    async with unit_of_work() as uow:
        updated = await uow.users.update_user(user.id, "alice")

    assert updated.version == 0


async def test_update_user_to_taken_name_is_duplicate(unit_of_work) -> None:
    """Taking another user's username is refused and neither user changes."""
    alice = await _create_user(unit_of_work, "alice")
    bob = await _create_user(unit_of_work, "bob")

    with pytest.raises(DuplicateResourceError):
        async with unit_of_work() as uow:
            await uow.users.update_user(bob.id, "alice")

    async with unit_of_work() as uow:
        assert (await uow.users.get_user_by_id(alice.id)).username == "alice"
        assert (await uow.users.get_user_by_id(bob.id)).username == "bob"


async def test_update_user_blank_name_fails_before_lookup(unit_of_work) -> None:
    """Validation wins over a missing user."""
    with pytest.raises(ValidationError):
        async with unit_of_work() as uow:
            await uow.users.update_user(99, "  ")


async def test_update_user_missing_raises_not_found(unit_of_work) -> None:
    with pytest.raises(NotFoundError):
        async with unit_of_work() as uow:
            await uow.users.update_user(99, "ghost")


async def test_update_user_with_stale_expected_version(unit_of_work) -> None:
    """A caller holding an old version cannot overwrite a newer rename."""
    user = await _create_user(unit_of_work, "alice")
    async with unit_of_work() as uow:
        await uow.users.update_user(user.id, "alicia", expected_version=0)

    with pytest.raises(ConcurrentModificationError) as exc_info:
        async with unit_of_work() as uow:
            await uow.users.update_user(user.id, "ally", expected_version=0)

    assert exc_info.value.message == "Failed to update user due to concurrent modification"
    async with unit_of_work() as uow:
        stored = await uow.users.get_user_by_id(user.id)
    assert stored.username == "alicia"
    assert stored.version == 1


async def test_update_user_detects_interleaved_writer(unit_of_work) -> None:
    """Another transaction commits a rename between our read and our write; ours is rejected."""
    user = await _create_user(unit_of_work, "alice")

    async with unit_of_work() as first:
        repository = first.users.user_repository
        write = repository.update

        async def update_after_concurrent_rename(pending):
            async with unit_of_work() as second:
                await second.users.update_user(pending.id, "bob")
            return await write(pending)

        repository.update = update_after_concurrent_rename

        with pytest.raises(ConcurrentModificationError):
            await first.users.update_user(user.id, "carol")

    async with unit_of_work() as uow:
        stored = await uow.users.get_user_by_id(user.id)
    assert stored.username == "bob"
    assert stored.version == 1


async def test_update_user_translates_store_rejections() -> None:
    """Version and unique-key failures at write time map to domain errors."""
    current = User(id=1, username="alice", version=2)
    user_repository = AsyncMock()
    user_repository.get_by_username.return_value = None
    user_repository.get_by_id.return_value = current
    service = UserService(user_repository, AsyncMock())

    user_repository.update.side_effect = OptimisticLockFailure("stale")
    with pytest.raises(ConcurrentModificationError):
        await service.update_user(1, "bob")

    user_repository.update.side_effect = UniqueConstraintViolation("unique violation")
    with pytest.raises(DuplicateResourceError):
        await service.update_user(1, "bob")


# ---------------------------------------------------------------------------
# delete_user
# ---------------------------------------------------------------------------

async def test_delete_user_removes_subscriptions(unit_of_work) -> None:
    """Deleting a user removes every subscription they own, and nobody else's."""
    alice = await _create_user(unit_of_work, "alice")
    bob = await _create_user(unit_of_work, "bob")
    async with unit_of_work() as uow:
        await uow.subscriptions.create_subscription("news", alice.id)
        await uow.subscriptions.create_subscription("sports", alice.id)
        await uow.subscriptions.create_subscription("news", bob.id)

    async with unit_of_work() as uow:
        await uow.users.delete_user(alice.id)

    async with unit_of_work() as uow:
        with pytest.raises(NotFoundError):
            await uow.users.get_user_by_id(alice.id)
        assert await uow.subscriptions.list_user_subscriptions(alice.id) == []
        assert len(await uow.subscriptions.list_user_subscriptions(bob.id)) == 1


async def test_delete_user_frees_username(unit_of_work) -> None:
    """A deleted user's name can be registered again."""
    alice = await _create_user(unit_of_work, "alice")
    async with unit_of_work() as uow:
        await uow.users.delete_user(alice.id)

    again = await _create_user(unit_of_work, "alice")

    assert again.id != alice.id


async def test_delete_user_missing_raises_not_found(unit_of_work) -> None:
    with pytest.raises(NotFoundError):
        async with unit_of_work() as uow:
            await uow.users.delete_user(42)


async def test_delete_user_stale_version_is_concurrent_modification() -> None:
    user_repository = AsyncMock()
    user_repository.get_by_id.return_value = User(id=1, username="alice", version=0)
    user_repository.delete.side_effect = OptimisticLockFailure("stale")
    subscription_repository = AsyncMock()
    subscription_repository.delete_by_user.return_value = 0
    service = UserService(user_repository, subscription_repository)

    with pytest.raises(ConcurrentModificationError):
        await service.delete_user(1)
