from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from workshops.common.errors import ApplicationError, NotFoundError
from workshops.workshop4.app.db import init_db
from workshops.workshop4.app.services import AuthService, MessageService, TaskService

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine: AsyncEngine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


async def test_register_hashes_password(session: AsyncSession) -> None:
    user = await AuthService(session).register_user(username="ada", password="s3cret")

    assert user.id is not None
    assert user.password_hash != "s3cret"
    assert user.password_hash.startswith("$argon2")
    assert user.check_password("s3cret")
    assert not user.check_password("wrong")


async def test_register_rejects_duplicate_username(session: AsyncSession) -> None:
    service = AuthService(session)
    await service.register_user(username="ada", password="one")

    with pytest.raises(ApplicationError) as exc:
        await service.register_user(username="ada", password="two")

    assert exc.value.message == "Username already exists!"
    assert exc.value.status_code == 409


async def test_authenticate_user(session: AsyncSession) -> None:
    service = AuthService(session)
    await service.register_user(username="ada", password="s3cret")

    assert (await service.authenticate_user("ada", "s3cret")) is not None
    assert await service.authenticate_user("ada", "nope") is None
    assert await service.authenticate_user("nobody", "s3cret") is None


async def test_task_updates_only_touch_given_fields(session: AsyncSession) -> None:
    owner = await AuthService(session).register_user(username="ada", password="pw")
    assert owner.id is not None
    service = TaskService(session)
    task = await service.create_task(owner_id=owner.id, title="Draft")
    assert task.id is not None

    renamed = await service.update_task(task.id, owner_id=owner.id, title="Final")
    assert renamed.title == "Final"
    assert renamed.done is False

    completed = await service.update_task(task.id, owner_id=owner.id, done=True)
    assert completed.title == "Final"
    assert completed.done is True


async def test_tasks_of_other_owners_are_missing(session: AsyncSession) -> None:
    auth = AuthService(session)
    owner = await auth.register_user(username="ada", password="pw")
    other = await auth.register_user(username="bob", password="pw")
    assert owner.id is not None and other.id is not None
    service = TaskService(session)
    task = await service.create_task(owner_id=owner.id, title="Mine")
    assert task.id is not None

    with pytest.raises(NotFoundError):
        await service.delete_task(task.id, owner_id=other.id)

    await service.delete_task(task.id, owner_id=owner.id)
    assert await service.list_tasks_for_owner(owner.id) == []


async def test_recent_messages_are_chronological(session: AsyncSession) -> None:
    user = await AuthService(session).register_user(username="ada", password="pw")
    assert user.id is not None
    service = MessageService(session)
    for text in ("first", "second", "third"):
        await service.post_message(user_id=user.id, author=user.username, text=text)

    latest_two = await service.recent_messages(2)

    assert [message.text for message in latest_two] == ["second", "third"]
