import asyncio
import random

import pytest

from app.exceptions import BodyTooLong, GenerationExhausted, NameTooLong, SenderNotFound, UnknownLobby
from app.services.lobby_service import LobbyService


class ConstantRandom(random.Random):
    """Always picks the first letter, so every candidate id is 'aaaaaa'."""

    def choice(self, seq):
        return seq[0]


def test_walkthrough(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            lobby_id = await service.create_lobby()
            assert len(lobby_id) == 6
            assert await service.lobby_exists(lobby_id)

            view = await service.enter_lobby(lobby_id, "bob")
            assert view.id == lobby_id
            assert view.messages == []
            assert [(s.name, s.is_typing) for s in view.senders] == [("bob", False)]

            view = await service.post_message(lobby_id, "bob", "hi")
            assert [(m.sender_name, m.body) for m in view.messages] == [("bob", "hi")]
            assert [s.name for s in view.senders] == ["bob"]

            assert await service.set_typing(lobby_id, "bob", True) is None

            view = await service.fetch_view(lobby_id)
            assert [(s.name, s.is_typing) for s in view.senders] == [("bob", True)]

    asyncio.run(main())


def test_created_ids_are_unique(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store, rng=random.Random(42))
            ids = [await service.create_lobby() for _ in range(50)]
            assert len(set(ids)) == 50

    asyncio.run(main())


def test_create_lobby_exhausted(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store, rng=ConstantRandom())
            assert await service.create_lobby() == "aaaaaa"
            with pytest.raises(GenerationExhausted):
                await service.create_lobby()

    asyncio.run(main())


def test_post_message_validation_happens_first(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            lobby_id = await service.create_lobby()

            with pytest.raises(BodyTooLong):
                await service.post_message(lobby_id, "bob", "x" * 513)
            with pytest.raises(NameTooLong):
                await service.post_message(lobby_id, "b" * 33, "hi")
            assert (await service.fetch_view(lobby_id)).messages == []

            view = await service.post_message(lobby_id, "b" * 32, "x" * 512)
            assert len(view.messages) == 1

    asyncio.run(main())


def test_unknown_lobby_writes_nothing(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            with pytest.raises(UnknownLobby):
                await service.post_message("nolobby", "bob", "hi")
            with pytest.raises(UnknownLobby):
                await service.enter_lobby("nolobby", "bob")
            with pytest.raises(UnknownLobby):
                await service.fetch_view("nolobby")
            assert await store.messages_for("nolobby") == []
            assert await store.senders_for("nolobby") == []
            assert not await service.lobby_exists("nolobby")

    asyncio.run(main())


def test_enter_lobby_name_too_long(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store, max_name_length=4)
            lobby_id = await service.create_lobby()
            with pytest.raises(NameTooLong):
                await service.enter_lobby(lobby_id, "alice")
            assert (await service.fetch_view(lobby_id)).senders == []

    asyncio.run(main())


def test_join_twice_keeps_typing_flag(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            lobby_id = await service.create_lobby()
            await service.enter_lobby(lobby_id, "alice")
            await service.set_typing(lobby_id, "alice", True)
            view = await service.enter_lobby(lobby_id, "alice")
            assert [(s.name, s.is_typing) for s in view.senders] == [("alice", True)]

    asyncio.run(main())


def test_typing_for_ghost_sender(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            lobby_id = await service.create_lobby()
            with pytest.raises(SenderNotFound):
                await service.set_typing(lobby_id, "ghost", True)
            assert (await service.fetch_view(lobby_id)).senders == []

    asyncio.run(main())


def test_concurrent_posts_see_their_own_message(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            lobby_id = await service.create_lobby()

            bodies = [f"msg {i}" for i in range(20)]
            views = await asyncio.gather(
                *(service.post_message(lobby_id, "bob", body) for body in bodies)
            )
            for body, view in zip(bodies, views):
                assert body in [m.body for m in view.messages]

            final = await service.fetch_view(lobby_id)
            ids = [m.id for m in final.messages]
            assert len(ids) == 20
            assert ids == sorted(set(ids))

    asyncio.run(main())


def test_concurrent_joins_make_one_sender(open_store):
    async def main():
        async with open_store() as store:
            service = LobbyService(store)
            lobby_id = await service.create_lobby()
            await asyncio.gather(*(service.enter_lobby(lobby_id, "alice") for _ in range(10)))
            view = await service.fetch_view(lobby_id)
            assert [s.name for s in view.senders] == ["alice"]

    asyncio.run(main())
