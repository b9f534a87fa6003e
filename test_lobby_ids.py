import asyncio
import random
import string

import pytest

from app.exceptions import GenerationExhausted
from app.services.lobby_ids import generate_lobby_id, random_lobby_id


class ScriptedRandom(random.Random):
    """Yields letters from a fixed script instead of random ones."""

    def __init__(self, letters):
        super().__init__()
        self._letters = iter(letters)

    def choice(self, seq):
        return next(self._letters)


def test_random_lobby_id_shape():
    lobby_id = random_lobby_id(rng=random.Random(7))
    assert len(lobby_id) == 6
    assert set(lobby_id) <= set(string.ascii_lowercase)


def test_generate_skips_taken_ids():
    taken = {"aaaaaa", "bbbbbb"}

    async def exists(candidate):
        return candidate in taken

    rng = ScriptedRandom("aaaaaa" + "bbbbbb" + "cccccc")
    assert asyncio.run(generate_lobby_id(exists, rng=rng)) == "cccccc"


def test_generate_gives_up_after_attempt_budget():
    calls = []

    async def exists(candidate):
        calls.append(candidate)
        return True

    with pytest.raises(GenerationExhausted):
        asyncio.run(generate_lobby_id(exists, attempts=10, rng=random.Random(1)))
    assert len(calls) == 10


def test_generate_succeeds_on_last_attempt():
    async def exists(candidate):
        return candidate != "zzzzzz"

    rng = ScriptedRandom("a" * 6 * 9 + "zzzzzz")
    assert asyncio.run(generate_lobby_id(exists, attempts=10, rng=rng)) == "zzzzzz"
