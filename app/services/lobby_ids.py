"""Random lobby codes, checked for collisions against existing lobbies."""

import random
import string
from typing import Awaitable, Callable, Optional

from app.exceptions import GenerationExhausted

LOBBY_ID_ALPHABET = string.ascii_lowercase
LOBBY_ID_LENGTH = 6
MAX_ATTEMPTS = 10

_system_rng = random.SystemRandom()


def random_lobby_id(length: int = LOBBY_ID_LENGTH, rng: Optional[random.Random] = None) -> str:
    rng = rng or _system_rng
    return "".join(rng.choice(LOBBY_ID_ALPHABET) for _ in range(length))


async def generate_lobby_id(
    exists: Callable[[str], Awaitable[bool]],
    length: int = LOBBY_ID_LENGTH,
    attempts: int = MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Return a lobby id for which ``exists`` is False.

    At most ``attempts`` candidates are drawn; if all of them collide,
    ``GenerationExhausted`` is raised rather than trying further.
    """
    for _ in range(attempts):
        candidate = random_lobby_id(length, rng)
        if not await exists(candidate):
            return candidate
    raise GenerationExhausted()
