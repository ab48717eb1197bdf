"""ID Generator — opaque record identifiers for the API path and the durable store.

Invariants:
    - generate_id() returns 16 lowercase hex chars when the CSPRNG works
    - Fallback is the nanosecond clock as a decimal string (weak under concurrency)
    - sequential_id() is deterministic: same prefix and counter, same id
    - sequence_number() inverts sequential_id(); anything else yields None

Design Decisions:
    - secrets over random: ids are guessable otherwise
    - Fallback logged at WARNING: collisions are possible when two threads hit the
      same nanosecond, so operators must see it rather than rely on it
"""

import logging
import secrets
import time

logger = logging.getLogger(__name__)

ID_BYTES: int = 8
THEME_ID_PREFIX = "theme"
ANSWER_ID_PREFIX = "answer"


def generate_id() -> str:
    """Random hex id; nanosecond timestamp if the random source fails."""
    try:
        return secrets.token_bytes(ID_BYTES).hex()
    except OSError as e:
        logger.warning(f"Random source unavailable, using timestamp id: {e}")
        return str(time.time_ns())


def sequential_id(prefix: str, counter: int) -> str:
    """Durable-store id such as theme_3 or answer_12."""
    return f"{prefix}_{counter}"


def sequence_number(prefix: str, record_id: str) -> int | None:
    """Counter behind a sequential id, or None for ids of any other shape."""
    head, sep, tail = record_id.partition("_")
    if head != prefix or not sep or not (tail.isascii() and tail.isdigit()):
        return None
    return int(tail)
