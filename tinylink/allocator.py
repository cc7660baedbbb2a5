# tinylink/allocator.py
import logging
from typing import Optional

from . import utils
from .config import MAX_GENERATION_ATTEMPTS
from .errors import AllocationExhausted, CodeConflict, InvalidFormat
from .store import LinkStore

logger = logging.getLogger("tinylink.allocator")


def allocate_code(store: LinkStore, candidate: Optional[str] = None) -> str:
    """Return a code that is free at the time of the call.

    The lookup here only produces a clean error early; the unique constraint
    checked by ``LinkStore.insert`` is what actually guarantees uniqueness.
    """
    if candidate:
        if not utils.is_valid_code(candidate):
            raise InvalidFormat()
        if store.code_exists(candidate):
            raise CodeConflict()
        return candidate

    for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
        code = utils.generate_short_code()
        if not store.code_exists(code):
            return code
        logger.info("Generated code %s already taken (attempt %d)", code, attempt)

    logger.error("No free code after %d attempts", MAX_GENERATION_ATTEMPTS)
    raise AllocationExhausted()
