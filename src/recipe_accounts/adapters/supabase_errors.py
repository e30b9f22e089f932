"""Translation of Supabase client failures into application errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError
from storage3.exceptions import StorageApiError

from recipe_accounts.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


@contextmanager
def translate_errors(
    operation: str, conflict_message: str | None = None
) -> Iterator[None]:
    """Map PostgREST, Storage and transport errors raised inside the block.

    Unique violations become ConflictError, everything else is logged and
    re-raised as InternalError without the underlying detail.
    """
    try:
        yield
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            logger.info("Unique constraint violated during %s", operation)
            raise ConflictError(conflict_message) from exc
        logger.exception("Supabase request failed during %s", operation)
        raise InternalError() from exc
    except (StorageApiError, httpx.HTTPError) as exc:
        logger.exception("Supabase request failed during %s", operation)
        raise InternalError() from exc
