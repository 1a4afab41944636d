import re
import time
from typing import Callable
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.crud import union as union_crud
from app.core.logging_config import logger

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUNS = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")


def normalize_slug(name: str) -> str:
    """
    Turn a display name into a URL-safe base slug.
    
    "Ironworkers Local 123" -> "ironworkers-local-123". Names made only of
    punctuation or non-ASCII letters normalise to "".
    """
    slug = name.lower().strip()
    slug = _DISALLOWED_CHARS.sub("", slug)
    slug = _WHITESPACE_RUNS.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")


class SlugAllocator:
    """
    Picks an unused slug for a new union.
    
    The result is only a candidate: another request may insert the same slug
    between this check and the caller's insert. The unique constraint on
    ``unions.slug`` decides, and UnionService.create_union retries on loss.
    """

    def __init__(self, crud=union_crud, clock: Callable[[], float] = time.time):
        self.crud = crud
        self.clock = clock

    def timestamp_slug(self, base: str) -> str:
        return f"{base}-{int(self.clock() * 1000)}"

    def allocate(self, db: Session, name: str) -> str:
        """
        Return ``base``, or ``base-1``, ``base-2``... whichever is free first.
        
        If an existence check fails the counter search is abandoned and a
        millisecond-timestamp suffix is used instead.
        """
        base = normalize_slug(name)
        try:
            # An empty base is never routable on its own, start at "-1"
            if base and not self.crud.slug_exists(db, base):
                return base
            counter = 1
            while True:
                candidate = f"{base}-{counter}"
                if not self.crud.slug_exists(db, candidate):
                    return candidate
                counter += 1
        except SQLAlchemyError as e:
            db.rollback()
            fallback = self.timestamp_slug(base)
            logger.warning(f"Slug lookup failed for base '{base}', using {fallback}: {type(e).__name__}: {str(e)}")
            return fallback


# Create a singleton instance
slug_allocator = SlugAllocator()
