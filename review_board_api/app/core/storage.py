"""
JSON file persistence for the review collection.

The whole collection lives in a single file holding a JSON array of
review objects, pretty-printed with two-space indentation.  The file is
read once at startup and rewritten in full after every mutation; there
is no incremental or append format.

Loading is strict: a file that exists but cannot be read or parsed
raises ``StorageError`` so the application refuses to start with a
partially loaded collection.  Saving is best effort: failures are
logged and reported through the return value, never raised, because
the in-memory collection stays authoritative.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from ..schemas.review import Review


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the backing file exists but cannot be loaded."""


def resolve_path(path: Union[str, Path]) -> Path:
    """Resolve ``path`` against the current working directory."""
    return Path(path).expanduser().resolve()


class ReviewStorage:
    """Reads and writes the review collection as one JSON document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = resolve_path(path)

    def load(self) -> List[Review]:
        """Read every review from the backing file.

        A missing file is an empty collection.  Any other read error,
        invalid JSON, a document that is not an array, a malformed
        element or a repeated id raises ``StorageError``.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Reviews file %s does not exist, starting empty", self.path)
            return []
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Failed to parse {self.path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(
                f"Failed to parse {self.path}: expected a JSON array, got {type(data).__name__}"
            )

        reviews: List[Review] = []
        seen_ids = set()
        for position, item in enumerate(data):
            try:
                review = Review.model_validate(item)
            except ValidationError as e:
                raise StorageError(
                    f"Invalid review at index {position} in {self.path}: {e}"
                ) from e
            if review.id in seen_ids:
                raise StorageError(f"Duplicate review id {review.id} in {self.path}")
            seen_ids.add(review.id)
            reviews.append(review)

        logger.info("Loaded %d reviews from %s", len(reviews), self.path)
        return reviews

    def save(self, reviews: Iterable[Review]) -> bool:
        """Overwrite the backing file with ``reviews``.

        Returns ``True`` on success.  On failure a warning is logged and
        ``False`` is returned; the caller keeps its in-memory state.
        """
        try:
            payload = json.dumps(
                [review.model_dump() for review in reviews],
                indent=2,
                ensure_ascii=False,
            )
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to write reviews to %s: %s", self.path, e)
            return False
        return True
