"""
Business logic for reviews.

``ReviewService`` owns the in-memory review collection and the id
counter.  One instance is created at application startup and shared
by every request.  A single lock serialises all reads and writes,
including the file write that follows each mutation, so a listing
never observes a half-applied change and the file always mirrors the
collection as of the last successful save.
"""

import logging
import threading
from typing import List

from ..core.storage import ReviewStorage
from ..schemas.review import Review


logger = logging.getLogger(__name__)


class ReviewNotFoundError(ValueError):
    """Raised when no review carries the requested id."""

    def __init__(self, review_id: int) -> None:
        super().__init__(f"Review {review_id} not found")
        self.review_id = review_id


class ReviewService:
    """Service for submitting, listing and deleting reviews."""

    def __init__(self, storage: ReviewStorage) -> None:
        """Load the persisted collection.

        ``StorageError`` from ``storage.load`` propagates: a corrupt
        file must stop the application rather than start it with a
        partial collection.
        """
        self._storage = storage
        self._lock = threading.Lock()
        self._reviews: List[Review] = storage.load()
        # Ids are never reused, so the counter only moves forward.
        self._id_counter = max((review.id for review in self._reviews), default=0)

    def add(self, name: str, review: str) -> int:
        """Append a new review and return its server-assigned id."""
        with self._lock:
            self._id_counter += 1
            new_review = Review(id=self._id_counter, name=name, review=review)
            self._reviews.append(new_review)
            self._persist()
            logger.info("Review %s submitted by %r", new_review.id, name)
            return new_review.id

    def list(self) -> List[Review]:
        """Return a snapshot of all reviews in submission order."""
        with self._lock:
            return list(self._reviews)

    def remove(self, review_id: int) -> None:
        """Delete the review with ``review_id``.

        Raises ``ReviewNotFoundError`` and leaves the collection and the
        file untouched when no such review exists.
        """
        with self._lock:
            for index, review in enumerate(self._reviews):
                if review.id == review_id:
                    break
            else:
                raise ReviewNotFoundError(review_id)
            del self._reviews[index]
            self._persist()
            logger.info("Review %s deleted", review_id)

    def _persist(self) -> None:
        # Caller must hold self._lock.
        if not self._storage.save(self._reviews):
            logger.warning(
                "Reviews kept in memory only; %d reviews not persisted to %s",
                len(self._reviews),
                self._storage.path,
            )
