"""
API endpoints for reviews.

``/reviews`` accepts new reviews (POST) and lists all of them (GET);
``/delete-review`` removes one review by id (DELETE).  Any other
method on these paths is answered with 405 by the router.

Endpoints are plain functions, so FastAPI runs each request in its
thread pool; the shared ``ReviewService`` does its own locking.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from review_board_api.app.schemas.review import (
    OperationResult,
    Review,
    ReviewCreate,
    ReviewCreated,
    ReviewDelete,
)
from review_board_api.app.services.review_service import (
    ReviewNotFoundError,
    ReviewService,
)


router = APIRouter()


def get_review_service(request: Request) -> ReviewService:
    """Dependency returning the service created at application startup."""
    return request.app.state.review_service


@router.post(
    "/reviews",
    response_model=ReviewCreated,
    summary="Submit a review",
)
def create_review(
    data: ReviewCreate,
    service: ReviewService = Depends(get_review_service),
) -> ReviewCreated:
    """Store a new review and return the id assigned to it."""
    review_id = service.add(data.name, data.review)
    return ReviewCreated(success=True, id=review_id)


@router.get(
    "/reviews",
    response_model=List[Review],
    summary="List reviews",
)
def list_reviews(
    service: ReviewService = Depends(get_review_service),
) -> List[Review]:
    """Return every review in submission order."""
    return service.list()


@router.delete(
    "/delete-review",
    response_model=OperationResult,
    summary="Delete a review",
)
def delete_review(
    data: ReviewDelete,
    service: ReviewService = Depends(get_review_service),
) -> OperationResult:
    """Delete a review by id.  Unknown ids yield 404."""
    try:
        service.remove(data.id)
    except ReviewNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return OperationResult(success=True)
