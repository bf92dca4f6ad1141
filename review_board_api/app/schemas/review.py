"""
Pydantic schemas for reviews.

A review is a short free-text record submitted by a user.  The server
assigns the identifier; clients only send a display name and the
review text.  Strict field types are used so that, for example, a
numeric string is not silently accepted as a review id.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class Review(BaseModel):
    """A stored review, as persisted on disk and returned by the API."""

    model_config = ConfigDict(frozen=True)

    id: StrictInt = Field(..., description="Server-assigned identifier")
    name: StrictStr = Field("", description="Display name of the reviewer")
    review: StrictStr = Field("", description="Review text")


class ReviewCreate(BaseModel):
    """Schema for submitting a new review."""

    name: StrictStr = Field(..., description="Display name of the reviewer")
    review: StrictStr = Field(..., description="Review text")


class ReviewDelete(BaseModel):
    """Schema for deleting a review by its identifier."""

    id: StrictInt = Field(..., description="Identifier of the review to delete")


class OperationResult(BaseModel):
    """Generic success flag returned by mutating endpoints."""

    success: StrictBool = True


class ReviewCreated(OperationResult):
    """Response for a newly created review."""

    id: StrictInt
