"""
Pydantic schema definitions for API payloads.

Request bodies, response bodies and the persisted review record are
all described here so that the HTTP layer and the storage layer agree
on one representation.
"""
