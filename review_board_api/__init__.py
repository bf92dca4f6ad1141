"""
Top-level package for the Review Board API.

A small HTTP service that accepts, lists and deletes short text
reviews and mirrors them to a local JSON file.  All functionality
lives in submodules under ``app``.
"""

__all__ = []
