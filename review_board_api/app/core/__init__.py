"""
Core infrastructure: configuration, logging setup and file storage.
"""
