"""
API package containing the HTTP routes.

``router.py`` exposes a single ``router`` which includes the
domain-specific endpoint routers from ``endpoints``.
"""
