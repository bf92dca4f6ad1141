"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call services and never touch storage directly, so the JSON file
backend can be replaced without changing the routes.
"""
