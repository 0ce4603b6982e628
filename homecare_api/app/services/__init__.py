"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
the entity store returned by ``storage.get_storage()``.  Routers call
services; services never build HTTP responses.
"""
