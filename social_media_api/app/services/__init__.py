"""
Service layer abstraction.

Each service encapsulates the business logic for one resource and works
against an injected in-memory store.  Swapping the stores for a
database-backed implementation would not require changes to the API
handlers.
"""
