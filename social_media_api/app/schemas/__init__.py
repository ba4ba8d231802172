"""
Pydantic schema definitions for API payloads.

Each resource (users, posts) defines its own request and response
models.  Schemas are separated from the in-memory records in
``core.store`` to decouple API representation from storage.
"""
