"""
Pydantic schema definitions for API payloads.

Schemas are separated from database access to decouple the API
representation from persistence.
"""
