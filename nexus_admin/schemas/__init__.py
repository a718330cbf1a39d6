"""
Schemas module - Request schemas for API endpoints.

Difference from models:
- Models: what a stored document looks like
- Schemas: API contract (what a client may send)
"""
