"""
Schemas module - Request/Response schemas for API endpoints.

ORM rows live in satrecruit.db.models; these schemas are the API contract
(what the client sends/receives, camelCase on the wire).
"""
