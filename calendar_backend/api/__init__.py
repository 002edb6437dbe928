"""
API layer for the calendar backend.

Exposes HTTP endpoints under /api/v1 (auth, users, events).
"""
