"""
Calendar Backend Application - root package.

This package contains the FastAPI app entry point (main.py), API routes,
the event access and participation rules (domain + application layers),
and the MongoDB / in-memory persistence adapters.
"""
