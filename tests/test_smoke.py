"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify calendar_backend package can be imported."""
    from calendar_backend.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "storage_backend")


def test_application_routes_registered():
    from calendar_backend.main import app

    paths = app.openapi()["paths"]
    assert "/api/v1/auth/login" in paths
    assert "/api/v1/users/search" in paths
    assert "/api/v1/events/{event_id}/participants/{participant_id}" in paths
