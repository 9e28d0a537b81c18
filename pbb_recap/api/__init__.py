"""HTTP API (Flask): recap blueprint and app factory."""
from pbb_recap.api.app import create_app

__all__ = ["create_app"]
