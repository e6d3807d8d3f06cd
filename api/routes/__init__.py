"""API route modules."""
from api.routes import session, tests

__all__ = ["session", "tests"]
