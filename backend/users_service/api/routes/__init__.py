"""Route modules for the users service API."""
from . import sessions, users

__all__ = ["sessions", "users"]
