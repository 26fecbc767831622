"""SQLAlchemy models exposed for metadata creation and imports."""
from .session import UserSession
from .user import User

__all__ = ["User", "UserSession"]
