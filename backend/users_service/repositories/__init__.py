"""Store handles wrapping an AsyncSession, injected into the managers."""
from .sessions import SessionStore, SqlAlchemySessionStore
from .users import SqlAlchemyUserStore, UserStore

__all__ = ["SessionStore", "SqlAlchemySessionStore", "SqlAlchemyUserStore", "UserStore"]
