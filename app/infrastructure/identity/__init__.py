"""User identity and session state.

Usage:
    from infrastructure.identity import AuthSession, User

    session = AuthSession(client=client, store=store)
    session.restore()
    if session.user and session.user.is_super_admin:
        ...
"""

from infrastructure.identity.models import Permission, Role, User
from infrastructure.identity.service import AuthSession

__all__ = ["AuthSession", "User", "Role", "Permission"]
