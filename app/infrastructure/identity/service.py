"""Authenticated session state.

``AuthSession`` owns the signed-in user snapshot. Everything else reads it
through ``user``, ``has_permission`` and ``has_role``, which are pure
functions of the loaded user.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from infrastructure.clients import PortalApiClient
from infrastructure.identity.models import User
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.persistence import PreferenceStore
from infrastructure.persistence.preferences import AUTH_TOKEN_KEY, USER_KEY

logger = get_module_logger()


class AuthSession:
    """Login state persisted across restarts.

    The token and the last user payload are kept in the preference store.
    On startup ``restore()`` reloads them and re-validates the token with
    the API.

    Usage:
        session = AuthSession(client=client, store=store)
        session.restore()

        result = session.login({"email": "a@example.com", "password": "..."})
        if result.is_success and session.has_permission("manage-products"):
            ...
    """

    def __init__(self, client: PortalApiClient, store: PreferenceStore):
        self._client = client
        self._store = store
        self._user: Optional[User] = None

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def token(self) -> Optional[str]:
        return self._store.get(AUTH_TOKEN_KEY)

    def has_permission(self, name: Optional[str]) -> bool:
        return self._user.has_permission(name) if self._user else False

    def has_role(self, name: Optional[str]) -> bool:
        return self._user.has_role(name) if self._user else False

    def restore(self) -> Optional[User]:
        """Reload the saved session and confirm it with the API.

        Returns:
            The restored user, or None when there is no valid session.
        """
        token = self._store.get(AUTH_TOKEN_KEY)
        saved_user = self._store.get(USER_KEY)
        if not token or not saved_user:
            return None

        user = self._load_user(saved_user)
        if user is None:
            self.clear()
            return None
        self._user = user

        result = self._client.get_user()
        if not result.is_success:
            logger.warning(
                "session_verification_failed",
                status=result.status.value,
                error_code=result.error_code,
            )
            self.clear()
            return None

        verified = self._load_user(result.data)
        if verified is None:
            self.clear()
            return None

        self._set_user(verified)
        logger.info("session_restored", user_id=verified.id)
        return verified

    def login(self, credentials: Dict[str, Any]) -> OperationResult:
        """Sign in and persist the session.

        Args:
            credentials: Payload for ``POST /login`` (email and password).

        Returns:
            OperationResult carrying the User on success, or the API error.
        """
        result = self._client.login(credentials)
        if not result.is_success:
            logger.info("login_failed", error_code=result.error_code)
            return result

        data = result.data if isinstance(result.data, dict) else {}
        token = data.get("token")
        user = self._load_user(data.get("user"))
        if not token or user is None:
            logger.error("login_response_incomplete")
            return OperationResult.permanent_error(
                "Login failed", error_code="INVALID_LOGIN_RESPONSE"
            )

        self._store.set(AUTH_TOKEN_KEY, token)
        self._set_user(user)
        logger.info("login_succeeded", user_id=user.id)
        return OperationResult.success(data=user, message="Login successful!")

    def logout(self) -> OperationResult:
        """Sign out. Local state is cleared even if the API call fails."""
        if self.is_authenticated:
            result = self._client.logout()
            if not result.is_success:
                logger.warning("logout_request_failed", error_code=result.error_code)
        self.clear()
        return OperationResult.success(message="Logged out successfully")

    def change_password(self, data: Dict[str, Any]) -> OperationResult:
        result = self._client.change_password(data)
        if result.is_success:
            return OperationResult.success(
                data=result.data, message="Password changed successfully!"
            )
        return result

    def clear(self) -> None:
        """Drop the stored token and user without calling the API."""
        self._store.remove(AUTH_TOKEN_KEY)
        self._store.remove(USER_KEY)
        self._user = None
        logger.info("session_cleared")

    def _set_user(self, user: User) -> None:
        self._user = user
        self._store.set(USER_KEY, user.model_dump(mode="json"))

    @staticmethod
    def _load_user(payload: Any) -> Optional[User]:
        if not isinstance(payload, dict):
            return None
        try:
            return User.model_validate(payload)
        except ValidationError as e:
            logger.warning("invalid_user_payload", error=str(e))
            return None
