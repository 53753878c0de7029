"""HTTP client for the portal REST API.

Every call returns an ``OperationResult`` instead of raising, so pages and
session services can branch on ``result.is_success`` and show the message.

The API wraps payloads in an envelope (``{"success", "data", "message"}``);
successful envelopes are unwrapped so ``result.data`` is the payload itself.

Usage:
    from infrastructure.clients import PortalApiClient

    client = PortalApiClient(
        token_provider=lambda: store.get("auth_token"),
        language_provider=lambda: languages.current_language,
    )

    result = client.get_products(params={"category": 3})
    if result.is_success:
        products = result.data
"""

import json
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import requests
import structlog
from pydantic import ValidationError

from infrastructure.configuration import settings
from infrastructure.models import APIResponse
from infrastructure.operations import OperationResult

logger = structlog.get_logger(__name__)

ADMIN_RESOURCES = frozenset(
    {
        "users",
        "products",
        "product-categories",
        "press-releases",
        "hero-slides",
        "partners",
        "form-submissions",
        "languages",
        "media",
    }
)


class PortalApiClient:
    """HTTP client for the portal REST API.

    Attributes:
        base_url: Base URL for all requests (default: API_BASE_URL setting)
        timeout: Default timeout in seconds
        token_provider: Returns the bearer token, or None when signed out
        language_provider: Returns the language sent as Accept-Language
        on_unauthorized: Called after any 401 response
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        language_provider: Optional[Callable[[], Optional[str]]] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.api.API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.api.API_TIMEOUT_SECONDS
        self.token_provider = token_provider
        self.language_provider = language_provider
        self.on_unauthorized = on_unauthorized
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        self._logger = logger.bind(component="portal_api_client")

    # Auth

    def login(self, credentials: Dict[str, Any]) -> OperationResult:
        return self.post("/login", json_data=credentials)

    def logout(self) -> OperationResult:
        return self.post("/logout")

    def get_user(self) -> OperationResult:
        return self.get("/user")

    def change_password(self, data: Dict[str, Any]) -> OperationResult:
        return self.post("/change-password", json_data=data)

    # Public content

    def get_languages(self) -> OperationResult:
        return self.get("/languages")

    def get_company_info(self) -> OperationResult:
        return self.get("/public/company-info")

    def get_products(self, params: Optional[Dict[str, Any]] = None) -> OperationResult:
        return self.get("/public/products", params=params)

    def get_product(self, product_id: Any) -> OperationResult:
        return self.get(f"/public/products/{_segment(product_id)}")

    def get_product_categories(
        self, params: Optional[Dict[str, Any]] = None
    ) -> OperationResult:
        return self.get("/public/product-categories", params=params)

    def get_press_releases(
        self, params: Optional[Dict[str, Any]] = None
    ) -> OperationResult:
        return self.get("/public/press-releases", params=params)

    def get_press_release(self, release_id: Any) -> OperationResult:
        return self.get(f"/public/press-releases/{_segment(release_id)}")

    def get_partners(self, params: Optional[Dict[str, Any]] = None) -> OperationResult:
        return self.get("/public/partners", params=params)

    def submit_contact_form(self, data: Dict[str, Any]) -> OperationResult:
        return self.post("/public/contact", json_data=data)

    # Admin

    def admin_resource(self, name: str) -> "AdminResource":
        """Return CRUD helpers for an admin resource.

        Raises:
            ValueError: If name is not a known admin resource.
        """
        if name not in ADMIN_RESOURCES:
            raise ValueError(f"Unknown admin resource: {name}")
        return AdminResource(self, name)

    # Transport

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        return self._request("GET", path, params=params, timeout=timeout)

    def post(
        self,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        return self._request(
            "POST", path, json_data=json_data, params=params, timeout=timeout
        )

    def put(
        self,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        return self._request(
            "PUT", path, json_data=json_data, params=params, timeout=timeout
        )

    def delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        return self._request("DELETE", path, params=params, timeout=timeout)

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        token = self.token_provider() if self.token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        language = self.language_provider() if self.language_provider else None
        headers["Accept-Language"] = language or settings.i18n.DEFAULT_LANGUAGE
        return headers

    def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        """Send an HTTP request and classify the outcome.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Endpoint path relative to base_url
            json_data: JSON request body
            params: Query parameters
            timeout: Request timeout

        Returns:
            OperationResult with the unwrapped payload or the error
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        timeout = timeout or self.timeout

        log = self._logger.bind(method=method, path=path)
        log.debug("portal_api_request")

        try:
            response = self._session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=timeout,
            )
        except requests.Timeout:
            log.error("portal_api_timeout", timeout=timeout)
            return OperationResult.transient_error(
                message=f"Request timeout after {timeout}s",
                error_code="TIMEOUT",
            )
        except requests.ConnectionError as e:
            log.error("portal_api_connection_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Connection error: {e}",
                error_code="CONNECTION_ERROR",
            )
        except requests.RequestException as e:
            log.error("portal_api_request_error", error=str(e))
            return OperationResult.permanent_error(
                message=f"Request failed: {e}",
                error_code="REQUEST_ERROR",
            )

        log = log.bind(status_code=response.status_code)

        response_data: Optional[Any] = None
        if response.content:
            try:
                response_data = response.json()
            except (json.JSONDecodeError, ValueError):
                log.warning("non_json_response", content=response.text[:200])

        if 200 <= response.status_code < 300:
            return self._unwrap(method, path, response_data, log)

        error_message = _extract_error_message(response_data, response.text)

        if 400 <= response.status_code < 500:
            log.warning("portal_api_client_error", error=error_message)

            if response.status_code == 401:
                if self.on_unauthorized:
                    self.on_unauthorized()
                return OperationResult.unauthorized(error_message, error_code="HTTP_401")
            if response.status_code == 403:
                return OperationResult.unauthorized(error_message, error_code="HTTP_403")
            if response.status_code == 404:
                return OperationResult.not_found(error_message, error_code="HTTP_404")
            if response.status_code == 429:
                return OperationResult.transient_error(
                    message=error_message,
                    error_code="HTTP_429",
                    retry_after=_retry_after(response),
                )
            return OperationResult.permanent_error(
                error_message,
                error_code=f"HTTP_{response.status_code}",
                data=response_data,
            )

        if 500 <= response.status_code < 600:
            log.error("portal_api_server_error", error=error_message)
            return OperationResult.transient_error(
                message=error_message,
                error_code=f"HTTP_{response.status_code}",
                retry_after=_retry_after(response),
            )

        log.error("portal_api_unexpected_status")
        return OperationResult.transient_error(
            message=f"Unexpected status code: {response.status_code}",
            error_code=f"HTTP_{response.status_code}",
        )

    def _unwrap(
        self, method: str, path: str, response_data: Optional[Any], log
    ) -> OperationResult:
        if not isinstance(response_data, dict) or "success" not in response_data:
            return OperationResult.success(
                data=response_data, message=f"{method} {path} succeeded"
            )

        try:
            envelope = APIResponse[Any].model_validate(response_data)
        except ValidationError as e:
            log.warning("invalid_response_envelope", error=str(e))
            return OperationResult.permanent_error(
                message="Invalid response envelope",
                error_code="INVALID_ENVELOPE",
            )

        if not envelope.success:
            log.warning("portal_api_rejected", message=envelope.message)
            return OperationResult.permanent_error(
                message=envelope.message or f"{method} {path} failed",
                error_code=envelope.error_code or "API_REJECTED",
            )

        return OperationResult.success(
            data=envelope.data,
            message=envelope.message or f"{method} {path} succeeded",
        )


class AdminResource:
    """CRUD helpers for one ``/admin/<name>`` resource."""

    def __init__(self, client: PortalApiClient, name: str):
        self._client = client
        self.name = name
        self.path = f"/admin/{name}"

    def list(self, params: Optional[Dict[str, Any]] = None) -> OperationResult:
        return self._client.get(self.path, params=params)

    def get(self, item_id: Any) -> OperationResult:
        return self._client.get(f"{self.path}/{_segment(item_id)}")

    def create(self, data: Dict[str, Any]) -> OperationResult:
        return self._client.post(self.path, json_data=data)

    def update(self, item_id: Any, data: Dict[str, Any]) -> OperationResult:
        return self._client.put(f"{self.path}/{_segment(item_id)}", json_data=data)

    def delete(self, item_id: Any) -> OperationResult:
        return self._client.delete(f"{self.path}/{_segment(item_id)}")


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _retry_after(response: requests.Response) -> Optional[int]:
    header = response.headers.get("Retry-After")
    if not header:
        return None
    try:
        return int(header)
    except ValueError:
        return 60


def _extract_error_message(response_data: Optional[Any], raw_text: str) -> str:
    if isinstance(response_data, dict):
        for key in ("message", "error", "detail"):
            value = response_data.get(key)
            if isinstance(value, str) and value:
                return value
    return raw_text[:200] if raw_text else "Unknown error"
