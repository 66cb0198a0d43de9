"""
WhatsApp Cloud API HTTP client.

Key Design Decisions:
- One client per sending phone number (phone_number_id)
- Pure dependency injection of the aiohttp session (caller owns its lifecycle)
- Every call goes through send_request(), which returns the parsed JSON body
  or raises WhatsAppHttpError
"""

import json
from typing import Any

import aiohttp

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import ContextLogger, get_logger
from wacloud.messaging.whatsapp.utils.error_helpers import WhatsAppHttpError

SUPPORTED_API_VERSIONS = frozenset(
    {
        "v16.0",
        "v17.0",
        "v18.0",
        "v19.0",
        "v20.0",
        "v21.0",
        "v22.0",
        "v23.0",
        "v24.0",
    }
)

JSON_CONTENT_TYPE = "application/json"


class WhatsAppUrlBuilder:
    """Builds URLs for WhatsApp Business API endpoints."""

    def __init__(self, base_url: str, api_version: str, phone_number_id: str):
        """Initialize URL builder with configuration.

        Args:
            base_url: Facebook Graph API base URL
            api_version: Graph API version
            phone_number_id: WhatsApp Business phone number ID
        """
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.phone_number_id = phone_number_id

    def get_messages_url(self) -> str:
        """Build URL for sending messages."""
        return self.get_endpoint_url(f"{self.phone_number_id}/messages")

    def get_media_url(self, media_id: str | None = None) -> str:
        """Build URL for media operations.

        Args:
            media_id: Optional media ID for specific media operations

        Returns:
            URL for media endpoint
        """
        if media_id:
            return self.get_endpoint_url(media_id)
        return self.get_endpoint_url(f"{self.phone_number_id}/media")

    def get_endpoint_url(self, endpoint: str) -> str:
        """Build URL for any endpoint path relative to the API version."""
        return f"{self.base_url}/{self.api_version}/{endpoint.lstrip('/')}"


class WhatsAppFormDataBuilder:
    """Builds form data for WhatsApp multipart requests."""

    @staticmethod
    def build_form_data(
        payload: dict[str, Any], files: dict[str, Any]
    ) -> aiohttp.FormData:
        """Build FormData for multipart/form-data requests.

        Args:
            payload: Data fields to include in the form
            files: Files in format {field_name: (filename, content, content_type)}

        Returns:
            aiohttp.FormData object ready for request

        Raises:
            ValueError: If file format is invalid
        """
        form = aiohttp.FormData()

        # Data fields go first; the media endpoint expects them before the file
        for key, value in (payload or {}).items():
            form.add_field(key, str(value))

        for field_name, file_info in files.items():
            if not (isinstance(file_info, tuple) and len(file_info) == 3):
                raise ValueError(
                    f"Invalid file format for field '{field_name}'. "
                    f"Expected tuple (filename, content, content_type)"
                )
            filename, content, content_type = file_info
            if hasattr(content, "read"):
                content = content.read()
            form.add_field(
                field_name, content, filename=filename, content_type=content_type
            )

        return form


class WhatsAppClient:
    """
    WhatsApp Cloud API client bound to one phone number.

    Authentication is a bearer access token sent on every request. Request and
    response lines are logged at INFO; bodies only when log_bodies is enabled.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        access_token: str,
        phone_number_id: str,
        logger: ContextLogger | None = None,
        api_version: str = settings.api_version,
        base_url: str = settings.base_url,
        log_bodies: bool = settings.log_http_bodies,
    ):
        """Initialize WhatsApp client with dependency injection.

        Args:
            session: aiohttp session owned by the caller
            access_token: WhatsApp Business API access token
            phone_number_id: WhatsApp Business phone number ID
            logger: Pre-configured logger instance
            api_version: Graph API version to use
            base_url: Facebook Graph API base URL
            log_bodies: Whether request/response bodies are logged

        Raises:
            ValueError: If api_version is not supported
        """
        if api_version not in SUPPORTED_API_VERSIONS:
            raise ValueError(
                f"Unsupported API version: {api_version}. "
                f"Supported versions: {sorted(SUPPORTED_API_VERSIONS)}"
            )

        self.session = session
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.api_version = api_version
        self.log_bodies = log_bodies
        self.logger = logger or get_logger(__name__, phone_number_id=phone_number_id)

        self.url_builder = WhatsAppUrlBuilder(base_url, api_version, phone_number_id)
        self.form_builder = WhatsAppFormDataBuilder()

        self.logger.debug(
            f"WhatsApp client initialized for phone_id: {self.phone_number_id}, "
            f"api_version: {api_version}"
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(phone_number_id={self.phone_number_id!r}, "
            f"api_version={self.api_version!r})"
        )

    def _get_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Get HTTP headers for WhatsApp API requests."""
        headers = {"Authorization": f"Bearer {self.access_token}"}
        if extra:
            headers.update(extra)
        return headers

    def _masked_token(self) -> str:
        return f"{self.access_token[:8]}..."

    @staticmethod
    def _parse_body(text: str) -> dict[str, Any] | None:
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return {"message": text}

    def _log_request(self, method: str, url: str, params: Any) -> None:
        self.logger.info(f"request: {method} {url}")
        self.logger.info(f'request: Authorization: "Bearer {self._masked_token()}"')
        if self.log_bodies and params:
            self.logger.info(f"request: {params}")

    def _log_response(self, status: int, text: str) -> None:
        self.logger.info(f"response: Status {status}")
        if self.log_bodies and text:
            self.logger.info(f"response: {text}")

    def _log_http_error(self, status: int, url: str, text: str) -> None:
        if status == 401:
            self.logger.error(
                "CRITICAL: WHATSAPP ACCESS TOKEN EXPIRED OR INVALID! "
                f"Phone {self.phone_number_id} authentication FAILED - 401 Unauthorized"
            )
            self.logger.error(f"Token starts with: {self._masked_token()}")
            self.logger.error(f"URL: {url} Response: {text}")
        else:
            self.logger.error(
                f"HTTP error for phone {self.phone_number_id}: {status} - {text}"
            )

    async def send_request(
        self,
        endpoint: str | None = None,
        http_method: str = "post",
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        multipart: bool = False,
        full_url: str | None = None,
        files: dict[str, Any] | None = None,
        body: bytes | None = None,
    ) -> dict[str, Any] | None:
        """Send a request to the Graph API.

        POST bodies are the raw ``body`` bytes when given, JSON when a
        ``Content-Type: application/json`` header is given, multipart when
        ``multipart`` is set or files are given, and form-encoded otherwise.
        GET and DELETE send ``params`` as the query string.

        Args:
            endpoint: Endpoint path relative to the API version
            http_method: HTTP method (get, post, delete)
            params: Body fields or query parameters
            headers: Extra request headers
            multipart: Send the body as multipart/form-data
            full_url: Absolute URL, overrides endpoint
            files: Files for multipart upload {field: (filename, content, content_type)}
            body: Raw request body, sent as-is with the given headers

        Returns:
            Parsed JSON response, or None for an empty body

        Raises:
            WhatsAppHttpError: For responses with status >= 400
            aiohttp.ClientError: For connection failures
        """
        method = http_method.upper()
        url = full_url or self.url_builder.get_endpoint_url(endpoint or "")
        request_headers = self._get_headers(headers)
        kwargs: dict[str, Any] = {}

        if method in ("GET", "DELETE"):
            if params:
                kwargs["params"] = params
        elif body is not None:
            kwargs["data"] = body
        elif multipart or files:
            # aiohttp sets the multipart boundary header itself
            request_headers.pop("Content-Type", None)
            kwargs["data"] = self.form_builder.build_form_data(params or {}, files or {})
        elif request_headers.get("Content-Type") == JSON_CONTENT_TYPE:
            kwargs["json"] = params or {}
        else:
            kwargs["data"] = params or {}

        self._log_request(
            method, url, f"<{len(body)} bytes>" if body is not None else params
        )

        try:
            async with self.session.request(
                method, url, headers=request_headers, **kwargs
            ) as response:
                text = await response.text()
                self._log_response(response.status, text)

                if response.status >= 400:
                    self._log_http_error(response.status, url, text)
                    raise WhatsAppHttpError(
                        http_status=response.status, body=self._parse_body(text)
                    )

                return self._parse_body(text)

        except aiohttp.ClientError as err:
            self.logger.error(
                f"{method} {url} failed for phone {self.phone_number_id}: {err}"
            )
            raise

    async def post_request(
        self,
        payload: dict[str, Any],
        custom_url: str | None = None,
        files: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Send POST request to WhatsApp API.

        Args:
            payload: JSON payload (or form fields when files are given)
            custom_url: Optional custom URL (defaults to messages endpoint)
            files: Optional files for multipart upload

        Returns:
            JSON response from WhatsApp API
        """
        url = custom_url or self.url_builder.get_messages_url()
        if files:
            return await self.send_request(
                http_method="post", params=payload, full_url=url, files=files
            )
        return await self.send_request(
            http_method="post",
            params=payload,
            full_url=url,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    async def get_request(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Send GET request to an endpoint relative to the API version."""
        return await self.send_request(
            endpoint=endpoint, http_method="get", params=params
        )

    async def delete_request(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Send DELETE request to an endpoint relative to the API version."""
        return await self.send_request(
            endpoint=endpoint, http_method="delete", params=params
        )

    async def get_request_stream(self, url: str) -> aiohttp.ClientResponse:
        """Perform GET request on an absolute URL and return the raw response.

        Used for media downloads. The caller is responsible for releasing the
        response.

        Raises:
            aiohttp.ClientError: For HTTP request failures
        """
        try:
            response = await self.session.request(
                "GET", url, headers=self._get_headers()
            )
            self.logger.debug(
                f"Streaming GET request to {url} started. Status: {response.status}"
            )
            return response

        except aiohttp.ClientError as e:
            self.logger.error(
                f"Streaming GET request failed for phone {self.phone_number_id}: {e}"
            )
            raise
