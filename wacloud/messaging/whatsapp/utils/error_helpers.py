"""
WhatsApp error handling utilities.

Provides the typed HTTP error raised by WhatsAppClient and centralized error
handling for messaging operations, including authentication error detection
and standardized failed results.
"""

from typing import Any

from wacloud.core.logging.logger import ContextLogger
from wacloud.messaging.whatsapp.models.basic_models import MessageResult


class WhatsAppHttpError(Exception):
    """Non-2xx response from the Graph API.

    The Graph API reports failures as
    ``{"error": {"message", "type", "code", "error_subcode", "fbtrace_id"}}``;
    those fields are exposed as attributes when present.
    """

    def __init__(self, http_status: int, body: dict[str, Any] | None = None):
        self.http_status = http_status
        self.body = body or {}

        error = self.body.get("error")
        if not isinstance(error, dict):
            error = {}
        self.error_code: int | None = error.get("code")
        self.error_subcode: int | None = error.get("error_subcode")
        self.error_type: str | None = error.get("type")
        self.error_message: str | None = error.get("message") or self.body.get(
            "message"
        )
        self.fbtrace_id: str | None = error.get("fbtrace_id")

        message = f"HTTP {http_status}"
        if self.error_message:
            message = f"{message}: {self.error_message}"
        super().__init__(message)


def is_authentication_error(error: Exception) -> bool:
    """Check if an exception indicates an authentication failure.

    Args:
        error: The exception to check

    Returns:
        True if the error indicates authentication failure (401/Unauthorized)
    """
    if isinstance(error, WhatsAppHttpError):
        return error.http_status == 401
    error_str = str(error)
    return "401" in error_str or "Unauthorized" in error_str


def handle_whatsapp_error(
    error: Exception,
    operation: str,
    recipient: str,
    phone_number_id: str,
    logger: ContextLogger,
    error_code: str | None = None,
    include_traceback: bool = False,
) -> MessageResult:
    """Handle WhatsApp API errors with consistent logging and response formatting.

    Args:
        error: The exception that occurred
        operation: Description of the operation that failed (e.g., "send template")
        recipient: The recipient identifier
        phone_number_id: The sending phone number ID for logging context
        logger: Logger instance for error logging
        error_code: Error code for non-HTTP failures; HTTP errors always
            report HTTP_<status>
        include_traceback: Whether to include full traceback in log (exc_info=True)

    Returns:
        MessageResult with success=False and appropriate error details
    """
    if is_authentication_error(error):
        logger.error(f"CRITICAL: WhatsApp Authentication Failed - Cannot {operation}!")
        logger.error(f"Check WhatsApp access token for phone number {phone_number_id}")

    api_response = None
    if isinstance(error, WhatsAppHttpError):
        error_code = f"HTTP_{error.http_status}"
        api_response = error.body

    logger.error(
        f"Failed to {operation} to {recipient}: {error}", exc_info=include_traceback
    )

    return MessageResult(
        success=False,
        error=str(error),
        error_code=error_code,
        recipient=recipient,
        api_response=api_response,
        phone_number_id=phone_number_id,
    )
