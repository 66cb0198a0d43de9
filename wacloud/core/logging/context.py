"""
Phone-number context management using contextvars.

The phone_number_id is the identity every Cloud API call is made under, so it
is propagated through the current async context and picked up by every
ContextLogger without manual parameter passing.
"""

from contextvars import ContextVar

_phone_context: ContextVar[str | None] = ContextVar("phone_number_id", default=None)


def set_phone_context(phone_number_id: str | None) -> None:
    """
    Set the phone-number context for the current async context.

    Args:
        phone_number_id: WhatsApp Business phone number ID, or None to clear
    """
    _phone_context.set(phone_number_id)


def get_current_phone_context() -> str | None:
    """
    Get the current phone-number ID from context variables.

    Returns:
        Current phone number ID, or None if not set
    """
    return _phone_context.get()


def clear_phone_context() -> None:
    """Clear the phone-number context (useful for testing)."""
    _phone_context.set(None)
