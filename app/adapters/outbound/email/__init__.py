"""Email delivery adapters."""

from app.adapters.outbound.email.mock_email_sender import MockEmailSender

__all__ = [
    "MockEmailSender",
]
