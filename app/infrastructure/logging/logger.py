"""Structured logger for observability."""

import logging
from typing import Any, Optional

from app.infrastructure.config.settings import settings

_logger = logging.getLogger("candidatos_crm")
_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    action: str,
    level: int = logging.INFO,
    actor_id: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'leads', 'pipeline')
        action: What happened (e.g., 'lead_created')
        level: Log level (default: INFO)
        actor_id: Identifier of the user performing the action, if any
        **kwargs: Additional structured fields to log
    """
    fields: dict[str, Any] = {
        "component": component,
        "action": action,
    }
    if actor_id is not None:
        fields["actor_id"] = actor_id
    fields.update(kwargs)

    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_status_change(
    lead_id: str,
    status: str,
    actor_id: Optional[str] = None,
    status_before: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a pipeline status transition.

    Args:
        lead_id: Lead identifier
        status: New status
        actor_id: User who appended the status
        status_before: Previous current status, when known
        **kwargs: Additional fields
    """
    fields = {}
    if status_before is not None:
        fields["status_before"] = status_before
    fields.update(kwargs)

    log_event(
        component="pipeline",
        action="status_appended",
        actor_id=actor_id,
        lead_id=lead_id,
        status_after=status,
        **fields,
    )


def log_csv_import(
    entity: str,
    rows_total: int,
    rows_imported: int,
    actor_id: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a CSV import run.

    Args:
        entity: Imported entity ('leads' or 'franchises')
        rows_total: Rows in the validated file
        rows_imported: Rows actually written
        actor_id: User who ran the import
        **kwargs: Additional fields
    """
    level = logging.INFO if rows_total == rows_imported else logging.WARNING
    log_event(
        component="csv_import",
        action=f"{entity}_imported",
        level=level,
        actor_id=actor_id,
        rows_total=rows_total,
        rows_imported=rows_imported,
        **kwargs,
    )


def log_email(
    to: str,
    success: bool,
    smtp_host: Optional[str] = None,
    communication_error: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log an email send attempt.

    Args:
        to: Recipient address
        success: Whether the sender reported success
        smtp_host: SMTP host from the stored settings
        communication_error: Why the sent email could not be stored as a communication
        **kwargs: Additional fields
    """
    level = logging.INFO if success else logging.WARNING
    if communication_error is not None:
        level = logging.ERROR
        kwargs["communication_error"] = communication_error

    log_event(
        component="email",
        action="email_sent" if success else "email_failed",
        level=level,
        to=to,
        smtp_host=smtp_host,
        **kwargs,
    )


logger = _logger
