"""Email settings entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class EmailSettings:
    """SMTP configuration used by the email sender (single row)."""

    smtp_host: str
    smtp_user: str
    smtp_password: str
    from_email: str
    from_name: str
    smtp_port: int = 587
    smtp_secure: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
