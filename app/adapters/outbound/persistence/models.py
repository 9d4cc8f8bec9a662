"""SQLAlchemy ORM models for the CRM tables."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Make a stored datetime timezone-aware (SQLite returns naive datetimes)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LeadModel(Base):
    """SQLAlchemy model for leads table."""

    __tablename__ = "leads"

    id = Column(String, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    location = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    # Deleting a lead deletes these rows through the ORM
    details = relationship("LeadDetailsModel", cascade="all, delete-orphan")
    status_history = relationship("LeadStatusHistoryModel", cascade="all, delete-orphan")
    communications = relationship("CommunicationModel", cascade="all, delete-orphan")
    tasks = relationship("TaskModel", cascade="all, delete-orphan")


class LeadDetailsModel(Base):
    """SQLAlchemy model for lead_details table."""

    __tablename__ = "lead_details"

    id = Column(String, primary_key=True)
    lead_id = Column(
        String, ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True
    )
    previous_experience = Column(Text, nullable=False, default="")
    investment_capacity = Column(String, nullable=False, default="no")
    source_channel = Column(String, nullable=False, default="other")
    interest_level = Column(Integer, nullable=False, default=3)
    additional_comments = Column(Text, nullable=False, default="")
    score = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class LeadStatusHistoryModel(Base):
    """SQLAlchemy model for lead_status_history table (append-only)."""

    __tablename__ = "lead_status_history"

    id = Column(String, primary_key=True)
    lead_id = Column(
        String, ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sequence = Column(Integer, nullable=False)  # insertion order within the lead
    status = Column(String, nullable=False)
    notes = Column(Text, nullable=True)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class CommunicationModel(Base):
    """SQLAlchemy model for communications table."""

    __tablename__ = "communications"

    id = Column(String, primary_key=True)
    lead_id = Column(
        String, ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class TaskModel(Base):
    """SQLAlchemy model for tasks table."""

    __tablename__ = "tasks"

    id = Column(String, primary_key=True)
    lead_id = Column(
        String, ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)
    type = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    assigned_to = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class FranchiseModel(Base):
    """SQLAlchemy model for franchises table."""

    __tablename__ = "franchises"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    contact_person = Column(String, nullable=False)
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    province = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    website = Column(String, nullable=True)
    tesis_code = Column(String, nullable=True)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class UserModel(Base):
    """SQLAlchemy model for users table."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, nullable=False, unique=True, index=True)
    full_name = Column(String, nullable=True)
    role = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class EmailSettingsModel(Base):
    """SQLAlchemy model for email_settings table."""

    __tablename__ = "email_settings"

    id = Column(String, primary_key=True)
    smtp_host = Column(String, nullable=False)
    smtp_port = Column(Integer, nullable=False, default=587)
    smtp_user = Column(String, nullable=False)
    smtp_password = Column(String, nullable=False)
    smtp_secure = Column(Boolean, nullable=False, default=False)
    from_email = Column(String, nullable=False)
    from_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
