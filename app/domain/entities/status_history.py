"""Lead status history entities."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.domain.value_objects.pipeline_stage import DEFAULT_STAGE, PipelineStage


@dataclass(frozen=True)
class StatusHistoryEntry:
    """Immutable record of a lead entering a pipeline stage."""

    lead_id: str
    status: PipelineStage
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: str(uuid4()))


def latest_entry(entries: Iterable[StatusHistoryEntry]) -> Optional[StatusHistoryEntry]:
    """
    Get the most recent entry of a history.

    Entries must be given in insertion order; on equal created_at the later
    entry wins.

    Args:
        entries: Status history of one lead, in insertion order

    Returns:
        Most recent entry, or None for an empty history
    """
    latest: Optional[StatusHistoryEntry] = None
    for entry in entries:
        if latest is None or entry.created_at >= latest.created_at:
            latest = entry
    return latest


def current_status(entries: Iterable[StatusHistoryEntry]) -> PipelineStage:
    """
    Derive the current status of a lead from its history.

    Args:
        entries: Status history of one lead, in insertion order

    Returns:
        Status of the most recent entry, or new_contact when there is none
    """
    latest = latest_entry(entries)
    if latest is None:
        return DEFAULT_STAGE
    return latest.status


def newest_first(entries: Iterable[StatusHistoryEntry]) -> list[StatusHistoryEntry]:
    """Order a history for display, most recent first (stable on ties)."""
    indexed = list(enumerate(entries))
    indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
    return [entry for _, entry in indexed]
