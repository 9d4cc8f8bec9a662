"""Choice sets used by lead, communication and task records."""

from enum import Enum


class InvestmentCapacity(str, Enum):
    """Whether the candidate has a local available (investment capacity)."""

    YES = "yes"
    NO = "no"


class SourceChannel(str, Enum):
    """Channel the lead came from."""

    WEBSITE = "website"
    REFERRAL = "referral"
    SOCIAL_MEDIA = "social_media"
    EVENT = "event"
    ADVERTISEMENT = "advertisement"
    OTHER = "other"


class CommunicationType(str, Enum):
    """Kind of logged interaction."""

    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    TRAINING = "training"
    OTHER = "other"


class TaskType(str, Enum):
    """Kind of scheduled follow-up."""

    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    TRAINING = "training"

    def as_communication_type(self) -> CommunicationType:
        """Get the communication type a completed task of this kind produces."""
        return CommunicationType(self.value)
