"""SQLAlchemy models."""

from captainslog.models.boat import Boat, BoatCrew
from captainslog.models.component import BoatComponent
from captainslog.models.document import Document
from captainslog.models.log_entry import LogEntry
from captainslog.models.notification_preferences import NotificationPreferences
from captainslog.models.safety_equipment import SafetyEquipment
from captainslog.models.user import User

__all__ = [
    "Boat",
    "BoatComponent",
    "BoatCrew",
    "Document",
    "LogEntry",
    "NotificationPreferences",
    "SafetyEquipment",
    "User",
]
