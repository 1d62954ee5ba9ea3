from database.models.base import BaseModel
from database.models.user import User
from database.models.owner import Owner
from database.models.property import Property
from database.models.room import Room
from database.models.tenant import Tenant
from database.models.visit_report import VisitReport
from database.models.notification import Notification

__all__ = [
    "BaseModel",
    "User",
    "Owner",
    "Property",
    "Room",
    "Tenant",
    "VisitReport",
    "Notification",
]
