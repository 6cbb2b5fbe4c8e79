"""
Models package - Import all SQLAlchemy models here
"""

from .location import Location
from .guest import Guest
from .session import Session
from .radius import RadCheck, RadReply, RadUserGroup
from .system_log import SystemLog

__all__ = [
    "Location",
    "Guest",
    "Session",
    "RadCheck",
    "RadReply",
    "RadUserGroup",
    "SystemLog"
]
