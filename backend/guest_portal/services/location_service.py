"""
Location policy resolution
All provisioning defaults (fallback Location, session timeout, NAS address)
are applied here and nowhere else.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..config import settings
from ..models.location import Location
from ..schemas.location import LocationPolicy

logger = logging.getLogger(__name__)


def get_location(db: Session, location_id: int) -> Optional[Location]:
    return db.query(Location).filter(Location.id == location_id).first()


def resolve_location_policy(db: Session, location_id: Optional[int] = None) -> LocationPolicy:
    """
    Load the Location and return its effective policy.
    
    An unknown Location id is not an error: the guest is provisioned with
    the fallback session timeout and no bandwidth caps.
    """
    if location_id is None:
        location_id = settings.DEFAULT_LOCATION_ID
    
    location = get_location(db, location_id)
    
    if location is None:
        logger.warning(f"Location {location_id} not found, using default policy")
        return LocationPolicy(
            location_id=None,
            nas_ip=settings.DEFAULT_NAS_IP,
            effective_session_timeout=settings.DEFAULT_SESSION_TIMEOUT
        )
    
    # 0 / NULL timeouts mean "not configured"
    session_timeout = location.session_timeout or None
    idle_timeout = location.idle_timeout or None
    
    return LocationPolicy(
        location_id=location.id,
        name=location.name or "",
        nas_ip=location.nas_ip or settings.DEFAULT_NAS_IP,
        session_timeout=session_timeout,
        idle_timeout=idle_timeout,
        bandwidth_limit_up=location.bandwidth_limit_up or 0,
        bandwidth_limit_down=location.bandwidth_limit_down or 0,
        redirect_url=location.redirect_url or "",
        effective_session_timeout=session_timeout or settings.DEFAULT_SESSION_TIMEOUT
    )
