from pydantic import BaseModel
from typing import Optional


class LocationPolicy(BaseModel):
    """
    Effective provisioning policy for one request, with every fallback
    already applied. Built once by resolve_location_policy().
    """
    location_id: Optional[int] = None  # None when the requested Location does not exist
    name: str = ""
    nas_ip: str
    session_timeout: Optional[int] = None  # as configured; None = no Session-Timeout reply
    idle_timeout: Optional[int] = None
    bandwidth_limit_up: int = 0  # kbps
    bandwidth_limit_down: int = 0  # kbps
    redirect_url: str = ""
    effective_session_timeout: int  # session_timeout or DEFAULT_SESSION_TIMEOUT


class LocationPublic(BaseModel):
    """Splash page view of a Location"""
    id: int
    name: str
    ssid: Optional[str] = None
    splash_message: Optional[str] = None
    redirect_url: Optional[str] = None
    terms_url: Optional[str] = None
    logo_url: Optional[str] = None
    
    class Config:
        from_attributes = True
