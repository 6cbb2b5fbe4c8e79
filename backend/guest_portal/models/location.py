"""
Location Model
Policy and branding for one physical site / SSID.
Owned by the admin dashboard; the provisioning engine only reads it.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func

from ..database import Base


class Location(Base):
    __tablename__ = "locations"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    ssid = Column(String(100), nullable=True)
    nas_ip = Column(String(45), nullable=True)
    
    # Bandwidth (kbps, 0 = unlimited)
    bandwidth_limit_up = Column(Integer, default=0)
    bandwidth_limit_down = Column(Integer, default=0)
    
    # Timeouts (seconds)
    session_timeout = Column(Integer, default=3600)
    idle_timeout = Column(Integer, default=600)
    
    # Daily limits (0 = unlimited)
    daily_limit = Column(Integer, default=0)  # MB
    daily_time_limit = Column(Integer, default=0)  # seconds
    
    # Splash page
    splash_message = Column(Text, default="")
    redirect_url = Column(String(500), default="")
    terms_url = Column(String(500), default="")
    logo_url = Column(String(500), default="")
    
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
