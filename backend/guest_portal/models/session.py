from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from ..database import Base

# Session status values; both non-active states are terminal
STATUS_ACTIVE = "active"
STATUS_DISCONNECTED = "disconnected"
STATUS_EXPIRED = "expired"


class Session(Base):
    __tablename__ = "sessions"
    
    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id"), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True)
    mac_address = Column(String(64), nullable=False, index=True)
    nas_ip = Column(String(45), nullable=False, default="0.0.0.0")
    ap_mac = Column(String(64), nullable=True)
    
    status = Column(String(20), nullable=False, default=STATUS_ACTIVE, index=True)
    started_at = Column(DateTime(timezone=True), server_default=func.now())
    ended_at = Column(DateTime(timezone=True), nullable=True)
    duration_seconds = Column(Integer, default=0)
    
    data_up_mb = Column(Float, default=0)
    data_down_mb = Column(Float, default=0)
    
    session_id = Column(String(64), nullable=True)  # Acct-Session-Id from the NAS
    
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'disconnected', 'expired')",
            name="check_session_status"
        ),
    )
