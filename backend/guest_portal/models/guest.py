from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from ..database import Base

AUTH_METHODS = ("email", "phone", "click-through")


class Guest(Base):
    __tablename__ = "guests"
    
    id = Column(Integer, primary_key=True, index=True)
    mac_address = Column(String(64), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    name = Column(String(255), nullable=True)
    auth_method = Column(String(20), nullable=False, default="email")
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True)
    last_seen = Column(DateTime(timezone=True), server_default=func.now())
    visit_count = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    __table_args__ = (
        CheckConstraint(
            "auth_method IN ('email', 'phone', 'click-through')",
            name="check_guest_auth_method"
        ),
    )
