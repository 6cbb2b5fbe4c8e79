from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from datetime import datetime

from ..database import Base

class SystemLog(Base):
    __tablename__ = "system_logs"
    
    id = Column(Integer, primary_key=True, index=True)
    log_level = Column(String(20), nullable=False)  # INFO, WARNING, ERROR
    module = Column(String(100))  # provisioning, session, radius
    action = Column(String(100))
    message = Column(Text, nullable=False)
    details = Column(JSON)
    actor = Column(String(100), nullable=True)  # admin token subject, if any
    created_at = Column(DateTime, default=datetime.utcnow)
