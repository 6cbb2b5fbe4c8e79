"""
FreeRADIUS SQL tables
Read by the external RADIUS daemon (rlm_sql); written only by RadiusService.
"""

from sqlalchemy import Column, Integer, String

from ..database import Base


class RadCheck(Base):
    __tablename__ = "radcheck"
    
    id = Column(Integer, primary_key=True)
    username = Column(String(64), nullable=False, default="", index=True)
    attribute = Column(String(64), nullable=False, default="")
    op = Column(String(2), nullable=False, default="==")
    value = Column(String(253), nullable=False, default="")


class RadReply(Base):
    __tablename__ = "radreply"
    
    id = Column(Integer, primary_key=True)
    username = Column(String(64), nullable=False, default="", index=True)
    attribute = Column(String(64), nullable=False, default="")
    op = Column(String(2), nullable=False, default="=")
    value = Column(String(253), nullable=False, default="")


class RadUserGroup(Base):
    __tablename__ = "radusergroup"
    
    id = Column(Integer, primary_key=True)
    username = Column(String(64), nullable=False, default="", index=True)
    groupname = Column(String(64), nullable=False, default="")
    priority = Column(Integer, nullable=False, default=1)
