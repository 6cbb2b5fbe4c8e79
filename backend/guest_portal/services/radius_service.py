"""
RADIUS Service - Authorization rows for the external FreeRADIUS daemon

The three collections (radcheck, radreply, radusergroup) are always
replaced as a whole for a username, never patched. Methods here do not
commit; the caller owns the transaction.
"""

from sqlalchemy.orm import Session
from sqlalchemy import text
from typing import Dict, List, Tuple

from ..config import settings
from ..schemas.location import LocationPolicy
from ..utils.helpers import kbps_to_bps

# (attribute, op, value)
ReplyAttribute = Tuple[str, str, str]


def build_reply_attributes(policy: LocationPolicy) -> List[ReplyAttribute]:
    """Reply attributes granted by a Location policy"""
    
    attributes: List[ReplyAttribute] = []
    
    if policy.session_timeout:
        attributes.append(("Session-Timeout", "=", str(policy.session_timeout)))
    
    if policy.idle_timeout:
        attributes.append(("Idle-Timeout", "=", str(policy.idle_timeout)))
    
    # WISPr bandwidth attributes are bits/sec; Location stores kbps
    if policy.bandwidth_limit_down > 0:
        attributes.append(
            ("WISPr-Bandwidth-Max-Down", "=", str(kbps_to_bps(policy.bandwidth_limit_down)))
        )
    if policy.bandwidth_limit_up > 0:
        attributes.append(
            ("WISPr-Bandwidth-Max-Up", "=", str(kbps_to_bps(policy.bandwidth_limit_up)))
        )
    
    return attributes


class RadiusService:
    """Service for managing RADIUS authorization rows"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def set_authorization(
        self,
        username: str,
        password: str,
        policy: LocationPolicy
    ) -> List[ReplyAttribute]:
        """
        Replace the complete authorization set for a username.
        
        Non-incremental: every existing check, reply and group row is
        removed, then one Cleartext-Password check row, the policy's reply
        rows and one group row are inserted. Must run inside the caller's
        transaction so no reader sees a mixture of old and new rows.
        """
        self.delete_authorization(username)
        
        # Cleartext-Password: the NAS authenticates the guest with PAP
        self.db.execute(
            text("""
                INSERT INTO radcheck (username, attribute, op, value)
                VALUES (:username, 'Cleartext-Password', ':=', :password)
            """),
            {"username": username, "password": password}
        )
        
        reply_attributes = build_reply_attributes(policy)
        for attribute, op, value in reply_attributes:
            self.db.execute(
                text("""
                    INSERT INTO radreply (username, attribute, op, value)
                    VALUES (:username, :attribute, :op, :value)
                """),
                {"username": username, "attribute": attribute, "op": op, "value": value}
            )
        
        self.db.execute(
            text("""
                INSERT INTO radusergroup (username, groupname, priority)
                VALUES (:username, :groupname, :priority)
            """),
            {
                "username": username,
                "groupname": settings.RADIUS_GROUP_NAME,
                "priority": settings.RADIUS_GROUP_PRIORITY
            }
        )
        
        return reply_attributes
    
    def delete_authorization(self, username: str) -> int:
        """Remove every check, reply and group row for a username"""
        
        removed = 0
        for table in ("radcheck", "radreply", "radusergroup"):
            result = self.db.execute(
                text(f"DELETE FROM {table} WHERE username = :username"),
                {"username": username}
            )
            removed += result.rowcount or 0
        
        return removed
    
    def get_authorization_status(self, username: str) -> Dict:
        """Whether a username currently has a credential check row"""
        
        row = self.db.execute(
            text("SELECT username FROM radcheck WHERE username = :username LIMIT 1"),
            {"username": username}
        ).first()
        
        if row is None:
            return {"authorized": False}
        
        return {"authorized": True, "username": row[0]}
    
    def get_authorization(self, username: str) -> Dict:
        """Current check, reply and group rows for a username"""
        
        check = self.db.execute(
            text("SELECT attribute, op, value FROM radcheck WHERE username = :username ORDER BY id"),
            {"username": username}
        ).all()
        reply = self.db.execute(
            text("SELECT attribute, op, value FROM radreply WHERE username = :username ORDER BY id"),
            {"username": username}
        ).all()
        groups = self.db.execute(
            text("SELECT groupname, priority FROM radusergroup WHERE username = :username ORDER BY id"),
            {"username": username}
        ).all()
        
        return {
            "check": [tuple(r) for r in check],
            "reply": [tuple(r) for r in reply],
            "groups": [tuple(r) for r in groups]
        }
