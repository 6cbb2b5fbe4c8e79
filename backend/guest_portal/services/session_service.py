"""
Session Management Service
Opens guest network sessions and moves them to a terminal state on
administrative disconnect or an accounting Stop.

    active -> disconnected   (admin disconnect)
    active -> expired        (Accounting Stop)
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ..exceptions import DisconnectError
from ..models.session import Session as WiFiSession, STATUS_ACTIVE, STATUS_DISCONNECTED, STATUS_EXPIRED
from ..schemas.radius import AccountingEvent
from ..utils.helpers import log_system_event, octets_to_mb
from ..utils.mac import normalize_mac
from .guest_service import get_guest_by_mac
from .radius_service import RadiusService

logger = logging.getLogger(__name__)


class SessionManager:
    def __init__(self, db: Session):
        self.db = db
    
    def open_session(
        self,
        guest_id: int,
        location_id: Optional[int],
        mac_address: str,
        nas_ip: str,
        ap_mac: Optional[str] = None
    ) -> int:
        """
        Insert a new active session and return its id.
        
        Prior active sessions for the same MAC are left alone; they are
        closed by accounting or an admin disconnect. Does not commit.
        """
        new_session = WiFiSession(
            guest_id=guest_id,
            location_id=location_id,
            mac_address=mac_address,
            nas_ip=nas_ip,
            ap_mac=ap_mac,
            status=STATUS_ACTIVE,
            started_at=datetime.now(timezone.utc)
        )
        
        self.db.add(new_session)
        self.db.flush()
        
        return new_session.id
    
    def close_by_disconnect(self, mac_address: str, actor: Optional[str] = None) -> int:
        """
        Revoke RADIUS authorization for a MAC and mark its active sessions
        disconnected. Commits; returns the number of sessions closed.
        Storage failures roll back and raise DisconnectError.
        """
        try:
            # Serialize with any in-flight provisioning for this MAC
            get_guest_by_mac(self.db, mac_address, for_update=True)
            
            removed = RadiusService(self.db).delete_authorization(mac_address)
            
            closed = self.db.query(WiFiSession).filter(
                WiFiSession.mac_address == mac_address,
                WiFiSession.status == STATUS_ACTIVE
            ).update(
                {
                    WiFiSession.status: STATUS_DISCONNECTED,
                    WiFiSession.ended_at: datetime.now(timezone.utc)
                },
                synchronize_session=False
            )
            
            log_system_event(
                self.db, "INFO", "session", "admin_disconnect",
                f"Disconnected {mac_address}",
                {"mac_address": mac_address, "sessions_closed": closed, "radius_rows_removed": removed},
                actor
            )
            
            self.db.commit()

        except Exception as e:
            self.db.rollback()
            raise DisconnectError("Failed to disconnect user") from e

        logger.info(f"Disconnected {mac_address}: {closed} session(s) closed, {removed} RADIUS row(s) removed")
        return closed
    
    def close_by_accounting(
        self,
        username: str,
        duration_seconds: Optional[int],
        octets_in: Optional[int],
        octets_out: Optional[int],
        external_session_id: Optional[str]
    ) -> int:
        """
        Expire the active session(s) for a RADIUS username with the usage
        totals from an Accounting Stop. Commits; returns rows changed
        (0 when nothing is active, e.g. a late or duplicate Stop).
        """
        mac_address = normalize_mac(username)
        
        try:
            expired = self.db.query(WiFiSession).filter(
                WiFiSession.mac_address == mac_address,
                WiFiSession.status == STATUS_ACTIVE
            ).update(
                {
                    WiFiSession.status: STATUS_EXPIRED,
                    WiFiSession.ended_at: datetime.now(timezone.utc),
                    WiFiSession.duration_seconds: duration_seconds or 0,
                    WiFiSession.data_up_mb: octets_to_mb(octets_in),
                    WiFiSession.data_down_mb: octets_to_mb(octets_out),
                    WiFiSession.session_id: external_session_id
                },
                synchronize_session=False
            )
            self.db.commit()
        
        except Exception:
            self.db.rollback()
            raise
        
        if expired:
            logger.info(f"Accounting Stop for {mac_address}: {expired} session(s) expired")
        else:
            logger.debug(f"Accounting Stop for {mac_address} matched no active session")
        
        return expired
    
    def handle_accounting_event(self, event: AccountingEvent) -> int:
        """Only Stop changes state; every other status type is acknowledged"""
        if not event.is_stop or not event.username:
            return 0
        
        return self.close_by_accounting(
            event.username,
            event.session_time,
            event.input_octets,
            event.output_octets,
            event.session_id
        )
    
    def get_active_sessions(self, mac_address: str):
        return self.db.query(WiFiSession).filter(
            WiFiSession.mac_address == mac_address,
            WiFiSession.status == STATUS_ACTIVE
        ).order_by(WiFiSession.started_at.desc()).all()
