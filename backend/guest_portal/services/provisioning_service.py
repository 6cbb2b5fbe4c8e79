"""
Guest provisioning
Turns one captive-portal login into RADIUS credentials and an active
session, as a single all-or-nothing transaction.
"""

import logging

from sqlalchemy.orm import Session

from ..exceptions import MissingHardwareAddressError, ProvisioningError
from ..schemas.guest import GuestAuthData, GuestAuthRequest
from ..utils.credentials import generate_radius_password
from ..utils.helpers import log_system_event
from ..utils.mac import normalize_mac
from .guest_service import upsert_guest
from .location_service import resolve_location_policy
from .radius_service import RadiusService
from .session_service import SessionManager

logger = logging.getLogger(__name__)


class ProvisioningService:
    def __init__(self, db: Session):
        self.db = db
    
    def authenticate_guest(self, request: GuestAuthRequest) -> GuestAuthData:
        """
        Provision RADIUS access for a guest device.
        
        Raises MissingHardwareAddressError before touching the database when
        the request has no usable MAC. Any failure after that rolls back the
        whole transaction and is raised as ProvisioningError; nothing is
        left half-written and no credential is returned.
        """
        mac_address = normalize_mac(request.mac_address or "")
        if not mac_address:
            raise MissingHardwareAddressError()
        
        password = generate_radius_password()
        
        try:
            policy = resolve_location_policy(self.db, request.location_id)
            
            # Upsert first: on PostgreSQL the guest row lock serializes
            # concurrent provisioning of the same MAC from here to commit.
            guest_id = upsert_guest(
                self.db,
                mac_address,
                email=request.email,
                phone=request.phone,
                name=request.name,
                auth_method=request.auth_method,
                location_id=policy.location_id
            )
            
            reply_attributes = RadiusService(self.db).set_authorization(mac_address, password, policy)
            
            session_id = SessionManager(self.db).open_session(
                guest_id,
                policy.location_id,
                mac_address,
                policy.nas_ip,
                ap_mac=normalize_mac(request.ap_mac or "") or None
            )
            
            log_system_event(
                self.db, "INFO", "provisioning", "guest_authenticated",
                f"Guest {mac_address} authenticated via {request.auth_method}",
                {
                    "guest_id": guest_id,
                    "session_id": session_id,
                    "location_id": policy.location_id,
                    "reply_attributes": [attribute for attribute, _, _ in reply_attributes]
                }
            )
            
            self.db.commit()
        
        except Exception as e:
            self.db.rollback()
            logger.error(f"Guest provisioning failed for {mac_address}: {e}", exc_info=True)
            raise ProvisioningError("Authentication failed") from e
        
        logger.info(
            f"Provisioned {mac_address} (guest {guest_id}, session {session_id}, "
            f"location {policy.location_id}, timeout {policy.effective_session_timeout}s)"
        )
        
        return GuestAuthData(
            username=mac_address,
            password=password,
            session_timeout=policy.effective_session_timeout,
            redirect_url=policy.redirect_url
        )
    
    def check_authorization_status(self, mac: str) -> dict:
        return RadiusService(self.db).get_authorization_status(normalize_mac(mac))
