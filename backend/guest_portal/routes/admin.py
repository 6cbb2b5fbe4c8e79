"""
Admin Routes
Administrative session control (token issued by the admin dashboard)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import DisconnectError
from ..schemas.radius import DisconnectResponse
from ..services.session_service import SessionManager
from ..utils.mac import normalize_mac
from ..utils.security import ADMIN_ROLES, require_role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/disconnect/{mac}", response_model=DisconnectResponse)
def disconnect_guest(
    mac: str,
    current_admin: dict = Depends(require_role(ADMIN_ROLES)),
    db: Session = Depends(get_db)
):
    """Remove RADIUS authorization for a MAC and close its active sessions"""
    
    mac_address = normalize_mac(mac)
    if not mac_address:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="MAC address is required")
    
    try:
        closed = SessionManager(db).close_by_disconnect(mac_address, actor=current_admin.get("sub"))
    except DisconnectError as e:
        logger.error(f"Disconnect failed for {mac_address}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to disconnect user"
        )
    
    return DisconnectResponse(
        message=f"Disconnected {mac_address}",
        sessions_closed=closed
    )
