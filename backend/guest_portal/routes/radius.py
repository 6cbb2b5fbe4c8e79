"""
RADIUS Accounting Routes
Webhook fed by the RADIUS server / NAS accounting forwarder
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.radius import AccountingEvent
from ..services.session_service import SessionManager
from ..utils.security import verify_accounting_secret

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/radius", tags=["RADIUS Accounting"])


@router.post("/accounting", dependencies=[Depends(verify_accounting_secret)])
def accounting_event(event: AccountingEvent, db: Session = Depends(get_db)):
    """
    Record an accounting event. Only Stop closes a session; other types and
    Stops for unknown sessions are acknowledged without changes.
    """
    
    try:
        SessionManager(db).handle_accounting_event(event)
    except Exception as e:
        logger.error(f"Accounting update failed for {event.username}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Accounting update failed"
        )
    
    return {"success": True}
