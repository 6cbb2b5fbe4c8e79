"""
Guest Authentication Routes
Called by the captive portal after the guest submits the splash form.

Flow with an external captive portal controller:
1. Guest joins the SSID and is redirected to the splash page
2. Splash page posts email/phone/click-through here with the client MAC
3. We write RADIUS credentials (username = MAC) and open a session
4. Splash page submits username/password to the controller login URL
5. Controller authenticates the guest against FreeRADIUS
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..exceptions import MissingHardwareAddressError, ProvisioningError
from ..limiter import limiter
from ..schemas.guest import AuthStatusResponse, GuestAuthRequest, GuestAuthResponse
from ..services.provisioning_service import ProvisioningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Guest Authentication"])


@router.post("/guest", response_model=GuestAuthResponse)
@limiter.limit(settings.GUEST_AUTH_RATE_LIMIT)
def authenticate_guest(
    request: Request,
    data: GuestAuthRequest,
    db: Session = Depends(get_db)
):
    """Provision RADIUS credentials for a guest device"""
    
    try:
        credentials = ProvisioningService(db).authenticate_guest(data)
    except MissingHardwareAddressError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ProvisioningError:
        # Details are logged by the service; the guest only sees a generic failure
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication failed"
        )
    
    return GuestAuthResponse(data=credentials)


@router.get("/status/{mac}", response_model=AuthStatusResponse, response_model_exclude_none=True)
def get_authorization_status(mac: str, db: Session = Depends(get_db)):
    """Check if a MAC address currently has RADIUS credentials"""
    
    try:
        return ProvisioningService(db).check_authorization_status(mac)
    except Exception as e:
        logger.error(f"Status check failed for {mac}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Status check failed"
        )
