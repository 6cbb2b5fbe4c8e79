"""
Security Utilities
Admin bearer-token verification and accounting webhook shared secret.
Tokens are issued by the admin dashboard; this service only verifies them.
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Header, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from ..config import settings

logger = logging.getLogger(__name__)

# OAuth2 scheme (token endpoint lives in the admin dashboard)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/admin/login")

ADMIN_ROLES = ["admin", "superadmin"]


def decode_access_token(token: str) -> dict:
    """Decode and verify an admin JWT"""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


async def get_current_admin(token: str = Depends(oauth2_scheme)) -> dict:
    """Get the admin identity (JWT claims) from the bearer token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(token)
    except JWTError:
        logger.warning("Rejected admin request with invalid token")
        raise credentials_exception
    
    if payload.get("sub") is None:
        raise credentials_exception
    
    return payload


def require_role(allowed_roles: list):
    """Dependency factory requiring one of the given roles"""
    async def role_checker(current_admin: dict = Depends(get_current_admin)) -> dict:
        if current_admin.get("role") not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required roles: {', '.join(allowed_roles)}"
            )
        return current_admin
    return role_checker


def verify_accounting_secret(x_accounting_secret: Optional[str] = Header(None)) -> bool:
    """
    Verify the shared secret sent by the accounting forwarder.
    Disabled when ACCOUNTING_SECRET is not configured.
    """
    if not settings.ACCOUNTING_SECRET:
        return True
    
    if not x_accounting_secret or not hmac.compare_digest(
        x_accounting_secret.encode(), settings.ACCOUNTING_SECRET.encode()
    ):
        logger.warning("Rejected accounting event with bad shared secret")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid accounting secret"
        )
    
    return True
