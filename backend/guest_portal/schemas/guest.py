from pydantic import BaseModel, field_validator
from typing import Literal, Optional

AuthMethod = Literal["email", "phone", "click-through"]


class GuestAuthRequest(BaseModel):
    mac_address: Optional[str] = None  # checked by the provisioning service, not here
    email: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    auth_method: AuthMethod = "email"
    location_id: Optional[int] = None
    ap_mac: Optional[str] = None
    login_url: Optional[str] = None  # controller login URL; the splash page posts credentials there itself
    
    @field_validator("email", "phone", "name", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # An empty form field must not erase stored guest data
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v


class GuestAuthData(BaseModel):
    username: str
    password: str
    session_timeout: int
    redirect_url: str = ""


class GuestAuthResponse(BaseModel):
    success: bool = True
    message: str = "Authentication successful"
    data: GuestAuthData


class AuthStatusResponse(BaseModel):
    authorized: bool
    username: Optional[str] = None
