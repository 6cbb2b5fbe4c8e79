from pydantic import BaseModel
from typing import Optional

ACCT_STOP = "Stop"


class AccountingEvent(BaseModel):
    """Accounting webhook body forwarded from the RADIUS server / NAS"""
    username: Optional[str] = None  # Accounting-On/Off carry no User-Name
    acct_status_type: Optional[str] = None  # Start, Interim-Update, Stop, Accounting-On, ...
    session_id: Optional[str] = None
    session_time: Optional[int] = 0
    input_octets: Optional[int] = 0
    output_octets: Optional[int] = 0
    
    @property
    def is_stop(self) -> bool:
        return self.acct_status_type == ACCT_STOP


class DisconnectResponse(BaseModel):
    success: bool = True
    message: str
    sessions_closed: int = 0
