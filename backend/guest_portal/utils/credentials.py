import secrets

from ..config import settings


def generate_radius_password(num_bytes: int = None) -> str:
    """
    Generate a one-off RADIUS Cleartext-Password for a guest.
    
    Uses the OS CSPRNG; 8 bytes (16 hex characters) is the minimum.
    """
    if num_bytes is None:
        num_bytes = settings.CREDENTIAL_BYTES
    
    if num_bytes < 8:
        raise ValueError("RADIUS passwords need at least 8 bytes of entropy")
    
    return secrets.token_hex(num_bytes)
