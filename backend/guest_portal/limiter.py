"""
Shared Rate Limiter Instance

Imported by main.py and the guest-facing routes. Storage is in-process by
default; point RATE_LIMIT_STORAGE_URI at Redis when running more than one
worker.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    default_limits=["1000/hour"]
)
