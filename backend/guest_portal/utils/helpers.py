from typing import Optional

BYTES_PER_MB = 1048576


def octets_to_mb(octets: Optional[int]) -> float:
    """Convert RADIUS accounting octets to megabytes (missing counts as 0)"""
    if not octets:
        return 0.0
    return octets / BYTES_PER_MB


def kbps_to_bps(kbps: Optional[int]) -> int:
    """Convert a Location bandwidth limit (kbps) to WISPr bits/sec"""
    return int(kbps or 0) * 1000


def log_system_event(db, level: str, module: str, action: str, message: str, details: dict = None, actor: str = None):
    """
    Add an audit row to the current transaction.
    
    Does not commit: the row is persisted or discarded together with the
    unit of work it describes.
    """
    from ..models.system_log import SystemLog
    
    log_entry = SystemLog(
        log_level=level,
        module=module,
        action=action,
        message=message,
        details=details,
        actor=actor
    )
    db.add(log_entry)
    return log_entry
