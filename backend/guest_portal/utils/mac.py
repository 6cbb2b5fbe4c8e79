import re

_NON_HEX = re.compile(r"[^a-f0-9]")


def normalize_mac(mac: str) -> str:
    """
    Normalize a MAC address to the lower-case colon-separated form used as
    the RADIUS username and guest key.
    
    Handles formats like:
    - AA-BB-CC-DD-EE-FF -> aa:bb:cc:dd:ee:ff
    - aabb.ccdd.eeff    -> aa:bb:cc:dd:ee:ff
    - AABBCCDDEEFF      -> aa:bb:cc:dd:ee:ff
    
    Never raises: characters outside the hex alphabet are dropped, and an
    odd number of remaining digits is returned without separators.
    """
    if not mac:
        return ""
    
    cleaned = _NON_HEX.sub("", mac.lower())
    
    if len(cleaned) % 2 != 0:
        return cleaned
    
    return ":".join(cleaned[i:i + 2] for i in range(0, len(cleaned), 2))
