"""
Guest Identity Store
One guest row per canonical MAC address, written with a single
INSERT ... ON CONFLICT DO UPDATE so concurrent first visits cannot
create duplicates.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from ..models.guest import Guest

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _insert_for(db: Session):
    dialect = db.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        raise NotImplementedError(f"Guest upsert is not supported on {dialect}")


def upsert_guest(
    db: Session,
    mac_address: str,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    name: Optional[str] = None,
    auth_method: str = "email",
    location_id: Optional[int] = None,
    now: Optional[datetime] = None
) -> int:
    """
    Create or update the guest for a canonical MAC and return its id.
    
    New guest: visit_count = 1.
    Returning guest: non-null fields overwrite, null fields keep the stored
    value, visit_count + 1, last_seen = now.
    
    Does not commit. On PostgreSQL the conflicting row stays locked until
    the caller's transaction ends.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    
    insert = _insert_for(db)
    stmt = insert(Guest).values(
        mac_address=mac_address,
        email=email,
        phone=phone,
        name=name,
        auth_method=auth_method,
        location_id=location_id,
        last_seen=now,
        visit_count=1
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Guest.mac_address],
        set_={
            "email": func.coalesce(stmt.excluded.email, Guest.email),
            "phone": func.coalesce(stmt.excluded.phone, Guest.phone),
            "name": func.coalesce(stmt.excluded.name, Guest.name),
            "auth_method": func.coalesce(stmt.excluded.auth_method, Guest.auth_method),
            "location_id": func.coalesce(stmt.excluded.location_id, Guest.location_id),
            "last_seen": stmt.excluded.last_seen,
            "visit_count": Guest.visit_count + 1,
        }
    ).returning(Guest.id)
    
    return db.execute(stmt).scalar_one()


def get_guest_by_mac(db: Session, mac_address: str, for_update: bool = False) -> Optional[Guest]:
    query = db.query(Guest).filter(Guest.mac_address == mac_address)
    if for_update:
        query = query.with_for_update()
    return query.first()
