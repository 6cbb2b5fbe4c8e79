"""
Public API Routes
Read-only Location info for the splash page
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.location import LocationPublic
from ..services.location_service import get_location

router = APIRouter(tags=["Public API"])


@router.get("/location/{location_id}", response_model=LocationPublic)
def get_location_info(location_id: int, db: Session = Depends(get_db)):
    """Get location branding for the splash page"""
    
    location = get_location(db, location_id)
    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    
    return location
