"""
Initialize database with the default guest Location
Run this script once to set up the database
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from guest_portal.config import settings
from guest_portal.database import SessionLocal, init_db
from guest_portal.models import Location


def init_database():
    """Create tables and the default Location"""
    
    print("=" * 60)
    print("Guest WiFi Provisioning - Database Initialization")
    print("=" * 60)
    
    print("\nCreating database tables...")
    try:
        init_db()
        print("Database tables created (including radcheck, radreply, radusergroup)")
    except Exception as e:
        print(f"Error creating tables: {str(e)}")
        return
    
    db = SessionLocal()
    
    try:
        existing = db.query(Location).filter(Location.id == settings.DEFAULT_LOCATION_ID).first()
        
        if not existing:
            print("\nCreating default location...")
            location = Location(
                id=settings.DEFAULT_LOCATION_ID,
                name="Default Location",
                session_timeout=settings.DEFAULT_SESSION_TIMEOUT,
                idle_timeout=600,
                bandwidth_limit_up=0,
                bandwidth_limit_down=0,
                nas_ip=settings.DEFAULT_NAS_IP,
                splash_message="Welcome! Connect to our free WiFi.",
            )
            db.add(location)
            db.commit()
            print(f"Default location created (id={location.id})")
        else:
            print(f"\nLocation {existing.id} already exists: {existing.name}")
    
    except Exception as e:
        print(f"\nError: {str(e)}")
        db.rollback()
    
    finally:
        db.close()
        print()

if __name__ == "__main__":
    init_database()
