from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Guest WiFi Provisioning API"
    APP_ENV: str = "development"
    DEBUG: bool = True
    ENABLE_API_DOCS: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    
    # Database (PostgreSQL in production, SQLite for development)
    DATABASE_URL: str = "sqlite:///./guest_portal.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 10  # seconds to wait for a pooled connection
    DB_STATEMENT_TIMEOUT_MS: int = 5000
    
    # Guest provisioning defaults
    DEFAULT_LOCATION_ID: int = 1
    DEFAULT_SESSION_TIMEOUT: int = 3600  # 1 hour
    DEFAULT_NAS_IP: str = "0.0.0.0"
    CREDENTIAL_BYTES: int = 8
    
    # FreeRADIUS group every guest is placed in
    RADIUS_GROUP_NAME: str = "guests"
    RADIUS_GROUP_PRIORITY: int = 1
    
    # Security
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCOUNTING_SECRET: Optional[str] = None  # X-Accounting-Secret header, disabled when unset
    
    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"
    
    @property
    def origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
    
    # Rate limiting (redis://host:6379/0 in production)
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    GUEST_AUTH_RATE_LIMIT: str = "30/minute"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    
    @field_validator("CREDENTIAL_BYTES")
    @classmethod
    def credential_entropy(cls, v: int) -> int:
        # 8 bytes -> 16 hex characters minimum
        if v < 8:
            raise ValueError("CREDENTIAL_BYTES must be at least 8")
        return v
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

# Create settings instance
settings = Settings()
