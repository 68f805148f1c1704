"""Application configuration"""
from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    database_url: str = "sqlite:///./soulsync.db"
    
    # Railway/Production (Railway sets this to the string 'production')
    railway_environment: Optional[str] = None
    
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    
    # Application
    debug: bool = False
    log_level: str = "INFO"
    
    # Fixed seed for practice selection; random when unset
    practice_seed: Optional[int] = None
    
    # Reports
    report_font_path: Optional[str] = None
    
    @property
    def is_railway(self) -> bool:
        """Whether the app runs on Railway"""
        return self.railway_environment is not None or os.getenv("RAILWAY_ENVIRONMENT") is not None
    
    class Config:
        # On Railway variables come straight from the environment
        env_file = ".env" if not os.getenv("RAILWAY_ENVIRONMENT") else None
        case_sensitive = False
        # Railway injects variables we do not model
        extra = "ignore"


settings = Settings()
