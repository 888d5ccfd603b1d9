# travelease/config.py
from typing import List, Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str
    MONGODB_DB_NAME: str = "travelEaseDB"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["*"]

    # Firebase service account
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_PRIVATE_KEY_ID: Optional[str] = None
    FIREBASE_PRIVATE_KEY: Optional[str] = None
    FIREBASE_CLIENT_EMAIL: Optional[str] = None
    FIREBASE_CLIENT_ID: Optional[str] = None
    FIREBASE_CLIENT_CERT_URL: Optional[str] = None

    class Config:
        env_file = ".env"

    @property
    def firebase_configured(self) -> bool:
        return all((self.FIREBASE_PROJECT_ID, self.FIREBASE_PRIVATE_KEY, self.FIREBASE_CLIENT_EMAIL))

    def firebase_credentials(self) -> dict:
        """Service account mapping accepted by firebase_admin.credentials.Certificate"""
        private_key = self.FIREBASE_PRIVATE_KEY or ""
        return {
            "type": "service_account",
            "project_id": self.FIREBASE_PROJECT_ID,
            "private_key_id": self.FIREBASE_PRIVATE_KEY_ID,
            # keys pasted into .env usually carry escaped newlines
            "private_key": private_key.replace("\\n", "\n"),
            "client_email": self.FIREBASE_CLIENT_EMAIL,
            "client_id": self.FIREBASE_CLIENT_ID,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
            "client_x509_cert_url": self.FIREBASE_CLIENT_CERT_URL,
            "universe_domain": "googleapis.com",
        }

@lru_cache()
def get_settings():
    return Settings()
