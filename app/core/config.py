from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    DEBUG: bool = False
    DATABASE_URL: str = "sqlite+aiosqlite:///./notes.db"
    UPLOAD_DIR: str = "uploads"
    SEED_SAMPLE_DATA: bool = True
    ALLOWED_HOSTS: str = "*"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    class Config:
        env_file = [".env"]
        case_sensitive = True

    @property
    def allowed_hosts(self) -> List[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
