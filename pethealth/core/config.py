from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Pet Health Records API"
    ENV: str = "dev"
    API_PREFIX: str = "/api"

    # "오늘" 기준 시간대 (리마인더 상태 계산용)
    TIMEZONE: str = "UTC"
    LOG_LEVEL: str = "INFO"

    DB_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "pethealth"

    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    model_config = SettingsConfigDict(
        env_file=".env",     # 프로젝트 루트에 있는 .env 자동 로딩
        extra="ignore",
    )

    @property
    def DATABASE_URL(self) -> str:
        """SQLAlchemy 연결 URL. DB_URL > MySQL 설정 > 로컬 SQLite 순서로 결정"""
        if self.DB_URL:
            return self.DB_URL
        if self.DB_HOST:
            return (
                f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            )
        return "sqlite:///./pethealth.db"


# settings 객체를 import하면 바로 사용할 수 있음
settings = Settings()
