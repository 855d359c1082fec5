from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    """환경변수 설정"""

    # API 기본 설정
    app_name: str = "Sweetbyte API"
    debug: bool = False

    # Database (미지정 시 로컬 SQLite)
    database_url: str = "sqlite:///./sweetbyte.db"

    # 관리자 공유 키
    admin_key: str = "Sweetbyte2024"

    # 파일 경로
    upload_dir: str = "uploads"
    public_dir: str = "public"

    # 업로드 제한
    max_upload_size: int = 5 * 1024 * 1024  # 5MB
    max_request_size: int = 10 * 1024 * 1024  # multipart 오버헤드 포함

    # 서버
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # 로깅
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_rotation: str = "10 MB"
    log_retention: str = "30 days"

    @field_validator('admin_key')
    def validate_admin_key(cls, v):
        if not v or not v.strip():
            raise ValueError('ADMIN_KEY는 비어 있을 수 없습니다')
        return v

    @field_validator('database_url')
    def normalize_database_url(cls, v):
        # Heroku 스타일 URL은 SQLAlchemy가 인식하지 못함
        if v.startswith("postgres://"):
            return "postgresql://" + v[len("postgres://"):]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 (FastAPI 의존성으로도 사용)"""
    return Settings()

# 싱글톤 인스턴스
settings = get_settings()
