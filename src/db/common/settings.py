"""
Cấu hình ứng dụng, đọc từ biến môi trường (.env được load bằng python-dotenv).

Settings được tạo một lần khi khởi động và inject vào routes/services qua
``Depends(get_settings)``. Không module nào khác gọi os.getenv() trực tiếp.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "library"
    database_url_override: Optional[str] = None

    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_timeout: int = 30
    db_pool_recycle: int = 300
    # Giới hạn thời gian cho mỗi câu lệnh SQL (PostgreSQL statement_timeout)
    db_statement_timeout_ms: int = 5000

    host: str = "0.0.0.0"
    port: int = 3000

    bcrypt_rounds: int = 10

    log_level: str = "INFO"
    log_file: Optional[str] = None

    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def database_url(self) -> str:
        """URL kết nối database (DATABASE_URL nếu có, nếu không thì ghép từ DB_*)."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


def load_settings() -> Settings:
    """Đọc Settings từ môi trường"""
    load_dotenv()
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", ""),
        db_name=os.getenv("DB_NAME", "library"),
        database_url_override=os.getenv("DATABASE_URL") or None,
        db_pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
        db_max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "20")),
        db_pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30")),
        db_pool_recycle=int(os.getenv("DB_POOL_RECYCLE", "300")),
        db_statement_timeout_ms=int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "5000")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Dependency trả về Settings dùng chung cho toàn bộ ứng dụng
    Sử dụng trong routes với: settings: Settings = Depends(get_settings)
    """
    return load_settings()
