from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Generator
import logging

from src.db.common.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """
    Tạo SQLAlchemy engine với connection pool theo Settings
    SQLite (dùng cho tests) chạy trên một connection dùng chung
    """
    url = settings.database_url
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args = {}
    if url.startswith("postgresql"):
        connect_args["options"] = f"-c statement_timeout={settings.db_statement_timeout_ms}"

    return create_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,  # Test connections before using them
        pool_recycle=settings.db_pool_recycle,
        connect_args=connect_args,
        echo=False           # Set to True for SQL query logging in development
    )


engine = create_db_engine(get_settings())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency để inject database session vào FastAPI routes
    Mỗi request có một session riêng, trả connection về pool khi xong
    Sử dụng trong routes với: db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _import_models():
    # Đăng ký tất cả models vào Base.metadata trước khi create_all
    from src.db.user.models import user_models  # noqa: F401
    from src.db.book.models import book_models  # noqa: F401
    from src.db.cart.models import cart_models  # noqa: F401
    from src.db.booking.models import booking_models  # noqa: F401


def create_tables(bind: Engine = None):
    """
    Tạo tất cả tables trong database
    Gọi hàm này khi khởi tạo ứng dụng lần đầu
    """
    _import_models()
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine = None):
    """
    Xóa tất cả tables (chỉ dùng trong development/testing)
    """
    _import_models()
    Base.metadata.drop_all(bind=bind or engine)


def check_connection(bind: Engine = None) -> bool:
    """Kiểm tra kết nối database"""
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database connection failed")
        return False


def init_database(bind: Engine = None):
    """
    Khởi tạo database - tạo tables nếu chưa tồn tại
    """
    try:
        create_tables(bind)
        logger.info("Database tables created successfully")
    except Exception:
        logger.exception("Error creating database tables")
        raise
