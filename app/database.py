from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from app.core.config import settings

DATABASE_URL = settings.DATABASE_URL

if settings.is_sqlite:
    # SQLite is only used for local development and tests; no pool tuning
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
        future=True,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,      # Test connections before using
        pool_size=10,            # Base connection pool size
        max_overflow=20,         # Max connections beyond pool_size
        pool_timeout=30,         # Timeout for getting connection (seconds)
        pool_recycle=3600,       # Recycle connections after 1 hour
        echo=False,
        future=True,
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    future=True,
)

from app.core.logging_config import logger
logger.info(f"Database engine configured: dialect={engine.dialect.name}")

from sqlalchemy import Column, DateTime, func

class Base(DeclarativeBase):
    pass

class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
