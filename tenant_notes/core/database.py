"""
Database configuration and session management
"""

from sqlmodel import SQLModel, Session, create_engine
import structlog

from tenant_notes.core.config import get_settings

logger = structlog.get_logger(__name__)
settings = get_settings()

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)


def init_db():
    """Create database tables (development and seeding only)"""
    # Register table models on the shared metadata
    import tenant_notes.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created")


def get_session():
    """Dependency to get database session"""
    with Session(engine) as session:
        yield session
