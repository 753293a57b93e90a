from sqlmodel import SQLModel, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from .config import DATABASE_URL, SQL_ECHO

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401


def _create_engine():
    if DATABASE_URL.startswith("sqlite"):
        # Sessions are handed across FastAPI worker threads
        return create_engine(
            DATABASE_URL,
            echo=SQL_ECHO,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        DATABASE_URL,
        echo=SQL_ECHO,
        pool_pre_ping=True,
        poolclass=NullPool,
    )

engine = _create_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Yield one session per request; closed when the request ends."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Create the tasks table on ``bind``, or on the configured engine."""
    SQLModel.metadata.create_all(bind=engine if bind is None else bind)
