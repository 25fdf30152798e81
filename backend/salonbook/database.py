from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .config import settings

connect_args = {}
if settings.resolved_database_url.startswith("sqlite"):
    # check_same_thread=False: FastAPI runs sync endpoints in a thread pool
    connect_args = {
        "check_same_thread": False,
        "timeout": settings.db_timeout_seconds,
    }

engine = create_engine(
    settings.resolved_database_url,
    connect_args=connect_args,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
