from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from airgradient_api import config


def build_engine(database_url: str, echo: bool = False):
    """Create the pooled engine shared by all requests."""
    url = make_url(database_url)
    options = {"echo": echo, "future": True, "pool_pre_ping": True}

    # SQLite uses a single-connection pool; sizing only applies to server databases
    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = config.DB_POOL_SIZE
        options["max_overflow"] = config.DB_MAX_OVERFLOW

    return create_engine(url, **options)


engine = build_engine(config.DATABASE_URL, echo=config.DB_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    # Import models so they register on Base.metadata
    from airgradient_api import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
