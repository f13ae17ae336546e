from sqlmodel import SQLModel, create_engine, Session
from repokeeper.utils.logger import logger
from repokeeper.config.settings import STATELESS_MODE, DATABASE_URL, DEBUG_MODE

engine = None


def get_engine():
    global engine
    if STATELESS_MODE:
        logger.info(
            "Application is in STATELESS_MODE. Database engine will not be created."
        )
        return None

    if engine is None:
        logger.info("Database engine is not initialized. Creating a new one.")
        connect_args = {}
        if DATABASE_URL.startswith("sqlite"):
            logger.info("Using SQLite database.")
            # SQLite connections are otherwise pinned to the creating thread
            connect_args["check_same_thread"] = False
        else:
            logger.info("Using a non-SQLite database (e.g., PostgreSQL).")

        engine = create_engine(DATABASE_URL, echo=DEBUG_MODE, connect_args=connect_args)
        logger.info("Database engine created successfully.")
    return engine


def init_db():
    """Create any missing tables for the registered models."""
    db_engine = get_engine()
    if db_engine is None:
        return
    # Registers the tables on SQLModel.metadata
    import repokeeper.models.repository  # noqa: F401

    SQLModel.metadata.create_all(db_engine)


def get_session():
    db_engine = get_engine()
    if db_engine is None:
        logger.error("Attempted to get a database session while in STATELESS_MODE.")
        raise RuntimeError("Application is in STATELESS_MODE. Cannot get a session.")

    with Session(db_engine) as session:
        yield session
