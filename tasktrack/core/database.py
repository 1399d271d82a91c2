from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()

# largest signed 64-bit integer, the most SQLite accepts for an INTEGER
MAX_ROW_ID = 2**63 - 1

def create_session_factory(database_url: str):
    """Build the engine and session factory for one application instance"""
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            # one shared connection, otherwise each session sees an empty db
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, echo=False, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine, SessionLocal

def get_db(request: Request):
    """Dépendance sessionDB"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
