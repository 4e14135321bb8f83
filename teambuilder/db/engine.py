from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def make_engine(database_url: str) -> Engine:
    # Add SSL + TCP keepalive args only for Postgres (not SQLite)
    connect_args = {}
    pool_args = {}
    if database_url.startswith("postgresql"):
        connect_args = {
            "sslmode": "require",
            "keepalives": 1,
            "keepalives_idle": 30,     # seconds before starting keepalives
            "keepalives_interval": 10, # seconds between keepalives
            "keepalives_count": 5,
        }
    if database_url.startswith("sqlite"):
        # sync routes run in the threadpool
        connect_args = {"check_same_thread": False}
    else:
        pool_args = {
            "pool_recycle": 300,
            "pool_size": 10,
            "max_overflow": 10,
            "pool_timeout": 10,
        }

    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=False,
        future=True,
        connect_args=connect_args,
        **pool_args,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
        future=True,
    )
