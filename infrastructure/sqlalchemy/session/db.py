import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# SQLite: las rutas de FastAPI corren en el threadpool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    # Una sola conexión compartida, si no cada sesión vería una BDD vacía distinta
    engine = create_engine(
        DATABASE_URL, echo=False, connect_args=connect_args, poolclass=StaticPool
    )
else:
    engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


def get_session() -> Session:
    return SessionLocal()


def init_db() -> None:
    """Crea las tablas declaradas si no existen."""
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
