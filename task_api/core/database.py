from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from task_api.core.config import settings


def _connect_args(url: str) -> dict:
    # sqlite refuse par défaut les connexions partagées entre threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=_connect_args(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
