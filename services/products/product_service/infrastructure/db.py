from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from product_service.core_settings import get_settings
from product_service.domain.models import Base

settings = get_settings()
engine = create_engine(settings.database_url, echo=False, future=True, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_models():
    Base.metadata.create_all(engine)
