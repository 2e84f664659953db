from sqlalchemy import create_engine               # SQLAlchemy engine
from sqlalchemy.orm import declarative_base        # base class for models
from sqlalchemy.orm import sessionmaker            # session factory

from config.settings import settings               # ✅ environment settings

# ✅ engine built from the configured DB URL
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# ✅ session factory used by every request
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ declarative Base shared by all models
Base = declarative_base()


# ==========================================================
# [common] per-request DB session
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
