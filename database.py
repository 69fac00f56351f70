from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import os

# --- CONFIGURATION ---
_DB_DIR = os.path.join(os.path.dirname(__file__), 'db')
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(_DB_DIR, 'gym_admin.db')}")

# SQLAlchemy requires postgresql://, but hosted providers may hand out postgres://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

IS_POSTGRES = DATABASE_URL.startswith("postgresql")

# --- ENGINE & SESSION ---
if IS_POSTGRES:
    engine = create_engine(
        DATABASE_URL,
        pool_size=10,
        max_overflow=5,
        pool_timeout=30,
        pool_recycle=1800
    )
else:
    if "DATABASE_URL" not in os.environ:
        os.makedirs(_DB_DIR, exist_ok=True)
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False}
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(reset: bool = False, seed: bool = True):
    """Create tables and load the demo data into an empty store."""
    # Register the tables on Base.metadata
    import models_orm  # noqa: F401
    from data import seed_demo_data

    if reset:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    if seed:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()


# --- UTILS ---
def get_db_session():
    return SessionLocal()
