import importlib

from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from catalog.config import settings
from catalog.utils.logs import get_logger

log = get_logger("db")

DATABASE_URL = settings.DATABASE_URL
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, future=True, echo=settings.SQL_ECHO, connect_args=_connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# every module declaring tables must be imported before create_all
MODEL_MODULES = [
    "catalog.models.category",
    "catalog.models.product",
]


def _import_models():
    for mod in MODEL_MODULES:
        importlib.import_module(mod)


def seed_demo_catalog(db: Session) -> int:
    """
    Insert the fixture catalog when the products table is empty.
    Returns the number of products created (0 when data already exists).
    """
    from catalog.fixtures import demo_catalog
    from catalog.models.product import ProductModel
    from catalog.repositories.product_repo import SqlProductRepository

    existing = db.execute(select(func.count()).select_from(ProductModel)).scalar() or 0
    if existing:
        log.info("Catalog already holds %s products, skipping seed.", existing)
        return 0

    repo = SqlProductRepository(db)
    _, products = demo_catalog()
    for p in products:
        repo.save(p)
    log.info("Seeded %s demo products.", len(products))
    return len(products)


def init_db(reset: bool = False, seed: bool = False, bind=None):
    """
    Initialize DB schema.

    Behavior:
      - reset=True drops every table first (tests / RESET_DB=1).
      - Tables are created if missing; existing data is left alone.
      - seed=True fills an empty catalog with the demo fixture data.
    """
    bind = bind or engine
    _import_models()

    if reset:
        log.info("Resetting database...")
        Base.metadata.drop_all(bind=bind)

    log.info("Creating database tables...")
    Base.metadata.create_all(bind=bind)

    if seed:
        s = Session(bind=bind, autoflush=False)
        try:
            seed_demo_catalog(s)
        finally:
            s.close()
    log.info("Database initialized.")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
