# eshop/data/seed.py
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from eshop.data.database import SessionLocal, create_schema, init_engine
from eshop.data.models.product import ProductModel
from eshop.utils.logging import configure_logging, get_logger
from eshop.utils.settings import load_settings

logger = get_logger(__name__)

SEED_PRODUCTS = [
    ("Laptop", Decimal("1200.00"), 10),
    ("Smartphone", Decimal("800.00"), 15),
    ("Mouse", Decimal("25.00"), 50),
    ("Keyboard", Decimal("45.00"), 30),
    ("Monitor", Decimal("200.00"), 20),
]


def seed(db: Session | None = None) -> int:
    own_session = db is None
    db = db or SessionLocal()
    try:
        # nie nadpisujemy: seed tylko gdy katalog jest pusty
        if db.execute(select(ProductModel.id).limit(1)).first():
            logger.info("Products table not empty, skipping seed")
            return 0

        for name, price, stock in SEED_PRODUCTS:
            db.add(ProductModel(name=name, price=price, stock=stock))
        db.commit()

        logger.info(f"Seeded {len(SEED_PRODUCTS)} products")
        return len(SEED_PRODUCTS)
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    engine = init_engine(settings)
    create_schema(engine, attempts=settings.db_connect_attempts)
    seed()
