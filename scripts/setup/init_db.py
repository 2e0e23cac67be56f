# scripts/setup/init_db.py
"""
Initialize database: creates all tables and seeds the identifier counters
from any vehicles/customers/sales already present.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text
from dealership.config import settings
from dealership.database import SessionLocal, create_tables, engine
from dealership.errors import DataError
from dealership.models.id_counter import IdCounter
from dealership.services.id_generator import ID_SEQUENCES, last_identifier_value


def seed_counters():
    """Create missing id_counters rows. Existing counters are left alone."""
    db = SessionLocal()
    try:
        for entity_class in ID_SEQUENCES:
            counter = db.query(IdCounter).filter(IdCounter.entity_class == entity_class).first()
            if counter:
                print(f"   = {entity_class}: counter at {counter.last_value}")
                continue
            value = last_identifier_value(db, entity_class)
            db.add(IdCounter(entity_class=entity_class, last_value=value))
            print(f"   + {entity_class}: counter seeded at {value}")
        db.commit()
    finally:
        db.close()


def main():
    print("Dealership DB Initialization")
    print("=" * 40)
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running and DATABASE_URL is set (see .env)")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print("\nSeeding identifier counters...")
    try:
        seed_counters()
    except DataError as e:
        print(f"Existing data has a malformed identifier: {e}")
        sys.exit(1)

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn dealership.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
