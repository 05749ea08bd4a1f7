# scripts/seed_data.py
import sys
import argparse
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.core.logging import logger
from app.db.init_db import init_db
from app.db.session import Database


def seed_database(database: Database, reset: bool = False) -> None:
    """Seed the database with initial data"""
    if reset:
        database.reset()
    else:
        database.init()

    db = database.session()
    try:
        init_db(db)
    finally:
        db.close()


def main():
    """Main entry point for the script"""
    parser = argparse.ArgumentParser(description='Seed database for the Team Discussions API')
    parser.add_argument('--database-url', type=str, default=settings.SQLALCHEMY_DATABASE_URI,
                        help='Database URL (defaults to the configured one)')
    parser.add_argument('--reset', action='store_true',
                        help='Drop and recreate all tables before seeding')

    args = parser.parse_args()

    database = Database(args.database_url)
    logger.info("Seeding database...")
    try:
        seed_database(database, reset=args.reset)
    finally:
        database.shutdown()
    logger.info("Database seeded successfully.")


if __name__ == "__main__":
    main()
