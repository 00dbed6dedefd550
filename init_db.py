"""
Database initialization script.
Applies the Alembic migrations, or creates the tables directly with --create-all.
Run this as: python init_db.py [--create-all]
"""

import argparse
import logging
import sys

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

from fitsocial.db.init_db import create_all_tables, init_db

def main():
    parser = argparse.ArgumentParser(description="Initialize the FitSocial database")
    parser.add_argument(
        "--create-all",
        action="store_true",
        help="Create tables from the models instead of running migrations"
    )
    args = parser.parse_args()

    logger.info("Starting database initialization")
    if args.create_all:
        if not create_all_tables():
            logger.error("Database initialization failed")
            sys.exit(1)
    else:
        init_db()
    logger.info("Database initialization completed successfully")

if __name__ == "__main__":
    main()
