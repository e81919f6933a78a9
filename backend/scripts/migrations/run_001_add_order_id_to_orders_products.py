#!/usr/bin/env python3
"""
Script: run_001_add_order_id_to_orders_products.py
Purpose: Add the nullable orders_products.order_id foreign key (or revert it)

Usage:
    cd backend && source venv/bin/activate
    python scripts/migrations/run_001_add_order_id_to_orders_products.py [--down] [--dry-run]

Options:
    --down       Drop the foreign key and the column
    --dry-run    Show what would be done without making changes
"""

import sys
import argparse
import logging
from pathlib import Path

# Add backend to path
BACKEND_DIR = Path(__file__).parent.parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from dotenv import load_dotenv

load_dotenv(BACKEND_DIR / '.env')

from storefront.core.database import get_db_connection_with_retry
from storefront.core.logging_config import setup_logging
from storefront.migrations import add_order_id_to_orders_products, run_migration


def main() -> int:
    parser = argparse.ArgumentParser(description="Add orders_products.order_id")
    parser.add_argument("--down", action="store_true", help="Revert the migration")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be done")
    args = parser.parse_args()

    setup_logging()
    logger = logging.getLogger("run_001")

    conn = get_db_connection_with_retry()
    try:
        ran = run_migration(
            conn,
            add_order_id_to_orders_products,
            down=args.down,
            dry_run=args.dry_run,
        )
    finally:
        conn.close()

    logger.info("Done" if ran else "Nothing to do")
    return 0


if __name__ == "__main__":
    sys.exit(main())
