#!/usr/bin/env python3
"""
Script: create_tables.py
Purpose: Create the storefront tables on an empty database

Usage:
    cd backend && source venv/bin/activate
    python scripts/migrations/create_tables.py
"""

import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).parent.parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from dotenv import load_dotenv

load_dotenv(BACKEND_DIR / '.env')

from storefront.core.logging_config import setup_logging
from storefront.migrations import create_schema

if __name__ == "__main__":
    setup_logging()
    create_schema()
