#!/usr/bin/env python3
"""
Populate a Home Healthcare SQLite database with demo data.

Applies pending migrations, then inserts the demo customer, providers,
administrator, services and bookings if the database holds no users
yet.  Running it twice is harmless.

Usage:
    python seed_db.py --db ./homecare.db
"""

import argparse
import os
import logging
import sys

from homecare_api.app.core.logging_config import setup_logging
from homecare_api.app.core.seed import seed_storage
from homecare_api.app.storage.sqlite import SQLiteStorage


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Seed the Home Healthcare SQLite database with demo data.")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (created if missing)")
    ap.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    storage = SQLiteStorage(os.path.abspath(args.db))
    if seed_storage(storage):
        print(f"Seeded demo data into {storage.db_path}")
    else:
        print(f"{storage.db_path} already has users; nothing to do")
    logging.getLogger(__name__).debug("Users now in store: %s", len(storage.get_users()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
