#!/usr/bin/env python3
"""
Seed the configured database with the default admin and the sample catalog.

Usage:
    python scripts/seed_data.py            # create what is missing
    python scripts/seed_data.py --reset-admin
"""

import argparse
import logging
import sys
from pathlib import Path

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.database import SessionLocal, init_db
from app.services.seeding import seed_admin, seed_vehicles

logging.basicConfig(level=logging.INFO, stream=sys.stderr)


def main():
    parser = argparse.ArgumentParser(description="Seed the showroom database")
    parser.add_argument("--reset-admin", action="store_true", help="restore the default admin's name, password and active flag")
    parser.add_argument("--skip-vehicles", action="store_true", help="do not insert sample vehicles")
    args = parser.parse_args()

    init_db()
    db = SessionLocal()
    try:
        admin, created = seed_admin(db, reset=args.reset_admin)
        print(f"Admin {admin.email}: {'created' if created else 'already present'}")

        if not args.skip_vehicles:
            count, inserted = seed_vehicles(db)
            print(f"Vehicles: {count} {'inserted' if inserted else 'already in catalog'}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
