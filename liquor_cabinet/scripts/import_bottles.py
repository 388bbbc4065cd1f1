"""
Import bottles and inventory events from CSV exports for one user.

Run from the repo root:
  liquor-cabinet-import --user-email me@example.com \
      --bottles exports/bottles_rows.csv --events exports/inventory_events_rows.csv

Uses the same DATABASE_URL as the API (.env supported by pydantic-settings).
"""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Dict, List

from liquor_cabinet.core.database import Base, SessionLocal, engine
from liquor_cabinet.middleware.logging import configure_logging
from liquor_cabinet.models.user import User
from liquor_cabinet.services.import_service import ImportService

logger = logging.getLogger("liquor_cabinet.scripts.import_bottles")


def read_rows(path: Path) -> List[Dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def run(user_email: str, bottles_csv: Path, events_csv: Path = None, dry_run: bool = False) -> int:
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == user_email).first()
        if not user:
            print(f"[import_bottles] Unknown user: {user_email}", file=sys.stderr)
            return 1

        service = ImportService(db)

        bottles = service.import_bottles(user.id, read_rows(bottles_csv))
        print(
            f"[import_bottles] Bottles: {bottles.imported} imported, {bottles.skipped} skipped"
        )

        if events_csv:
            events = service.import_events(user.id, read_rows(events_csv), bottles.id_map)
            print(
                f"[import_bottles] Events: {events.imported} imported, {events.skipped} skipped"
            )

        if dry_run:
            db.rollback()
            print("[import_bottles] DRY RUN: nothing committed")
        else:
            db.commit()
        return 0
    except Exception:
        db.rollback()
        logger.exception("Import failed")
        raise
    finally:
        db.close()


def main():
    p = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    p.add_argument("--user-email", required=True, help="Owner of the imported rows")
    p.add_argument("--bottles", type=Path, required=True, help="bottles CSV export")
    p.add_argument("--events", type=Path, help="inventory_events CSV export")
    p.add_argument("--dry-run", action="store_true", help="Do not commit, just report")
    args = p.parse_args()

    configure_logging()
    sys.exit(run(args.user_email, args.bottles, args.events, args.dry_run))


if __name__ == "__main__":
    main()
