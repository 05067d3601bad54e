#!/usr/bin/env python3
"""
Seed the Litigator database with deterministic development fixtures.

Usage:
    DATABASE_URL=postgresql://localhost/litigator python scripts/seed_database.py --drop-existing

The same ``--seed`` always yields the same attorneys, clients, cases and deadlines
relative to the moment the script runs.
"""

from __future__ import annotations

import argparse
import logging

from litigator.config import get_settings
from litigator.db.session import close_connection_pool, get_connection
from litigator.seeding import FixtureGenerator, seed_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the Litigator database with development fixtures.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for fixture generation.")
    parser.add_argument("--drop-existing", action="store_true", help="Truncate all tables before seeding.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(levelname)s %(message)s")

    settings = get_settings()
    fixtures = FixtureGenerator(seed=args.seed).generate()
    logging.info(
        "Generated %d attorneys, %d clients and %d cases.",
        len(fixtures.attorneys),
        len(fixtures.clients),
        len(fixtures.cases),
    )
    try:
        with get_connection(settings) as conn:
            summary = seed_database(conn, fixtures, drop_existing=args.drop_existing)
    finally:
        close_connection_pool()
    logging.info("Finished. Inserted %d deadlines.", summary["deadlines"])


if __name__ == "__main__":
    main()
