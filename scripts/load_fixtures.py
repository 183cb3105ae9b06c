"""Load fixture data into the database.

Usage:
    python -m scripts.load_fixtures [--seed N] [--reset]

Creates the employee and payroll_entry tables and loads the static
fixtures into them. Useful for running pay runs with DATA_SOURCE=database.
"""

from __future__ import annotations

import argparse
import sys

from sqlalchemy import create_engine, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from payrun.config import settings
from payrun.data.fixtures import fixture_employees, fixture_payroll_entries
from payrun.data.sources import SqlDataSource
from payrun.models import Base, EmployeeRecord, PayrollEntryRecord


def load_fixtures(database_url: str, seed: int | None, reset: bool) -> None:
    """Load the fixture employees and payroll entries."""
    print(f"Target database: {database_url.split('@')[1] if '@' in database_url else database_url}")

    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)

    try:
        with Session(engine) as session:
            if reset:
                session.execute(delete(PayrollEntryRecord))
                session.execute(delete(EmployeeRecord))

            source = SqlDataSource(session)
            employee_count, entry_count = source.load(
                fixture_employees(seed), fixture_payroll_entries()
            )
            session.commit()

        print("\nResults:")
        print(f"  Employees: {employee_count}")
        print(f"  Payroll entries: {entry_count}")
    except SQLAlchemyError as e:
        print(f"Error: Failed to load fixtures: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Load fixture data into database")
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.disposition_seed,
        help="Random seed for dispositions (default: DISPOSITION_SEED)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing rows before loading",
    )
    args = parser.parse_args()

    load_fixtures(settings.database_url, args.seed, args.reset)


if __name__ == "__main__":
    main()
