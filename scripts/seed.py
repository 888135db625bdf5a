#!/usr/bin/env python3
"""CLI script to seed sample funds, investors and investments.

Seeds:
- 3 funds (Growth Fund I, Venture Fund II, Innovation Fund)
- 4 investors (two institutions, a family office, an individual)
- 3 investments linking them

Funds and investors that already exist (by name / email) are skipped.
Investments are only created for funds created in the same run, so running
the script twice never duplicates them.

Usage:
    python scripts/seed.py
    python scripts/seed.py --dry-run
    python scripts/seed.py --verbose
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal
from typing import Dict
from uuid import UUID

from sqlmodel import Session, select

# Add parent directory to path for imports
sys.path.insert(0, ".")

from private_markets.core.config import get_settings
from private_markets.core.errors import AppError
from private_markets.core.logging import setup_logging
from private_markets.db import Database
from private_markets.domain import FundOperations, InvestmentOperations, InvestorOperations
from private_markets.models import Fund, FundCreate, InvestmentCreate, InvestorCreate

from _console import print_header, print_info, print_success, print_warning, print_error


# =============================================================================
# Sample Data
# =============================================================================

FUNDS = [
    {"name": "Growth Fund I", "vintage_year": 2024, "target_size_usd": Decimal("250000000.00"), "status": "Fundraising"},
    {"name": "Venture Fund II", "vintage_year": 2023, "target_size_usd": Decimal("150000000.00"), "status": "Investing"},
    {"name": "Innovation Fund", "vintage_year": 2025, "target_size_usd": Decimal("500000000.00"), "status": "Fundraising"},
]

INVESTORS = [
    {"name": "Goldman Sachs Asset Management", "investor_type": "Institution", "email": "investments@gsam.com"},
    {"name": "CalPERS", "investor_type": "Institution", "email": "privateequity@calpers.ca.gov"},
    {"name": "John Smith Family Office", "investor_type": "Family Office", "email": "investments@smithfamily.com"},
    {"name": "Jane Doe", "investor_type": "Individual", "email": "jane.doe@email.com"},
]

# (investor email, fund name, amount, date)
INVESTMENTS = [
    ("investments@gsam.com", "Growth Fund I", Decimal("50000000.00"), date(2024, 3, 15)),
    ("privateequity@calpers.ca.gov", "Growth Fund I", Decimal("75000000.00"), date(2024, 4, 20)),
    ("investments@gsam.com", "Venture Fund II", Decimal("30000000.00"), date(2023, 8, 10)),
]


# =============================================================================
# Seeding Logic
# =============================================================================


def seed_funds(session: Session, dry_run: bool, results: dict) -> Dict[str, UUID]:
    """Create missing funds. Returns name -> id for funds created in this run."""
    created = {}
    for fund_data in FUNDS:
        name = fund_data["name"]
        existing = session.exec(select(Fund).where(Fund.name == name)).first()

        if existing:
            print_warning(f"fund {name} - already exists (id: {existing.id})")
            results["skipped"] += 1
            continue

        if dry_run:
            print_info(f"fund {name} - would create (dry-run)")
            results["created"] += 1
            continue

        fund = FundOperations.create(session, FundCreate(**fund_data))
        created[name] = fund.id
        print_success(f"fund {name} - created (id: {fund.id})")
        results["created"] += 1

    return created


def seed_investors(session: Session, dry_run: bool, results: dict) -> Dict[str, UUID]:
    """Create missing investors. Returns email -> id for every known investor."""
    ids = {}
    for investor_data in INVESTORS:
        email = investor_data["email"]
        existing = InvestorOperations.get_by_email(session, email)

        if existing:
            print_warning(f"investor {email} - already exists (id: {existing.id})")
            ids[email] = existing.id
            results["skipped"] += 1
            continue

        if dry_run:
            print_info(f"investor {email} - would create (dry-run)")
            results["created"] += 1
            continue

        investor = InvestorOperations.create(session, InvestorCreate(**investor_data))
        ids[email] = investor.id
        print_success(f"investor {email} - created (id: {investor.id})")
        results["created"] += 1

    return ids


def seed_investments(
    session: Session,
    fund_ids: Dict[str, UUID],
    investor_ids: Dict[str, UUID],
    results: dict,
) -> None:
    for email, fund_name, amount, invested_on in INVESTMENTS:
        label = f"investment {email} -> {fund_name}"
        if fund_name not in fund_ids or email not in investor_ids:
            print_warning(f"{label} - fund not created in this run")
            results["skipped"] += 1
            continue

        try:
            InvestmentOperations.create(
                session,
                fund_ids[fund_name],
                InvestmentCreate(investor_id=investor_ids[email], amount_usd=amount, investment_date=invested_on),
            )
        except AppError as e:
            print_error(f"{label} - failed: {e.message}")
            results["failed"] += 1
            continue

        print_success(f"{label} - created ({amount:,.2f} USD)")
        results["created"] += 1


def seed_all(session: Session, dry_run: bool = False) -> dict:
    """Seed all sample data.

    Args:
        session: Database session
        dry_run: If True, only report what would be created

    Returns:
        Dict with counts: created, skipped, failed
    """
    results = {"created": 0, "skipped": 0, "failed": 0}

    fund_ids = seed_funds(session, dry_run, results)
    investor_ids = seed_investors(session, dry_run, results)

    if dry_run:
        print_info(f"{len(INVESTMENTS)} investments - would create for newly created funds (dry-run)")
        return results

    seed_investments(session, fund_ids, investor_ids, results)
    return results


# =============================================================================
# CLI
# =============================================================================


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed sample funds, investors and investments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without writing to database",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()
    settings = get_settings()
    setup_logging("DEBUG" if args.verbose else settings.LOG_LEVEL)

    print_header(f"Seeding Sample Data ({settings.ENVIRONMENT})")

    if args.dry_run:
        print_info("DRY RUN MODE - No changes will be committed\n")

    database = Database.from_settings(settings)
    try:
        database.open()
        with database.session() as session:
            results = seed_all(session, dry_run=args.dry_run)

        print_header("Summary")
        print(f"  Created: {results['created']}")
        print(f"  Skipped: {results['skipped']}")
        print(f"  Failed:  {results['failed']}")

        return 1 if results["failed"] > 0 else 0

    except Exception as e:
        print_error(f"Fatal error: {e}")
        logging.exception("Fatal error during seeding")
        return 1
    finally:
        database.close()


if __name__ == "__main__":
    sys.exit(main())
