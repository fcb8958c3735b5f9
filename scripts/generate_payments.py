#!/usr/bin/env python3
"""Generate the payment records for one lease.

Previews the rent (and optional utility) schedule of a lease, then stores
the payments that do not exist yet and exports them to JSON files and/or
PostgreSQL.

Example::

    python scripts/generate_payments.py --tenant-id t-1 --property-id p-1 \\
        --rent 5000 --start 2025-08-01 --end 2025-10-31 --due-day 5 --dry-run
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lease_schedule.config import LeaseScheduleConfig
from lease_schedule.exceptions import InvalidLeaseError, SinkError
from lease_schedule.generators.dates import format_amount
from lease_schedule.logging import get_logger, setup_logging
from lease_schedule.models import LeaseDetails
from lease_schedule.scenarios import LeasePaymentScenario
from lease_schedule.sinks import JsonFileSink, PostgresSink

logger = get_logger(__name__)


def decimal_arg(value: str) -> Decimal:
    """Parse a decimal command-line argument."""
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description="Generate lease payment records")
    parser.add_argument("--tenant-id", required=True, help="Tenant ID")
    parser.add_argument("--property-id", required=True, help="Property ID")
    parser.add_argument("--rent", type=decimal_arg, required=True, help="Monthly rent amount")
    parser.add_argument("--start", required=True, help="Lease start date (YYYY-MM-DD)")
    parser.add_argument("--end", required=True, help="Lease end date (YYYY-MM-DD)")
    parser.add_argument("--due-day", type=int, default=None, help="Rent due day of month (default: 5)")
    parser.add_argument(
        "--utility-amount",
        type=decimal_arg,
        default=None,
        help="Monthly utility charge; enables utility payments",
    )
    parser.add_argument("--created-by", default=None, help="Owner user ID recorded on payments")
    parser.add_argument("--output-dir", type=Path, default=None, help="Write payments.json here")
    parser.add_argument(
        "--postgres",
        action="store_true",
        help="Also insert into PostgreSQL (connection from POSTGRES_* variables)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Preview only, store nothing")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    config = LeaseScheduleConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    lease = LeaseDetails(
        tenant_id=args.tenant_id,
        property_id=args.property_id,
        monthly_rent=args.rent,
        lease_start=args.start,
        lease_end=args.end,
        payment_due_day=args.due_day,
        include_utilities=args.utility_amount is not None,
        utility_amount=args.utility_amount,
    )

    sinks: list[Any] = []
    scenario = LeasePaymentScenario(
        lease,
        created_by=args.created_by,
        config=config.schedule,
    )
    symbol = config.schedule.currency_symbol

    try:
        preview = scenario.preview()
        print("Preview of payments to be generated:\n")
        for index, line in enumerate(scenario.preview_lines(preview), start=1):
            print(f"{index}. {line}")

        summary = preview.summary
        print("\nSummary:")
        print(f"   Total Months: {summary.total_months}")
        print(f"   Total Rent: {symbol}{format_amount(summary.total_rent)}")
        print(f"   Total Utilities: {symbol}{format_amount(summary.total_utilities)}")
        print(f"   Total Payments: {summary.payments_count}")
        print(f"   Grand Total: {symbol}{format_amount(summary.grand_total)}")

        if args.dry_run:
            return 0

        if args.output_dir is not None:
            sinks.append(JsonFileSink(args.output_dir, pretty=config.output.pretty_json))
        if args.postgres:
            pg_sink = PostgresSink(config.postgres.connection_string)
            sinks.append(pg_sink)
            pg_sink.create_tables()
        scenario.sinks = sinks

        result = scenario.generate()
        print("\nGeneration Summary:")
        print(f"   Total Payments Created: {result.total_payments}")
        print(f"   Total Amount: {symbol}{format_amount(result.total_amount)}")
        print(f"   Months Covered: {result.months_covered}")
    except InvalidLeaseError as exc:
        for error in exc.errors:
            print(f"error: {error}", file=sys.stderr)
        return 1
    except SinkError:
        logger.exception("Failed to export payments")
        return 1
    finally:
        for sink in sinks:
            sink.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
