#!/usr/bin/env python3
"""Generate sample lease and payment files for validation.

This script generates a synthetic lease portfolio and writes the leases and
their payment schedules as JSON files. These files can be used for manual
validation and testing.

The seed defaults to the ``SEED`` environment variable, then to 42.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lease_schedule.config import LeaseScheduleConfig, PortfolioConfig
from lease_schedule.logging import get_logger, setup_logging
from lease_schedule.scenarios import LeasePortfolioScenario
from lease_schedule.sinks import JsonFileSink

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Generate sample data."""
    config = LeaseScheduleConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate sample lease payment data")
    parser.add_argument("--leases", type=int, default=20, help="Number of leases (default: 20)")
    parser.add_argument("--utility-rate", type=float, default=0.3, help="Share of leases with utilities")
    parser.add_argument("--start", type=date.fromisoformat, default=None, help="Earliest lease start (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, default=None, help="Latest lease start (YYYY-MM-DD)")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed (default: $SEED or 42)",
    )
    parser.add_argument("--output-dir", type=Path, default=project_root / "local", help="Output directory")
    args = parser.parse_args(argv)

    setup_logging(config.log_level, config.log_format)

    portfolio = PortfolioConfig(
        num_leases=args.leases,
        utility_rate=args.utility_rate,
        start_date=args.start,
        end_date=args.end,
    )
    scenario = LeasePortfolioScenario(seed=args.seed, config=portfolio)
    store = scenario.generate()

    sink = JsonFileSink(args.output_dir, pretty=True)
    sink.write_batch("leases", scenario.leases)
    sink.write_batch("payments", store.records)
    sink.close()

    logger.info("Sample data written to %s (seed %d)", args.output_dir, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
