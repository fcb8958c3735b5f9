"""Synthetic lease generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from lease_schedule.generators.base import BaseGenerator
from lease_schedule.generators.dates import add_months
from lease_schedule.models import LeaseDetails


class LeaseGenerator(BaseGenerator):
    """Generate synthetic leases for schedule generation and load testing."""

    TERM_MONTHS = [6, 12, 18, 24]
    TERM_WEIGHTS = [0.15, 0.55, 0.10, 0.20]

    # Monthly rent range in hundreds (3,000 - 80,000)
    RENT_RANGE = (30, 800)
    UTILITY_RANGE = (5, 50)

    def __init__(
        self,
        seed: int | None = None,
        utility_rate: float = 0.3,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> None:
        """Initialize lease generator.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility.
        utility_rate : float
            Share of leases that bill utilities (0.0 to 1.0).
        start_date : date | None
            Earliest lease start (default 2025-01-01).
        end_date : date | None
            Latest lease start (default 2025-12-31).
        """
        super().__init__(seed)
        self.utility_rate = utility_rate
        self.start_date = start_date or date(2025, 1, 1)
        self.end_date = end_date or date(2025, 12, 31)

    def generate(
        self,
        tenant_id: str | None = None,
        property_id: str | None = None,
        lease_start: date | None = None,
    ) -> LeaseDetails:
        """Generate a single valid lease.

        Parameters
        ----------
        tenant_id : str | None
            Tenant ID; a UUID is generated when omitted.
        property_id : str | None
            Property ID; a UUID is generated when omitted.
        lease_start : date | None
            Lease start; drawn from the configured window when omitted.

        Returns
        -------
        LeaseDetails
            Generated lease.
        """
        if lease_start is None:
            lease_start = self.fake.date_between_dates(self.start_date, self.end_date)

        term = random.choices(self.TERM_MONTHS, weights=self.TERM_WEIGHTS, k=1)[0]
        lease_end = add_months(lease_start, term) - timedelta(days=1)

        include_utilities = random.random() < self.utility_rate
        utility_amount = (
            Decimal(random.randint(*self.UTILITY_RANGE) * 100) if include_utilities else None
        )

        return LeaseDetails(
            tenant_id=tenant_id or self.fake.uuid4(),
            property_id=property_id or self.fake.uuid4(),
            monthly_rent=Decimal(random.randint(*self.RENT_RANGE) * 100),
            lease_start=lease_start,
            lease_end=lease_end,
            payment_due_day=random.randint(1, 28),
            include_utilities=include_utilities,
            utility_amount=utility_amount,
        )

    def generate_batch(self, count: int) -> Iterator[LeaseDetails]:
        """Generate multiple leases.

        Parameters
        ----------
        count : int
            Number of leases to generate.

        Yields
        ------
        LeaseDetails
            Generated leases.
        """
        for _ in range(count):
            yield self.generate()
