"""Lease portfolio scenario for generating payment schedules in bulk."""

from __future__ import annotations

import logging
import random

from lease_schedule.config import PortfolioConfig
from lease_schedule.generators import LeaseGenerator, LeaseScheduleGenerator
from lease_schedule.models import LeaseDetails
from lease_schedule.store import PaymentStore

logger = logging.getLogger(__name__)


class LeasePortfolioScenario:
    """Generate a synthetic lease portfolio with complete payment schedules.

    This scenario creates:
    - Leases with varied rents, terms and due days
    - Utility billing for a share of the leases
    - Pending rent and utility payments for every valid lease
    """

    def __init__(
        self,
        num_leases: int = 100,
        utility_rate: float = 0.3,
        seed: int | None = None,
        *,
        config: PortfolioConfig | None = None,
    ) -> None:
        """Initialize lease portfolio scenario.

        Parameters
        ----------
        num_leases : int
            Number of leases to generate.
        utility_rate : float
            Share of leases that bill utilities (0.0 to 1.0).
        seed : int | None
            Random seed for reproducibility.
        config : PortfolioConfig | None
            Optional portfolio configuration. If provided, overrides
            num_leases and utility_rate.
        """
        if config is not None:
            self.num_leases = config.num_leases
            self.utility_rate = config.utility_rate
        else:
            self.num_leases = num_leases
            self.utility_rate = utility_rate
        self.config = config
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self.store = PaymentStore()
        self.leases: list[LeaseDetails] = []
        self.skipped_leases = 0
        self._lease_gen = LeaseGenerator(
            seed=seed,
            utility_rate=self.utility_rate,
            start_date=config.start_date if config else None,
            end_date=config.end_date if config else None,
        )
        self._schedule_gen = LeaseScheduleGenerator()

    def generate(self) -> PaymentStore:
        """Generate all leases and their payment schedules.

        Returns
        -------
        PaymentStore
            Store containing all generated payments.
        """
        logger.info(
            "Starting lease portfolio scenario: %d leases, %.0f%% with utilities",
            self.num_leases,
            self.utility_rate * 100,
        )

        for lease in self._lease_gen.generate_batch(self.num_leases):
            self.add_lease(lease)

        logger.info(
            "Generated %d payments for %d leases (%d skipped)",
            len(self.store),
            len(self.leases),
            self.skipped_leases,
        )
        return self.store

    def add_lease(self, lease: LeaseDetails) -> list[str]:
        """Validate a lease and store its schedule.

        Returns
        -------
        list[str]
            IDs of the stored payments; empty when the lease is invalid.
        """
        result = self._schedule_gen.validate(lease)
        if not result.valid:
            logger.warning("Skipping lease for tenant %s: %s", lease.tenant_id, result.errors)
            self.skipped_leases += 1
            return []

        self.leases.append(lease)
        return self.store.save_batch(self._schedule_gen.generate(lease))
