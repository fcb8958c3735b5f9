"""Scenarios for generating and storing lease payment schedules."""

from lease_schedule.scenarios.lease_payments import LeasePaymentScenario
from lease_schedule.scenarios.lease_portfolio import LeasePortfolioScenario

__all__ = [
    "LeasePaymentScenario",
    "LeasePortfolioScenario",
]
