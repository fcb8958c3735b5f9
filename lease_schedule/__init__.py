"""Recurring lease payment schedule generation."""

from lease_schedule.generators.schedule import (
    LeaseScheduleGenerator,
    calculate_lease_total,
    generate_lease_payments,
    generate_payment_schedule_preview,
    validate_lease_for_payment_generation,
)
from lease_schedule.models import GeneratedPayment, LeaseDetails, LeaseTotals, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "GeneratedPayment",
    "LeaseDetails",
    "LeaseScheduleGenerator",
    "LeaseTotals",
    "ValidationResult",
    "__version__",
    "calculate_lease_total",
    "generate_lease_payments",
    "generate_payment_schedule_preview",
    "validate_lease_for_payment_generation",
]
