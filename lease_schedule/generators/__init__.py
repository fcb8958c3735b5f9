"""Payment schedule and synthetic lease generators."""

from lease_schedule.generators.lease import LeaseGenerator
from lease_schedule.generators.schedule import (
    LeaseScheduleGenerator,
    calculate_lease_total,
    generate_lease_payments,
    generate_payment_schedule_preview,
    validate_lease_for_payment_generation,
)

__all__ = [
    "LeaseGenerator",
    "LeaseScheduleGenerator",
    "calculate_lease_total",
    "generate_lease_payments",
    "generate_payment_schedule_preview",
    "validate_lease_for_payment_generation",
]
