"""Domain models for lease payment schedules."""

from lease_schedule.models.enums import PaymentStatus, PaymentType
from lease_schedule.models.lease import (
    DEFAULT_PAYMENT_DUE_DAY,
    LeaseDetails,
    LeaseTotals,
    ValidationResult,
)
from lease_schedule.models.payment import (
    GeneratedPayment,
    GenerationSummary,
    PaymentPreview,
    PaymentRecord,
    SchedulePreview,
)

__all__ = [
    "DEFAULT_PAYMENT_DUE_DAY",
    "GeneratedPayment",
    "GenerationSummary",
    "LeaseDetails",
    "LeaseTotals",
    "PaymentPreview",
    "PaymentRecord",
    "PaymentStatus",
    "PaymentType",
    "SchedulePreview",
    "ValidationResult",
]
