"""Payment models produced from lease schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from lease_schedule.models.enums import PaymentStatus, PaymentType
from lease_schedule.models.lease import LeaseTotals


@dataclass(frozen=True)
class GeneratedPayment:
    """Scheduled payment obligation, not yet persisted."""

    tenant_id: str
    property_id: str
    payment_type: PaymentType
    amount: Decimal
    due_date: date
    payment_status: PaymentStatus = PaymentStatus.PENDING
    notes: str | None = None


@dataclass
class PaymentRecord:
    """Payment obligation after persistence assigned it an identity."""

    payment_id: str
    tenant_id: str
    property_id: str
    payment_type: PaymentType
    amount: Decimal
    due_date: date
    payment_status: PaymentStatus
    notes: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_generated(
        cls,
        payment: GeneratedPayment,
        payment_id: str,
        created_by: str | None = None,
        created_at: datetime | None = None,
    ) -> PaymentRecord:
        """Build a record from a generated payment."""
        return cls(
            payment_id=payment_id,
            tenant_id=payment.tenant_id,
            property_id=payment.property_id,
            payment_type=payment.payment_type,
            amount=payment.amount,
            due_date=payment.due_date,
            payment_status=payment.payment_status,
            notes=payment.notes,
            created_by=created_by,
            created_at=created_at,
        )


@dataclass
class PaymentPreview:
    """Structured preview row for one scheduled payment."""

    month: str  # e.g. "August 2025"
    payment_type: PaymentType
    amount: Decimal
    due_date: date


@dataclass
class SchedulePreview:
    """Preview of a full lease schedule with its totals."""

    payments: list[PaymentPreview]
    summary: LeaseTotals


@dataclass
class GenerationSummary:
    """Result of generating and storing a lease schedule."""

    payment_ids: list[str] = field(default_factory=list)
    total_payments: int = 0
    total_amount: Decimal = Decimal("0")
    months_covered: int = 0
    skipped: int = 0  # Obligations already stored
