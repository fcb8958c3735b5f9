"""Recurring payment schedule generation for leases."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Iterator

from lease_schedule.generators.dates import (
    add_months,
    display_date,
    format_amount,
    month_label,
    to_date,
    with_day,
)
from lease_schedule.models import (
    GeneratedPayment,
    LeaseDetails,
    LeaseTotals,
    PaymentPreview,
    PaymentStatus,
    PaymentType,
    ValidationResult,
)
from lease_schedule.models.lease import to_amount


class LeaseScheduleGenerator:
    """Expand a lease into its monthly rent and utility obligations.

    The generator is stateless: every method reads only its ``lease``
    argument, so one instance can be shared freely across threads.

    Parameters
    ----------
    currency_symbol : str
        Symbol prefixed to amounts in schedule previews.
    """

    # Utilities fall due this many days after rent, capped at the 28th
    UTILITY_OFFSET_DAYS = 15
    UTILITY_DAY_CAP = 28

    def __init__(self, currency_symbol: str = "₱") -> None:
        self.currency_symbol = currency_symbol

    def generate(self, lease: LeaseDetails) -> list[GeneratedPayment]:
        """Generate all payment obligations for the lease period.

        Payments are ordered by month, rent before utility within a month.
        The lease is expected to have passed :meth:`validate`.

        Parameters
        ----------
        lease : LeaseDetails
            Lease terms.

        Returns
        -------
        list[GeneratedPayment]
            Pending payments covering ``[lease_start, lease_end]``.
        """
        return list(self.iter_payments(lease))

    def iter_payments(self, lease: LeaseDetails) -> Iterator[GeneratedPayment]:
        """Lazily yield the payments :meth:`generate` returns."""
        due_day = lease.resolved_due_day
        start = to_date(lease.lease_start)  # type: ignore[arg-type]
        end = to_date(lease.lease_end)  # type: ignore[arg-type]

        anchor = with_day(start, due_day)
        if anchor < start:
            anchor = add_months(anchor, 1, day=due_day)

        with_utilities = bool(lease.include_utilities and lease.utility_amount)
        utility_day = min(due_day + self.UTILITY_OFFSET_DAYS, self.UTILITY_DAY_CAP)

        offset = 0
        due_date = anchor
        while due_date <= end:
            period = month_label(due_date)

            yield GeneratedPayment(
                tenant_id=lease.tenant_id,  # type: ignore[arg-type]
                property_id=lease.property_id,  # type: ignore[arg-type]
                payment_type=PaymentType.RENT,
                amount=lease.monthly_rent,  # type: ignore[arg-type]
                due_date=due_date,
                payment_status=PaymentStatus.PENDING,
                notes=f"Auto-generated rent payment for {period}",
            )

            if with_utilities:
                # May precede the rent date when due_day + 15 > 28
                utility_due = with_day(due_date, utility_day)
                if utility_due <= end:
                    yield GeneratedPayment(
                        tenant_id=lease.tenant_id,  # type: ignore[arg-type]
                        property_id=lease.property_id,  # type: ignore[arg-type]
                        payment_type=PaymentType.UTILITY,
                        amount=lease.utility_amount,  # type: ignore[arg-type]
                        due_date=utility_due,
                        payment_status=PaymentStatus.PENDING,
                        notes=f"Auto-generated utility payment for {period}",
                    )

            # Offsets are taken from the anchor so a clamped month never shifts the next one
            offset += 1
            due_date = add_months(anchor, offset, day=due_day)

    def calculate_totals(self, lease: LeaseDetails) -> LeaseTotals:
        """Summarize the generated schedule.

        Every figure is a reduction over :meth:`generate`, so totals cannot
        disagree with the schedule itself.
        """
        return self.summarize(self.generate(lease))

    @staticmethod
    def summarize(payments: list[GeneratedPayment] | list[PaymentPreview]) -> LeaseTotals:
        """Total an already generated schedule."""
        rent = [p for p in payments if p.payment_type == PaymentType.RENT]
        utilities = [p for p in payments if p.payment_type == PaymentType.UTILITY]

        return LeaseTotals(
            total_months=len(rent),
            total_rent=sum((p.amount for p in rent), Decimal("0")),
            total_utilities=sum((p.amount for p in utilities), Decimal("0")),
            grand_total=sum((p.amount for p in payments), Decimal("0")),
            payments_count=len(payments),
        )

    def preview_schedule(self, lease: LeaseDetails) -> list[str]:
        """Render one display line per generated payment.

        Lines look like ``"Aug 5, 2025 - RENT: ₱5,000"``.
        """
        return [self.format_payment(payment) for payment in self.generate(lease)]

    def format_payment(self, payment: GeneratedPayment | PaymentPreview) -> str:
        """Render a single payment as a preview line."""
        return (
            f"{display_date(payment.due_date)} - {payment.payment_type.value.upper()}: "
            f"{self.currency_symbol}{format_amount(payment.amount)}"
        )

    def validate(self, lease: LeaseDetails) -> ValidationResult:
        """Check a lease before generating payments.

        All failing rules are reported, in a fixed order. Malformed values
        (including unparsable date strings) are reported as errors and never
        raised.
        """
        errors: list[str] = []

        if not lease.tenant_id:
            errors.append("Tenant ID is required")
        if not lease.property_id:
            errors.append("Property ID is required")
        if not _is_positive(lease.monthly_rent):
            errors.append("Monthly rent must be greater than 0")

        start = _parse_date(lease.lease_start, "Lease start date", errors)
        end = _parse_date(lease.lease_end, "Lease end date", errors)

        if start is not None and end is not None and end <= start:
            errors.append("Lease end date must be after start date")

        due_day = lease.payment_due_day
        if due_day is not None and not (
            isinstance(due_day, int) and not isinstance(due_day, bool) and 1 <= due_day <= 31
        ):
            errors.append("Payment due day must be between 1 and 31")

        if lease.include_utilities and not _is_positive(lease.utility_amount):
            errors.append("Utility amount is required when utilities are included")

        return ValidationResult(valid=not errors, errors=errors)


def _is_positive(value: Any) -> bool:
    """Check that an amount is a finite number greater than zero."""
    amount = to_amount(value)
    return isinstance(amount, Decimal) and amount.is_finite() and amount > 0


def _parse_date(value: Any, label: str, errors: list[str]) -> date | None:
    """Parse a lease date, recording an error instead of raising."""
    if value is None or value == "":
        errors.append(f"{label} is required")
        return None
    try:
        return to_date(value)
    except (TypeError, ValueError):
        errors.append(f"{label} is not a valid date")
        return None


_default_generator = LeaseScheduleGenerator()


def generate_lease_payments(lease: LeaseDetails) -> list[GeneratedPayment]:
    """Generate monthly payment records for the entire lease period."""
    return _default_generator.generate(lease)


def calculate_lease_total(lease: LeaseDetails) -> LeaseTotals:
    """Calculate totals for the lease period."""
    return _default_generator.calculate_totals(lease)


def generate_payment_schedule_preview(lease: LeaseDetails) -> list[str]:
    """Generate a payment schedule preview for display."""
    return _default_generator.preview_schedule(lease)


def validate_lease_for_payment_generation(lease: LeaseDetails) -> ValidationResult:
    """Validate lease details before generating payments."""
    return _default_generator.validate(lease)
