"""Generate the missing payment records for a single lease."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Sequence

from lease_schedule.config import ScheduleConfig
from lease_schedule.exceptions import InvalidLeaseError
from lease_schedule.generators.dates import month_label
from lease_schedule.generators.schedule import LeaseScheduleGenerator
from lease_schedule.models import (
    GenerationSummary,
    LeaseDetails,
    PaymentPreview,
    PaymentType,
    SchedulePreview,
    ValidationResult,
)
from lease_schedule.store import PaymentStore

logger = logging.getLogger(__name__)


class LeasePaymentScenario:
    """Preview, generate and store the payment schedule of one lease.

    This scenario:
    - validates the lease and refuses to continue when it is invalid
    - previews the schedule with per-month rows and totals
    - stores the obligations not already present in the store
    - forwards the stored records to every configured sink
    """

    def __init__(
        self,
        lease: LeaseDetails,
        created_by: str | None = None,
        store: PaymentStore | None = None,
        sinks: Sequence[Any] = (),
        config: ScheduleConfig | None = None,
    ) -> None:
        """Initialize lease payment scenario.

        Parameters
        ----------
        lease : LeaseDetails
            Lease to schedule payments for.
        created_by : str | None
            User ID recorded on stored payments (usually the owner).
        store : PaymentStore | None
            Store receiving the payments. A fresh store is used if omitted.
        sinks : Sequence[Any]
            Sinks with a ``write_batch(entity_type, records)`` method.
        config : ScheduleConfig | None
            Presentation and persistence options.
        """
        self.lease = lease
        self.created_by = created_by
        self.store = store if store is not None else PaymentStore()
        self.sinks = list(sinks)
        self.config = config or ScheduleConfig()
        self.generator = LeaseScheduleGenerator(currency_symbol=self.config.currency_symbol)

    def validate(self) -> ValidationResult:
        """Validate the lease."""
        return self.generator.validate(self.lease)

    def preview(self) -> SchedulePreview:
        """Preview the schedule without storing anything.

        Raises
        ------
        InvalidLeaseError
            If the lease fails validation.
        """
        self._ensure_valid()
        payments = [
            PaymentPreview(
                month=month_label(payment.due_date),
                payment_type=payment.payment_type,
                amount=payment.amount,
                due_date=payment.due_date,
            )
            for payment in self.generator.generate(self.lease)
        ]
        return SchedulePreview(payments=payments, summary=self.generator.summarize(payments))

    def preview_lines(self, preview: SchedulePreview | None = None) -> list[str]:
        """Preview the schedule as display lines.

        Parameters
        ----------
        preview : SchedulePreview | None
            Preview from :meth:`preview` to render. Computed when omitted.

        Raises
        ------
        InvalidLeaseError
            If the lease fails validation.
        """
        if preview is None:
            preview = self.preview()
        return [self.generator.format_payment(row) for row in preview.payments]

    def generate(self, skip_existing: bool | None = None) -> GenerationSummary:
        """Generate and store the lease payments.

        Parameters
        ----------
        skip_existing : bool | None
            Leave out obligations already in the store. Defaults to
            ``config.skip_existing``.

        Returns
        -------
        GenerationSummary
            IDs and totals of the payments created.

        Raises
        ------
        InvalidLeaseError
            If the lease fails validation.
        """
        self._ensure_valid()
        if skip_existing is None:
            skip_existing = self.config.skip_existing

        payments = self.generator.generate(self.lease)
        if skip_existing:
            pending = [p for p in payments if not self.store.exists(p)]
        else:
            pending = payments

        payment_ids = self.store.save_batch(pending, created_by=self.created_by)
        records = [self.store.get(payment_id) for payment_id in payment_ids]

        for sink in self.sinks:
            sink.write_batch("payments", records)

        summary = GenerationSummary(
            payment_ids=payment_ids,
            total_payments=len(payment_ids),
            total_amount=sum((p.amount for p in pending), Decimal("0")),
            months_covered=sum(1 for p in pending if p.payment_type == PaymentType.RENT),
            skipped=len(payments) - len(pending),
        )

        logger.info(
            "Generated %d payments for tenant %s (%d months, total %s, %d already stored)",
            summary.total_payments,
            self.lease.tenant_id,
            summary.months_covered,
            summary.total_amount,
            summary.skipped,
            extra={
                "tenant_id": self.lease.tenant_id,
                "property_id": self.lease.property_id,
                "payments": summary.total_payments,
                "skipped": summary.skipped,
            },
        )
        return summary

    def _ensure_valid(self) -> None:
        result = self.validate()
        if not result.valid:
            logger.warning("Lease for tenant %s is invalid: %s", self.lease.tenant_id, result.errors)
            raise InvalidLeaseError(result.errors)
