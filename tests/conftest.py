"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from lease_schedule.generators import LeaseScheduleGenerator
from lease_schedule.models import LeaseDetails


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_tenant_id() -> str:
    """Sample tenant ID."""
    return "tenant-test-001"


@pytest.fixture
def sample_property_id() -> str:
    """Sample property ID."""
    return "prop-test-001"


@pytest.fixture
def generator() -> LeaseScheduleGenerator:
    """Schedule generator with the default currency."""
    return LeaseScheduleGenerator()


@pytest.fixture
def quarter_lease(sample_tenant_id: str, sample_property_id: str) -> LeaseDetails:
    """Three-month lease, rent due on the 5th, no utilities."""
    return LeaseDetails(
        tenant_id=sample_tenant_id,
        property_id=sample_property_id,
        monthly_rent=Decimal("5000"),
        lease_start=date(2025, 8, 1),
        lease_end=date(2025, 10, 31),
        payment_due_day=5,
        include_utilities=False,
    )


@pytest.fixture
def utility_lease(sample_tenant_id: str, sample_property_id: str) -> LeaseDetails:
    """Three-month lease, rent due on the 20th, utilities of 500."""
    return LeaseDetails(
        tenant_id=sample_tenant_id,
        property_id=sample_property_id,
        monthly_rent=Decimal("5000"),
        lease_start=date(2025, 8, 1),
        lease_end=date(2025, 10, 31),
        payment_due_day=20,
        include_utilities=True,
        utility_amount=Decimal("500"),
    )
