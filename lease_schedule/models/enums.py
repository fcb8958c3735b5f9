"""Enumeration types for lease payment entities."""

from enum import Enum


class PaymentType(str, Enum):
    RENT = "rent"
    UTILITY = "utility"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"
