"""Base protocol and types for pay delivery providers.

All delivery adapters must implement the DeliveryProvider protocol.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol


@dataclass(frozen=True)
class PaymentNotice:
    """A well-formed payment instruction for one employee.

    Attributes:
        employee_id: Employee being paid.
        amount: Gross amount, rounded to cents.
        disposition: Disposition tag (mailed_home, held_at_paymaster_office,
            direct_deposit).
        details: Disposition fields (address, office, bank details) as
            (name, value) pairs in display order.
        lines: Human readable notice lines.
    """

    employee_id: int
    amount: Decimal
    disposition: str
    details: tuple[tuple[str, str], ...] = ()
    lines: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class DeliveryResult:
    """Result of handing a notice to a provider."""

    provider_request_id: str
    accepted: bool
    message: str = ""
    delivered_at: datetime.datetime | None = None


class DeliveryProvider(Protocol):
    """Protocol for pay delivery adapters.

    Each channel (print shop, paymaster office, bank) has its own adapter.
    The dispatcher uses these adapters without knowing channel details.
    """

    provider_name: str

    def deliver(self, notice: PaymentNotice) -> DeliveryResult:
        """Deliver a payment notice.

        Args:
            notice: The payment to deliver.

        Returns:
            DeliveryResult with provider_request_id and acceptance status.
        """
        ...
