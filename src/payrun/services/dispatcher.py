"""Pay dispatcher - turns computed pay into delivery notices."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from payrun.calculators.types import (
    DirectDeposit,
    Employee,
    HeldAtPaymasterOffice,
    MailedHome,
    disposition_name,
)
from payrun.providers.base import DeliveryProvider, DeliveryResult, PaymentNotice

logger = logging.getLogger(__name__)


class PayDispatcher:
    """Builds a payment notice per disposition and hands it to a provider.

    Amounts are computed at full precision and rounded to cents only
    here, at the point they leave the engine.
    """

    OUTPUT_PRECISION = Decimal("0.01")

    def __init__(self, provider: DeliveryProvider):
        self.provider = provider

    @staticmethod
    def round_to_cents(amount: Decimal) -> Decimal:
        """Round amount to 2 decimal places (cents)."""
        return amount.quantize(PayDispatcher.OUTPUT_PRECISION, rounding=ROUND_HALF_UP)

    @classmethod
    def build_notice(cls, employee: Employee, amount: Decimal) -> PaymentNotice:
        """Build the notice for an employee's disposition."""
        pay = cls.round_to_cents(amount)
        disposition = employee.disposition
        header = f"For employeeId: {employee.employee_id}"

        if isinstance(disposition, MailedHome):
            details = {
                "address_line1": disposition.address_line1,
                "address_line2": disposition.address_line2,
                "city": disposition.city,
                "state": disposition.state,
                "zip_code": disposition.zip_code,
            }
            action = f"Mailing {pay} to " + ", ".join(details.values())
        elif isinstance(disposition, HeldAtPaymasterOffice):
            details = {"office_number": disposition.office_number}
            action = f"Holding {pay} at paymaster office {disposition.office_number}"
        elif isinstance(disposition, DirectDeposit):
            details = {
                "bank_name": disposition.bank_name,
                "account_number": disposition.account_number,
                "routing_number": disposition.routing_number,
            }
            action = (
                f"Direct depositing {pay} to {disposition.bank_name} "
                f"account {disposition.account_number} "
                f"routing {disposition.routing_number}"
            )
        else:
            raise TypeError(f"Unknown disposition: {disposition!r}")

        return PaymentNotice(
            employee_id=employee.employee_id,
            amount=pay,
            disposition=disposition_name(disposition),
            details=tuple(details.items()),
            lines=(header, action),
        )

    def send_pay(self, employee: Employee, amount: Decimal) -> DeliveryResult:
        """Send pay to the employee via their disposition."""
        notice = self.build_notice(employee, amount)
        result = self.provider.deliver(notice)
        if not result.accepted:
            logger.warning(
                "Provider %s rejected pay for employee %s: %s",
                self.provider.provider_name,
                employee.employee_id,
                result.message,
            )
        return result
