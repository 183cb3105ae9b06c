"""Pay delivery provider adapters."""

from payrun.providers.base import DeliveryProvider, DeliveryResult, PaymentNotice
from payrun.providers.console_stub import ConsoleDeliveryProvider

__all__ = [
    "DeliveryProvider",
    "DeliveryResult",
    "PaymentNotice",
    "ConsoleDeliveryProvider",
]
