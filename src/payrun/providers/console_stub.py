"""Console delivery provider for local runs and testing.

Replace with a real mail house, paymaster or bank adapter for production.
"""

from __future__ import annotations

import datetime
import logging
import sys
from typing import TextIO

from payrun.providers.base import DeliveryResult, PaymentNotice

logger = logging.getLogger(__name__)


class ConsoleDeliveryProvider:
    """Stub provider that writes notices to a text stream.

    In production, this would:
    - Queue cheques for the mail house
    - Notify the paymaster office
    - Submit credit transfers to the bank
    """

    provider_name = "console_stub"

    def __init__(self, stream: TextIO | None = None):
        """Initialize stub provider.

        Args:
            stream: Where notices are written. Defaults to stdout at
                delivery time.
        """
        self.stream = stream
        # In-memory tracking for stub
        self._delivered: list[PaymentNotice] = []

    @property
    def delivered(self) -> list[PaymentNotice]:
        return list(self._delivered)

    def deliver(self, notice: PaymentNotice) -> DeliveryResult:
        """Write the notice lines (stub implementation)."""
        stream = self.stream or sys.stdout
        for line in notice.lines:
            print(line, file=stream)

        self._delivered.append(notice)
        provider_request_id = (
            f"CONSOLE-{notice.employee_id}-{len(self._delivered):04d}"
        )
        logger.debug(
            "Delivered %s notice for employee %s as %s",
            notice.disposition,
            notice.employee_id,
            provider_request_id,
        )

        return DeliveryResult(
            provider_request_id=provider_request_id,
            accepted=True,
            message="Console stub delivered",
            delivered_at=datetime.datetime.now(datetime.timezone.utc),
        )
