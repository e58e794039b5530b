from __future__ import annotations

from abc import ABC, abstractmethod

from hotelbook.application.use_cases.booking_flow import BookingFlowController


class FlowRegistryPort(ABC):
    @abstractmethod
    def add(self, flow: BookingFlowController) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, flow_id: str) -> BookingFlowController | None:
        raise NotImplementedError

    @abstractmethod
    def remove(self, flow_id: str) -> BookingFlowController | None:
        """Forget a flow and return it, or None if it was unknown."""
        raise NotImplementedError
