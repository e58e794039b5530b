from __future__ import annotations

from hotelbook.application.ports.flow_registry import FlowRegistryPort
from hotelbook.application.use_cases.booking_flow import BookingFlowController


class MemoryFlowRegistry(FlowRegistryPort):
    def __init__(self, max_flows: int = 1000) -> None:
        self._flows: dict[str, BookingFlowController] = {}
        self._max_flows = max_flows

    def add(self, flow: BookingFlowController) -> None:
        # Oldest flows are discarded first once the cap is reached.
        while len(self._flows) >= self._max_flows:
            oldest_id = next(iter(self._flows))
            self._flows.pop(oldest_id).discard()
        self._flows[flow.flow_id] = flow

    def get(self, flow_id: str) -> BookingFlowController | None:
        return self._flows.get(flow_id)

    def remove(self, flow_id: str) -> BookingFlowController | None:
        return self._flows.pop(flow_id, None)
