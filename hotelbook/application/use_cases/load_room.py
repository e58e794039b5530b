from __future__ import annotations

import logging
from dataclasses import dataclass

from hotelbook.application.exceptions import DataAccessError, NotFound, TransientFetchError
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.utils.records import room_from_record, room_type_from_record
from hotelbook.domain.entities.room import Room, RoomType

ROOM_NOT_FOUND = "Room not found"
LOAD_FAILED = "Failed to load room details"


@dataclass(frozen=True)
class RoomDetails:
    room: Room
    room_type: RoomType


class LoadRoomUseCase:
    def __init__(self, store: DataStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    async def execute(self, room_id: str) -> RoomDetails:
        """
        Fetch a room, then its room type.

        The room type lookup depends on the room row, so the two requests are
        sequential and a missing room never triggers the second fetch.
        """
        room_row = await self._fetch("rooms", room_id)
        if room_row is None:
            self._logger.info("Room not found", extra={"room_id": room_id})
            raise NotFound(ROOM_NOT_FOUND)
        room = room_from_record(room_row)

        if not room.room_type_id:
            self._logger.warning("Room has no room type", extra={"room_id": room_id})
            raise NotFound(ROOM_NOT_FOUND)

        room_type_row = await self._fetch("room_types", room.room_type_id)
        if room_type_row is None:
            self._logger.info("Room type not found", extra={"room_id": room_id})
            raise NotFound(ROOM_NOT_FOUND)

        return RoomDetails(room=room, room_type=room_type_from_record(room_type_row))

    async def _fetch(self, table: str, record_id: str):
        try:
            return await self._store.fetch_one(table, {"id": record_id})
        except DataAccessError as e:
            self._logger.error("Error fetching room details", extra={"table": table, "error": str(e)})
            raise TransientFetchError(LOAD_FAILED) from e
