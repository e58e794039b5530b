from __future__ import annotations

import logging

from hotelbook.application.exceptions import DataAccessError, InvalidDraftError, SubmissionError
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.utils.records import contact_message_to_record
from hotelbook.domain.entities.contact_message import ContactMessage


class SendContactMessageUseCase:
    def __init__(self, store: DataStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    async def execute(self, name: str, email: str, subject: str, message: str) -> ContactMessage:
        contact = ContactMessage(
            name=(name or "").strip(),
            email=(email or "").strip(),
            subject=(subject or "").strip(),
            message=(message or "").strip(),
        )
        missing = [key for key, value in vars(contact).items() if not value]
        if missing:
            raise InvalidDraftError(f"Missing required field(s): {', '.join(missing)}")

        try:
            await self._store.insert("contact_messages", contact_message_to_record(contact))
        except DataAccessError as e:
            self._logger.error("Error sending message", extra={"error": str(e)})
            raise SubmissionError("Failed to send message. Please try again later.") from e

        self._logger.info("Contact message stored", extra={"table": "contact_messages"})
        return contact
