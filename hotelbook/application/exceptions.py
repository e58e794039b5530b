class HotelBookError(RuntimeError):
    """Base class for errors that are shown to the user as a message."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class DataAccessError(HotelBookError):
    """Raised by data store / auth adapters on network or backend failures."""
    default_message = "Data backend request failed"


class NotFound(HotelBookError):
    default_message = "Not found"


class TransientFetchError(HotelBookError):
    default_message = "Failed to load data"


class SubmissionError(HotelBookError):
    default_message = "Failed to create booking. Please try again."


class Unauthenticated(HotelBookError):
    default_message = "Please sign in to continue"


class NoRoomSelected(HotelBookError):
    default_message = "No room selected"


class InvalidStayError(HotelBookError):
    default_message = "Check-out date must be after check-in date"


class InvalidGuestCountError(HotelBookError):
    default_message = "Guest count is outside the room's capacity"


class InvalidDraftError(HotelBookError):
    default_message = "Invalid booking details"


class StepError(HotelBookError):
    default_message = "Action not allowed at this step"


class SubmissionInProgress(HotelBookError):
    default_message = "A booking submission is already in progress"


class FlowCompleted(HotelBookError):
    default_message = "This booking has already been submitted"


class StaleFlowError(HotelBookError):
    """Raised when a result arrives for a flow that was discarded or reloaded."""
    default_message = "Booking session is no longer active"
