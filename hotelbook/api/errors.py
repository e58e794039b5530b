from fastapi import HTTPException

from hotelbook.application.exceptions import (
    DataAccessError,
    FlowCompleted,
    HotelBookError,
    InvalidDraftError,
    InvalidGuestCountError,
    InvalidStayError,
    NoRoomSelected,
    NotFound,
    StaleFlowError,
    StepError,
    SubmissionError,
    SubmissionInProgress,
    TransientFetchError,
    Unauthenticated,
)

STATUS_BY_ERROR: list[tuple[type[HotelBookError], int]] = [
    (NotFound, 404),
    (Unauthenticated, 401),
    (NoRoomSelected, 422),
    (InvalidStayError, 422),
    (InvalidGuestCountError, 422),
    (InvalidDraftError, 422),
    (StepError, 409),
    (SubmissionInProgress, 409),
    (FlowCompleted, 409),
    (StaleFlowError, 410),
    (TransientFetchError, 502),
    (SubmissionError, 502),
    (DataAccessError, 502),
]


def to_http_exception(error: HotelBookError) -> HTTPException:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=500, detail=error.message)
