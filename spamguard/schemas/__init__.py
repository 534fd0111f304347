from spamguard.schemas.check import CheckDetails, CheckRequest, CheckResponse, ErrorResponse

__all__ = [
    "CheckDetails",
    "CheckRequest",
    "CheckResponse",
    "ErrorResponse",
]
