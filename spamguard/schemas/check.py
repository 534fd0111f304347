from pydantic import BaseModel


class CheckRequest(BaseModel):
    """Request body for POST /api/check."""

    email: str | None = None


class CheckDetails(BaseModel):
    """Lexical metrics and the reasons behind the score."""

    entropy: float
    digit_ratio: float
    vowel_ratio: float
    flags: list[str]


class CheckResponse(BaseModel):
    """Response for /api/check."""

    email: str
    is_valid_format: bool
    is_disposable: bool
    risk_score: int
    recommended_action: str
    details: CheckDetails


class ErrorResponse(BaseModel):
    """Error body for rejected or failed checks."""

    error: str
    usage: str | None = None
    email: str | None = None
    message: str | None = None
