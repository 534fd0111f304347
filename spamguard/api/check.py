import re
from urllib.parse import parse_qs, unquote

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from spamguard.core.logging import get_logger
from spamguard.dependencies import Scorer
from spamguard.schemas.check import CheckRequest, CheckResponse, ErrorResponse

logger = get_logger(__name__)

router = APIRouter()

# Simplified RFC 5322 shape check (allows + signs), used with fullmatch
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
USAGE = "GET /api/check?email=user@example.com"

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def extract_query_email(raw_query: str) -> str | None:
    """Read the email parameter from a raw query string, keeping literal '+'."""
    values = parse_qs(raw_query.replace("+", "%2B")).get("email")
    return values[0] if values else None


def _error(status_code: int, **content: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)


async def _check(email: str | None, scorer: Scorer) -> JSONResponse:
    """Validate the raw parameter, score it and build the HTTP response."""
    if not email:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            error="Missing required parameter: email",
            usage=USAGE,
        )

    if not EMAIL_PATTERN.fullmatch(email):
        return _error(status.HTTP_400_BAD_REQUEST, error="Invalid email format", email=email)

    normalized = email.lower().strip()

    try:
        verdict = await scorer.score(normalized)
    except Exception as e:
        logger.bind(email=normalized, error=str(e)).error("check_internal_error")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="Internal server error",
            message="Failed to validate email",
        )

    logger.bind(
        email=normalized,
        risk_score=verdict.risk_score,
        action=verdict.recommended_action.value,
    ).info("email_checked")

    return JSONResponse(content=verdict.to_response().model_dump())


@router.get("/check", response_model=CheckResponse, responses=_ERROR_RESPONSES)
async def check_email(request: Request, scorer: Scorer) -> JSONResponse:
    """
    Score an email address for disposability.

    Returns the risk score, the recommended action and the reasons behind it.
    """
    return await _check(extract_query_email(request.url.query), scorer)


@router.post("/check", response_model=CheckResponse, responses=_ERROR_RESPONSES)
async def check_email_post(
    request: Request,
    scorer: Scorer,
    body: CheckRequest | None = None,
) -> JSONResponse:
    """
    Score an email address sent in the JSON body.

    A query-string email takes precedence over the body.
    """
    email = extract_query_email(request.url.query)
    if not email and body is not None and body.email:
        email = unquote(body.email)
    return await _check(email, scorer)


@router.options("/check")
async def check_preflight() -> Response:
    """Answer bare OPTIONS requests; CORS preflights are handled by middleware."""
    return Response(status_code=status.HTTP_200_OK)
