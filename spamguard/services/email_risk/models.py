"""Email risk models."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from spamguard.schemas.check import CheckDetails, CheckResponse

from .metrics import round_half_up


class RecommendedAction(str, Enum):
    """What the caller should do with the address."""

    ALLOW = "allow"
    FLAG = "flag"  # Accept but review
    BLOCK = "block"


@dataclass(frozen=True)
class EmailAddress:
    """An address split into its local part and lowercased domain."""

    local_part: str
    domain: str

    @classmethod
    def parse(cls, raw: str) -> "EmailAddress | None":
        """Split on '@'; None unless there are exactly two non-empty parts."""
        parts = raw.split("@")
        if len(parts) != 2:
            return None

        local_part, domain = parts
        if not local_part or not domain:
            return None

        return cls(local_part=local_part, domain=domain.lower())


class LexicalMetrics(BaseModel):
    """Metrics computed once from the local part."""

    model_config = ConfigDict(frozen=True)

    entropy: float = Field(default=0.0, ge=0)
    digit_ratio: float = Field(default=0.0, ge=0, le=1)
    vowel_ratio: float = Field(default=0.0, ge=0, le=1)


class Verdict(BaseModel):
    """Result of scoring one email address."""

    model_config = ConfigDict(frozen=True)

    email: str
    is_valid_format: bool = True
    is_disposable: bool = False
    risk_score: int = Field(default=0, ge=0, le=100)
    recommended_action: RecommendedAction = RecommendedAction.ALLOW
    metrics: LexicalMetrics = Field(default_factory=LexicalMetrics)
    flags: list[str] = Field(default_factory=list)

    def to_response(self) -> CheckResponse:
        """Render the public response shape, metrics rounded to 2 decimals."""
        return CheckResponse(
            email=self.email,
            is_valid_format=self.is_valid_format,
            is_disposable=self.is_disposable,
            risk_score=self.risk_score,
            recommended_action=self.recommended_action.value,
            details=CheckDetails(
                entropy=round_half_up(self.metrics.entropy, 2),
                digit_ratio=round_half_up(self.metrics.digit_ratio, 2),
                vowel_ratio=round_half_up(self.metrics.vowel_ratio, 2),
                flags=list(self.flags),
            ),
        )
