"""Risk scoring for sign-up email addresses.

Stages run in a fixed order:

1. Format check (terminal on failure)
2. Curated disposable-domain list (terminal on hit, skips the network)
3. Remote disposable-domain list (terminal on hit, skipped if unavailable)
4. Entropy of the local part
5. Digit density of the local part
6. Vowel density of the local part

Stages 4-6 always all run and their points add up; only the total is
clamped to 100 before it is mapped to an action.
"""

from spamguard.config import HeuristicsConfig, get_config
from spamguard.core.logging import get_logger

from .base import BaseBlocklistResolver
from .blocklist import is_priority_disposable
from .metrics import digit_ratio, entropy, round_half_up, vowel_ratio
from .models import EmailAddress, LexicalMetrics, RecommendedAction, Verdict

logger = get_logger(__name__)

MAX_RISK_SCORE = 100

FLAG_INVALID_FORMAT = "Invalid email format"
FLAG_PRIORITY_DISPOSABLE = "Known disposable domain (hardcoded blocklist)"
FLAG_REMOTE_DISPOSABLE = "Disposable domain (remote blocklist)"
FLAG_HIGH_ENTROPY = "High entropy detected (likely random string)"
FLAG_MODERATE_ENTROPY = "Moderate entropy (somewhat random pattern)"
FLAG_NO_SUSPICIOUS_PATTERNS = "No suspicious patterns detected"


class RiskScorer:
    """Scores an email address and recommends allow, flag or block."""

    def __init__(
        self,
        resolver: BaseBlocklistResolver,
        config: HeuristicsConfig | None = None,
    ) -> None:
        """
        Initialize scorer.

        Args:
            resolver: Source of the expanded disposable-domain list
            config: Heuristic thresholds, defaults to config.yml values
        """
        self.resolver = resolver
        self.config = config or get_config().heuristics

    async def score(self, email: str) -> Verdict:
        """Score a single email address."""
        address = EmailAddress.parse(email)
        if address is None:
            return Verdict(
                email=email,
                is_valid_format=False,
                risk_score=MAX_RISK_SCORE,
                recommended_action=RecommendedAction.BLOCK,
                flags=[FLAG_INVALID_FORMAT],
            )

        if is_priority_disposable(address.domain):
            return self._disposable_verdict(email, FLAG_PRIORITY_DISPOSABLE)

        remote_domains = await self.resolver.fetch()
        if remote_domains is not None and address.domain in remote_domains:
            return self._disposable_verdict(email, FLAG_REMOTE_DISPOSABLE)

        return self._score_local_part(email, address.local_part)

    def _score_local_part(self, email: str, local_part: str) -> Verdict:
        """Apply the lexical heuristics to the local part."""
        cfg = self.config
        risk_score = 0
        flags: list[str] = []

        metrics = LexicalMetrics(
            entropy=entropy(local_part),
            digit_ratio=digit_ratio(local_part),
            vowel_ratio=vowel_ratio(local_part),
        )

        # Short strings are naturally high-entropy, so only score longer ones
        if len(local_part) >= cfg.entropy_min_length:
            if metrics.entropy > cfg.high_entropy_threshold:
                risk_score += cfg.high_entropy_points
                flags.append(FLAG_HIGH_ENTROPY)
            elif metrics.entropy > cfg.moderate_entropy_threshold:
                risk_score += cfg.moderate_entropy_points
                flags.append(FLAG_MODERATE_ENTROPY)

        if metrics.digit_ratio > cfg.digit_ratio_threshold:
            risk_score += cfg.digit_ratio_points
            flags.append(f"High digit density ({_percent(metrics.digit_ratio)}%)")

        if (
            len(local_part) >= cfg.vowel_min_length
            and metrics.vowel_ratio < cfg.vowel_ratio_threshold
        ):
            risk_score += cfg.vowel_ratio_points
            flags.append(
                f"Low vowel ratio ({_percent(metrics.vowel_ratio)}% - possible keyboard smash)"
            )

        risk_score = min(risk_score, MAX_RISK_SCORE)

        if not flags:
            flags.append(FLAG_NO_SUSPICIOUS_PATTERNS)

        return Verdict(
            email=email,
            risk_score=risk_score,
            recommended_action=self.action_for(risk_score),
            metrics=metrics,
            flags=flags,
        )

    def action_for(self, risk_score: int) -> RecommendedAction:
        """Map a clamped risk score to a recommended action."""
        if risk_score >= self.config.block_threshold:
            return RecommendedAction.BLOCK
        if risk_score >= self.config.flag_threshold:
            return RecommendedAction.FLAG
        return RecommendedAction.ALLOW

    def _disposable_verdict(self, email: str, flag: str) -> Verdict:
        """Terminal verdict for a domain found on a blocklist."""
        logger.bind(source=flag).debug("disposable_domain_blocked")
        return Verdict(
            email=email,
            is_disposable=True,
            risk_score=MAX_RISK_SCORE,
            recommended_action=RecommendedAction.BLOCK,
            flags=[flag],
        )


def _percent(ratio: float) -> int:
    """Ratio as a whole percentage for flag text."""
    return int(round_half_up(ratio * 100))
