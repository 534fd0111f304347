from typing import Annotated

from fastapi import Depends

from spamguard.services.email_risk import RiskScorer, get_risk_scorer

# Type aliases for dependency injection
Scorer = Annotated[RiskScorer, Depends(get_risk_scorer)]
