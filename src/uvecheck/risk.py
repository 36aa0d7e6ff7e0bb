"""
Risk result domain model.

Defines the fixed risk-level vocabulary and the RiskResult record returned by
every guideline evaluation.
"""

from dataclasses import dataclass
from enum import Enum


class RiskLevel(str, Enum):
    """
    Risk levels a guideline can assign, ordered from highest to lowest.
    ERROR is reserved for answers that could not be evaluated.
    """
    HIGH = "High Risk"
    MEDIUM = "Medium Risk"
    LOW_TO_MEDIUM = "Low to Medium Risk"
    LOW = "Low Risk"
    VERY_LOW = "Very Low Risk"
    NONE = "No Risk"
    ERROR = "Error"

    def one_step_lower(self) -> "RiskLevel":
        """High drops to Medium and Medium to Low; every other level is kept."""
        return _ONE_STEP_LOWER.get(self, self)


_ONE_STEP_LOWER = {
    RiskLevel.HIGH: RiskLevel.MEDIUM,
    RiskLevel.MEDIUM: RiskLevel.LOW,
}

# Recommendations that are not screening intervals
NO_RECOMMENDATION = "None"
NO_SCREENING_REQUIRED = "No screening required"
SCREEN_AT_DIAGNOSIS = "Screen at Diagnosis"
SENTINEL_RECOMMENDATIONS = frozenset(
    {NO_RECOMMENDATION, NO_SCREENING_REQUIRED, SCREEN_AT_DIAGNOSIS}
)


@dataclass(frozen=True)
class RiskResult:
    """
    Outcome of one guideline evaluation.

    Attributes:
        risk_level: One of the RiskLevel vocabulary.
        recommendation: Screening interval, or a sentinel such as "No screening required".
        followup: How long screening should continue.
        justification: Human-readable reason for the risk level.
    """

    risk_level: RiskLevel
    recommendation: str
    followup: str
    justification: str

    @property
    def is_error(self) -> bool:
        return self.risk_level == RiskLevel.ERROR

    def to_dict(self) -> dict[str, str]:
        return {
            "riskLevel": self.risk_level.value,
            "recommendation": self.recommendation,
            "followup": self.followup,
            "justification": self.justification,
        }


INVALID_DATE_RESULT = RiskResult(
    risk_level=RiskLevel.ERROR,
    recommendation="Invalid date format",
    followup="",
    justification="",
)
