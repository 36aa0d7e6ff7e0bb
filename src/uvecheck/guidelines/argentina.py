"""
Argentinian uveitis screening guideline.
"""

from ..patient import PatientRecord
from ..risk import NO_SCREENING_REQUIRED, RiskLevel, RiskResult
from .base import Guideline, Timeline

_FOLLOWUP = "Until 21 years"


class ArgentinaGuideline(Guideline):
    key = "argentina"
    name = "Argentina Guidelines"
    max_age = 21
    questions = ("date_of_birth", "date_of_diagnosis", "sub_diagnosis", "ana_positive")
    sub_diagnosis_options = (
        "Persistent Oligoarthritis",
        "Extended Oligoarthritis",
        "RF Negative Polyarthritis",
        "Psoriatic Arthritis",
        "RF Positive Arthritis",
        "Enthesitis related Arthritis",
        "Systemic onset Arthritis",
    )

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        if self.exceeds_max_age(timeline):
            return RiskResult(
                risk_level=RiskLevel.VERY_LOW,
                recommendation=NO_SCREENING_REQUIRED,
                followup="None",
                justification="Very low risk due to age > 21 years.",
            )
        if record.sub_diagnosis == "Systemic onset Arthritis":
            return RiskResult(
                risk_level=RiskLevel.LOW,
                recommendation="Every 12 Months",
                followup=_FOLLOWUP,
                justification="Low risk due to diagnosis of Systemic onset Arthritis.",
            )

        since = timeline.time_since_diagnosis
        ana = record.ana_positive
        risk_level = RiskLevel.NONE
        recommendation = justification = ""

        if timeline.age_at_onset.at_most(6):
            if ana and since.at_most(4):
                risk_level, recommendation = RiskLevel.HIGH, "Every 3 Months"
                justification = "High risk due to positive ANA, onset age ≤ 6, and time since diagnosis ≤ 4 years."
            elif ana and since.at_most(7):
                risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                justification = "Medium risk due to positive ANA, onset age ≤ 6, and time since diagnosis between 4 and 7 years."
            elif ana:
                risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                justification = "Low risk due to positive ANA, onset age ≤ 6, and time since diagnosis > 7 years."
            elif since.at_most(4):
                risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                justification = "Medium risk due to negative ANA, onset age ≤ 6, and time since diagnosis ≤ 4 years."
            else:
                risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                justification = "Low risk due to negative ANA, onset age ≤ 6, and time since diagnosis > 4 years."
        elif ana and since.at_most(4):
            risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
            justification = "Medium risk due to positive ANA, onset age > 6, and time since diagnosis ≤ 4 years."
        elif since.exceeds(4):
            # the table has no row for ANA- with onset > 6 and at most 4 years since
            # diagnosis; those patients keep No Risk
            risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
            if ana:
                justification = "Low risk due to positive ANA, onset age > 6, and time since diagnosis > 4 years."
            else:
                justification = "Low risk due to negative ANA, onset age > 6, and time since diagnosis > 4 years."

        return RiskResult(risk_level, recommendation, _FOLLOWUP, justification)
