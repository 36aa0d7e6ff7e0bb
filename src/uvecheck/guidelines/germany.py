"""
German uveitis screening guideline.

Screening stops altogether seven years after diagnosis.
"""

from ..patient import PatientRecord
from ..risk import NO_RECOMMENDATION, NO_SCREENING_REQUIRED, RiskLevel, RiskResult
from .base import Guideline, Timeline

_OLIGO_GROUP = {
    "Persistent Oligoarthritis",
    "Extended Oligoarthritis",
    "RF Negative Polyarthritis",
    "Psoriatic Arthritis",
    "Undifferentiated Arthritis",
}
_LOW_RISK_GROUP = {
    "Enthesitis related Arthritis",
    "RF Positive Arthritis",
    "Systemic onset Arthritis",
}

_FOLLOWUP = "Follow-up continues for 7 years from diagnosis"


class GermanGuideline(Guideline):
    key = "germany"
    name = "German Guidelines"
    questions = ("date_of_birth", "date_of_diagnosis", "sub_diagnosis", "ana_positive")
    sub_diagnosis_options = (
        "Persistent Oligoarthritis",
        "Extended Oligoarthritis",
        "RF Negative Polyarthritis",
        "Psoriatic Arthritis",
        "RF Positive Arthritis",
        "Enthesitis related Arthritis",
        "Systemic onset Arthritis",
        "Undifferentiated Arthritis",
    )

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        since = timeline.time_since_diagnosis
        if since.exceeds(7):
            return RiskResult(
                risk_level=RiskLevel.VERY_LOW,
                recommendation=NO_RECOMMENDATION,
                followup=NO_SCREENING_REQUIRED,
                justification="Very low risk due to time since diagnosis > 7 years.",
            )

        ana = record.ana_positive
        risk_level = RiskLevel.NONE
        recommendation = NO_RECOMMENDATION
        followup = NO_SCREENING_REQUIRED
        justification = "Standard risk calculation applied."

        if record.sub_diagnosis in _OLIGO_GROUP:
            if timeline.age_at_onset.at_most(6):
                if ana and since.at_most(4):
                    risk_level, recommendation = RiskLevel.HIGH, "Every 3 Months"
                    justification = "High risk due to positive ANA, onset age ≤ 6, and time since diagnosis ≤ 4 years."
                elif ana:
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to positive ANA, onset age ≤ 6, and time since diagnosis > 4 years."
                elif since.at_most(4):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to negative ANA, onset age ≤ 6, and time since diagnosis ≤ 4 years."
                else:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to negative ANA, onset age ≤ 6, and time since diagnosis > 4 years."
            else:
                if ana and since.at_most(2):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to positive ANA, onset age > 6, and time since diagnosis ≤ 2 years."
                elif ana:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to positive ANA, onset age > 6, and time since diagnosis > 2 years."
                else:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to negative ANA and onset age > 6."
            followup = _FOLLOWUP
        elif record.sub_diagnosis in _LOW_RISK_GROUP:
            risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
            followup = _FOLLOWUP
            justification = f"Low risk due to diagnosis of {record.sub_diagnosis}."

        return RiskResult(risk_level, recommendation, followup, justification)
