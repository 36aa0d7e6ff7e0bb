"""
US and Pakistan uveitis screening guideline (shared by both regions).
"""

from ..patient import PatientRecord
from ..risk import NO_SCREENING_REQUIRED, RiskLevel, RiskResult
from .base import Guideline, Timeline

_OLIGO_GROUP = {
    "Extended Oligoarthritis",
    "Persistent Oligoarthritis",
    "RF Negative Polyarthritis",
    "Psoriatic Arthritis",
    "Undifferentiated Arthritis",
}
_LOW_RISK_GROUP = {
    "Enthesitis related Arthritis",
    "RF Positive Arthritis",
    "Systemic onset Arthritis",
}


class USPakistanGuideline(Guideline):
    key = "us_pakistan"
    name = "US and Pakistan Guidelines"
    questions = ("date_of_birth", "date_of_diagnosis", "sub_diagnosis", "ana_positive")
    sub_diagnosis_options = (
        "Extended Oligoarthritis",
        "Persistent Oligoarthritis",
        "RF Negative Polyarthritis",
        "Psoriatic Arthritis",
        "RF Positive Arthritis",
        "Enthesitis related Arthritis",
        "Systemic onset Arthritis",
        "Undifferentiated Arthritis",
    )

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        since = timeline.time_since_diagnosis
        ana = record.ana_positive

        risk_level = RiskLevel.NONE
        recommendation = NO_SCREENING_REQUIRED
        justification = "Standard risk calculation applied."

        if record.sub_diagnosis in _OLIGO_GROUP:
            if timeline.age_at_onset.years < 7:
                if ana and since.at_most(4):
                    risk_level, recommendation = RiskLevel.HIGH, "Every 3 Months"
                    justification = "High risk due to positive ANA, age at onset < 7, time since diagnosis ≤ 4 years."
                elif ana and since.at_most(7):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to positive ANA, age at onset < 7, time since diagnosis between 4 and 7 years."
                elif ana:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to positive ANA, age at onset < 7, time since diagnosis > 7 years."
                elif since.at_most(4):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to negative ANA, age at onset < 7, time since diagnosis ≤ 4 years."
                else:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to negative ANA, age at onset < 7, time since diagnosis > 4 years."
            else:
                if ana and since.at_most(4):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to positive ANA, age at onset ≥ 7, time since diagnosis ≤ 4 years."
                elif ana:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to positive ANA, age at onset ≥ 7, time since diagnosis > 4 years."
                else:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to negative ANA and age at onset > 7."
        elif record.sub_diagnosis in _LOW_RISK_GROUP:
            risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
            justification = f"Low risk due to diagnosis of {record.sub_diagnosis}."

        return RiskResult(
            risk_level=risk_level,
            recommendation=recommendation,
            followup="Follow-up continues into adulthood",
            justification=justification,
        )
