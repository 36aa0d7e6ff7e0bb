"""
Czech and Slovak uveitis screening guideline (shared by both regions).

RF-positive polyarthritis and systemic onset arthritis get a fixed
recommendation. Otherwise screening is intensified during the first six
months after diagnosis, and ANA-positive patients keep being screened into
adulthood.
"""

from ..patient import PatientRecord
from ..risk import NO_SCREENING_REQUIRED, RiskLevel, RiskResult
from .base import Guideline, Timeline

_OLIGO_GROUP = {
    "Persistent Oligoarthritis",
    "Extended Oligoarthritis",
    "Psoriatic Arthritis",
    "RF Negative Polyarthritis",
}
_HLA_B27_GROUP = {"HLAB27+ Arthritis"}

_FIRST_SIX_MONTHS_DAYS = 183


class CzechSlovakGuideline(Guideline):
    key = "czech_slovak"
    name = "Czech and Slovak Guidelines"
    max_age = 18
    questions = ("date_of_birth", "date_of_diagnosis", "sub_diagnosis", "ana_positive")
    sub_diagnosis_options = (
        "Persistent Oligoarthritis",
        "Extended Oligoarthritis",
        "RF Negative Polyarthritis",
        "Psoriatic Arthritis",
        "RF Positive Polyarthritis",
        "Systemic Onset Arthritis",
        "HLAB27+ Arthritis",
    )

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        if record.sub_diagnosis == "RF Positive Polyarthritis":
            return RiskResult(
                risk_level=RiskLevel.MEDIUM,
                recommendation="Every 6 months",
                followup="Until 18 years of age",
                justification="Medium risk due to diagnosis of RF Positive Polyarthritis.",
            )
        if record.sub_diagnosis == "Systemic Onset Arthritis":
            return RiskResult(
                risk_level=RiskLevel.MEDIUM,
                recommendation="Screen at diagnosis, then every 6 months until 18 years of age",
                followup="",
                justification="Medium risk due to diagnosis of Systemic Onset Arthritis.",
            )

        adult = self.exceeds_max_age(timeline)
        if adult and not record.ana_positive:
            return RiskResult(
                risk_level=RiskLevel.VERY_LOW,
                recommendation=NO_SCREENING_REQUIRED,
                followup="None",
                justification="Very low risk due to age > 18 years and negative ANA.",
            )

        if record.sub_diagnosis not in _OLIGO_GROUP and record.sub_diagnosis not in _HLA_B27_GROUP:
            return RiskResult(RiskLevel.NONE, "", "", "")

        since = timeline.time_since_diagnosis
        if timeline.age_at_onset.at_most(6) or record.ana_positive:
            if adult:
                # only ANA-positive patients reach this point as adults
                return RiskResult(
                    risk_level=RiskLevel.LOW_TO_MEDIUM,
                    recommendation="Every 6-12 months",
                    followup="Continue into adulthood",
                    justification="Low to medium risk due to age > 18 and positive ANA.",
                )
            if since.years == 0 and since.days < _FIRST_SIX_MONTHS_DAYS:
                return RiskResult(
                    risk_level=RiskLevel.HIGH,
                    recommendation="Every 2 months",
                    followup="Continue into adulthood",
                    justification="High risk due to onset age < 6 or positive ANA, and time since diagnosis < 0.5 years.",
                )
            if since.at_most(4):
                return RiskResult(
                    risk_level=RiskLevel.HIGH,
                    recommendation="Every 3 months",
                    followup="Continue into adulthood",
                    justification="High risk due to onset age < 6 or positive ANA, and time since diagnosis ≤ 4 years.",
                )
            return RiskResult(
                risk_level=RiskLevel.MEDIUM,
                recommendation="Every 6 months",
                followup="Continue into adulthood",
                justification="Medium risk due to onset age < 6 or positive ANA, time since diagnosis >4 years.",
            )

        if since.at_most(4):
            return RiskResult(
                risk_level=RiskLevel.HIGH,
                recommendation="Every 3 months",
                followup="Until 18 years of age",
                justification="High risk due to negative ANA, onset age > 6, and time since diagnosis ≤ 4 years.",
            )
        return RiskResult(
            risk_level=RiskLevel.MEDIUM,
            recommendation="Every 6 months",
            followup="Until 18 years of age",
            justification="Medium risk due to negative ANA, onset age > 6, and time since diagnosis > 4 years.",
        )
