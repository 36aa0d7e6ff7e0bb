"""
United Kingdom uveitis screening guideline.

Unlike the other regions, ages and times here are compared as fractional
years (365.25-day years) with plain < and > rather than exact year/day pairs.
A long enough time since diagnosis short-circuits to Very Low Risk before
the onset-age ladder is consulted.
"""

from ..dates import elapsed_years
from ..patient import PatientRecord
from ..risk import (
    NO_RECOMMENDATION,
    NO_SCREENING_REQUIRED,
    SENTINEL_RECOMMENDATIONS,
    RiskLevel,
    RiskResult,
)
from .base import Guideline, Timeline

# Sub-diagnosis groups
_OLIGO_GROUP = {
    "Persistent Oligoarthritis",
    "Extended Oligoarthritis",
    "Psoriatic Arthritis",
    "Enthesitis-related Arthritis",
}
_RF_NEGATIVE_GROUP = {"RF Negative Polyarthritis"}
_SYSTEMIC_GROUP = {"Systemic Onset Arthritis", "RF Positive Polyarthritis"}

_INTERVAL = "Every 3 - 4 Months"


def with_induction_phase(recommendation: str) -> str:
    """Prefix a screening interval with the two-monthly induction period."""
    if recommendation in SENTINEL_RECOMMENDATIONS:
        return recommendation
    return f"Screen for every 2 months, for the first 6 months. Then screen {recommendation}"


def _followup(years: int) -> str:
    return f"Follow up continues for {years} year{'s' if years != 1 else ''}"


class UKGuideline(Guideline):
    key = "uk"
    name = "United Kingdom Guidelines"
    questions = ("date_of_birth", "date_of_diagnosis", "sub_diagnosis", "ana_positive")
    sub_diagnosis_options = (
        "Persistent Oligoarthritis",
        "Extended Oligoarthritis",
        "Psoriatic Arthritis",
        "Enthesitis-related Arthritis",
        "RF Negative Polyarthritis",
        "Systemic Onset Arthritis",
        "RF Positive Polyarthritis",
    )

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        onset = elapsed_years(timeline.date_of_birth, timeline.date_of_diagnosis)
        since = elapsed_years(timeline.date_of_diagnosis, timeline.today)

        if self._screening_complete(record, onset, since):
            return RiskResult(
                risk_level=RiskLevel.VERY_LOW,
                recommendation=NO_SCREENING_REQUIRED,
                followup="None",
                justification="Very low risk due to long time since diagnosis.",
            )

        risk_level = RiskLevel.NONE
        recommendation = NO_RECOMMENDATION
        followup = "None"
        justification = "None"

        if record.sub_diagnosis in _OLIGO_GROUP:
            risk_level, recommendation = RiskLevel.HIGH, _INTERVAL
            if onset < 3:
                followup = _followup(8)
                justification = "High risk due to onset age <3 years."
            elif onset < 5:
                followup = _followup(6)
                justification = "High risk due to onset age between 3 and 4 years."
            elif onset < 9:
                followup = _followup(3)
                justification = "High risk due to onset age between 5 and 8 years."
            elif onset < 12:
                followup = _followup(1)
                justification = "High risk due to onset age between 9 and 11 years."
        elif record.sub_diagnosis in _RF_NEGATIVE_GROUP:
            risk_level, recommendation = RiskLevel.HIGH, _INTERVAL
            if record.ana_positive:
                if onset < 6:
                    followup = _followup(5)
                    justification = "High risk due to onset age <6 years with positive ANA."
                elif onset <= 9:
                    followup = _followup(2)
                    justification = "High risk due to onset age between 6 and 9 years with positive ANA."
                else:
                    followup = _followup(1)
                    justification = "High risk due to onset age >9 with positive ANA."
            elif onset < 7:
                followup = _followup(5)
                justification = "High risk due to early onset age with negative ANA."
            else:
                followup = _followup(1)
                justification = "High risk due to onset age at or after 7 years with negative ANA."
        elif record.sub_diagnosis in _SYSTEMIC_GROUP:
            if onset < 7:
                risk_level, recommendation = RiskLevel.HIGH, _INTERVAL
                followup = _followup(5)
                justification = "High risk due to onset age <7 years."
            elif onset <= 16:
                risk_level, recommendation = RiskLevel.HIGH, _INTERVAL
                followup = _followup(1)
                justification = "High risk due to onset age between 7 and 16 years."

        return RiskResult(
            risk_level=risk_level,
            recommendation=with_induction_phase(recommendation),
            followup=followup,
            justification=justification,
        )

    @staticmethod
    def _screening_complete(record: PatientRecord, onset: float, since: float) -> bool:
        """
        True once the time since diagnosis passes the cap for the patient's
        group and onset age.
        """
        if record.sub_diagnosis in _OLIGO_GROUP:
            return (
                (onset < 3 and since > 8)
                or (3 <= onset < 5 and since > 6)
                or (5 <= onset < 9 and since > 3)
                or (onset >= 9 and since > 1)
            )
        if record.sub_diagnosis in _RF_NEGATIVE_GROUP and record.ana_positive:
            return (
                (onset < 6 and since > 5)
                or (6 <= onset <= 9 and since > 2)
                or (onset > 9 and since > 1)
            )
        if record.sub_diagnosis in _RF_NEGATIVE_GROUP or record.sub_diagnosis in _SYSTEMIC_GROUP:
            return (onset < 7 and since > 5) or (onset >= 7 and since > 1)
        return False
