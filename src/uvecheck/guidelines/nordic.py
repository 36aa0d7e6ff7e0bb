"""
Nordic uveitis screening guideline.

Considers ANA status and methotrexate treatment alongside onset age and time
since diagnosis, then lowers the result one step for patients on a biological
treatment other than etanercept.
"""

from ..patient import PatientRecord
from ..risk import (
    NO_RECOMMENDATION,
    NO_SCREENING_REQUIRED,
    SCREEN_AT_DIAGNOSIS,
    RiskLevel,
    RiskResult,
)
from .base import Guideline, Timeline

_OLIGO_GROUP = {
    "Oligoarthritis",
    "RF Negative Polyarthritis",
    "Psoriatic Arthritis",
    "Undifferentiated Arthritis",
}
_ENTHESITIS_GROUP = {"Enthesitis related Arthritis"}
_SYSTEMIC_GROUP = {"RF Positive Arthritis", "Systemic Onset Arthritis"}

# Biological treatments that do not lower the risk level
_NON_PROTECTIVE_TREATMENTS = {"None / Other", "Etanercept"}

_DOWNGRADED_INTERVALS = {
    RiskLevel.MEDIUM: "Every 6 Months",
    RiskLevel.LOW: "Every 12 Months",
}


class NordicGuideline(Guideline):
    key = "nordic"
    name = "Nordic Guidelines"
    max_age = 16
    questions = (
        "date_of_birth",
        "date_of_diagnosis",
        "sub_diagnosis",
        "ana_positive",
        "on_methotrexate",
        "biological_treatment",
    )
    sub_diagnosis_options = (
        "Oligoarthritis",
        "RF Negative Polyarthritis",
        "Psoriatic Arthritis",
        "RF Positive Arthritis",
        "Enthesitis related Arthritis",
        "Systemic Onset Arthritis",
        "Undifferentiated Arthritis",
    )
    biological_treatment_options = (
        "Adalimumab",
        "Certolizumab",
        "Golimumab",
        "Infliximab",
        "Etanercept",
        "None / Other",
    )

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        if self.exceeds_max_age(timeline):
            return RiskResult(
                risk_level=RiskLevel.VERY_LOW,
                recommendation=NO_SCREENING_REQUIRED,
                followup="None",
                justification="Screening guidelines apply only until 16 years of age.",
            )

        result = self._ladder(record, timeline)
        if record.biological_treatment and record.biological_treatment not in _NON_PROTECTIVE_TREATMENTS:
            result = self._downgrade(result)
        return result

    def _ladder(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        onset_leq_6 = timeline.age_at_onset.at_most(6)
        since = timeline.time_since_diagnosis
        ana, mtx = record.ana_positive, record.on_methotrexate

        risk_level = RiskLevel.NONE
        recommendation = NO_RECOMMENDATION
        followup = "None"
        justification = "Standard risk calculation applied."

        if record.sub_diagnosis in _OLIGO_GROUP:
            if onset_leq_6:
                if ana and not mtx and since.at_most(4):
                    risk_level, recommendation = RiskLevel.HIGH, "Every 3 Months"
                    justification = "High risk due to ANA+ without methotrexate, age at onset ≤ 6 years, time since diagnosis 0–4 years."
                elif ana and mtx and since.at_most(4):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to ANA+ with methotrexate, age at onset ≤ 6 years, time since diagnosis 0–4 years."
                elif ana and not mtx and since.exceeds(4) and since.at_most(7):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to ANA+ without methotrexate, age at onset ≤ 6 years, time since diagnosis 4–7 years."
                elif ana and mtx and since.exceeds(4):
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA+ with methotrexate, age at onset ≤ 6 years, time since diagnosis >4 years."
                elif ana and not mtx and since.exceeds(7):
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA+ without methotrexate, age at onset ≤ 6 years, time since diagnosis >7 years."
                elif not ana and not mtx and since.at_most(4):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to ANA- without methotrexate, age at onset ≤ 6 years, time since diagnosis 0–4 years."
                elif not ana and not mtx and since.exceeds(4):
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA- without methotrexate, age at onset ≤ 6 years, time since diagnosis > 4 years."
                elif not ana and mtx and since.exceeds(0):
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA- with methotrexate, age at onset ≤ 6 years"
                followup = "Follow-up continues until 16 Years of age"
            else:
                if ana and not mtx and since.at_most(2):
                    risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                    justification = "Medium risk due to ANA+ without methotrexate, age at onset > 6 years, time since diagnosis ≤ 2 years."
                elif ana and not mtx and since.exceeds(2):
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA+ without methotrexate, onset > 6 years, time since diagnosis > 2 years."
                elif ana and mtx and since.exceeds(0):
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA+ with methotrexate, onset > 6 years."
                elif not ana:
                    risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                    justification = "Low risk due to ANA- regardless of methotrexate, onset > 6 years."
                followup = "Follow-up for 2 - 4 years, max 16 years of age"
        elif record.sub_diagnosis in _ENTHESITIS_GROUP:
            risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
            if onset_leq_6:
                followup = "Follow-up for 4 - 7 years, max 16 years of age"
                justification = "Low risk: Enthesitis related arthritis with onset ≤ 6 years."
            else:
                followup = "Follow-up for 2 - 4 years, max 16 years of age"
                justification = "Low risk: Enthesitis related arthritis with onset > 6 years."
        elif record.sub_diagnosis in _SYSTEMIC_GROUP:
            risk_level, recommendation = RiskLevel.VERY_LOW, SCREEN_AT_DIAGNOSIS
            followup = "No Follow up required"
            justification = "Very low risk: RF positive or systemic onset arthritis."

        return RiskResult(risk_level, recommendation, followup, justification)

    @staticmethod
    def _downgrade(result: RiskResult) -> RiskResult:
        lowered = result.risk_level.one_step_lower()
        if lowered == result.risk_level:
            return result
        return RiskResult(
            risk_level=lowered,
            recommendation=_DOWNGRADED_INTERVALS[lowered],
            followup=result.followup,
            justification="Risk downgraded due to biological treatment.",
        )
