"""
MIWGUC (Multinational Interdisciplinary Working Group for Uveitis in
Childhood) screening guideline. Asks no ANA question.
"""

from ..patient import PatientRecord
from ..risk import NO_SCREENING_REQUIRED, RiskLevel, RiskResult
from .base import Guideline, Timeline


class MIWGUCGuideline(Guideline):
    key = "miwguc"
    name = "MIWGUC Guidelines"
    questions = ("date_of_birth", "date_of_diagnosis", "sub_diagnosis")
    sub_diagnosis_options = ("Juvenile Idiopathic Arthritis", "Systemic-onset Arthritis")

    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        if record.sub_diagnosis == "Systemic-onset Arthritis":
            return RiskResult(
                risk_level=RiskLevel.VERY_LOW,
                recommendation=NO_SCREENING_REQUIRED,
                followup="None",
                justification="Very low risk due to diagnosis of Systemic-onset Arthritis.",
            )
        if record.sub_diagnosis != "Juvenile Idiopathic Arthritis":
            return RiskResult(RiskLevel.NONE, NO_SCREENING_REQUIRED, "None", "None")

        since = timeline.time_since_diagnosis
        if timeline.age_at_onset.years < 7:
            if since.at_most(1):
                risk_level, recommendation = RiskLevel.HIGH, "Every 2 Months"
                justification = "High risk due to JIA diagnosed before 7 years of age and within the last year."
            elif since.at_most(4):
                risk_level, recommendation = RiskLevel.HIGH, "Every 3–4 Months"
                justification = "High risk due to JIA diagnosed before 7 years of age and within 4 years."
            elif since.at_most(7):
                risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                justification = "Medium risk due to JIA diagnosed before 7 years of age and within 7 years."
            else:
                risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                justification = "Low risk due to JIA diagnosed before 7 years of age and over 7 years ago."
        else:
            if since.at_most(1):
                risk_level, recommendation = RiskLevel.HIGH, "Every 3–4 Months"
                justification = "High risk due to JIA diagnosed at or after 7 years of age and within the last year."
            elif since.at_most(4):
                risk_level, recommendation = RiskLevel.MEDIUM, "Every 6 Months"
                justification = "Medium risk due to JIA diagnosed at or after 7 years of age and within 4 years."
            else:
                risk_level, recommendation = RiskLevel.LOW, "Every 12 Months"
                justification = "Low risk due to JIA diagnosed at or after 7 years of age and over 4 years ago"

        return RiskResult(risk_level, recommendation, "Follow-up continues into adulthood", justification)
