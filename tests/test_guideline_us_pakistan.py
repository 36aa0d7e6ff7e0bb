import pytest

from uvecheck.guidelines.us_pakistan import USPakistanGuideline
from uvecheck.patient import PatientRecord
from uvecheck.risk import RiskLevel

US_PAKISTAN = USPakistanGuideline()


def make_record(dob, dod, sub_diagnosis="Persistent Oligoarthritis", ana_positive=True):
    return PatientRecord(
        date_of_birth=dob,
        date_of_diagnosis=dod,
        sub_diagnosis=sub_diagnosis,
        ana_positive=ana_positive,
    )


def test_early_onset_ana_positive_recent_is_high(today):
    result = US_PAKISTAN.evaluate(make_record("01/01/2018", "01/01/2023"), today)
    assert result.risk_level == RiskLevel.HIGH
    assert result.recommendation == "Every 3 Months"
    assert result.followup == "Follow-up continues into adulthood"


@pytest.mark.parametrize(
    "dod, expected",
    [
        ("15/06/2018", RiskLevel.MEDIUM),  # exactly 7 years
        ("14/06/2018", RiskLevel.LOW),  # 7 years and 1 day
    ],
)
def test_seven_year_boundary(today, dod, expected):
    assert US_PAKISTAN.evaluate(make_record("01/01/2015", dod), today).risk_level == expected


def test_onset_compares_whole_years(today):
    """6 years 365 days is still under 7; exactly 7 years is not."""
    under = US_PAKISTAN.evaluate(make_record("16/06/2017", "15/06/2024"), today)
    assert under.risk_level == RiskLevel.HIGH
    at_seven = US_PAKISTAN.evaluate(make_record("15/06/2017", "15/06/2024"), today)
    assert at_seven.risk_level == RiskLevel.MEDIUM
    assert at_seven.recommendation == "Every 6 Months"


def test_late_onset_ana_negative(today):
    result = US_PAKISTAN.evaluate(make_record("01/01/2010", "01/01/2024", ana_positive=False), today)
    assert result.risk_level == RiskLevel.LOW
    assert result.justification == "Low risk due to negative ANA and age at onset > 7."


@pytest.mark.parametrize(
    "sub_diagnosis", ["Enthesitis related Arthritis", "RF Positive Arthritis", "Systemic onset Arthritis"]
)
def test_low_risk_group(today, sub_diagnosis):
    result = US_PAKISTAN.evaluate(make_record("01/01/2020", "01/01/2024", sub_diagnosis=sub_diagnosis), today)
    assert result.risk_level == RiskLevel.LOW
    assert result.recommendation == "Every 12 Months"
    assert result.justification == f"Low risk due to diagnosis of {sub_diagnosis}."
