"""
Guideline.check_inputs reports incomplete or out-of-range answers on a
notepad instead of raising.
"""

from stairval.notepad import create_notepad
from uvecheck.patient import PatientRecord
from uvecheck.registry import get_guideline


def nordic_record(**overrides):
    answers = dict(
        date_of_birth="01/01/2015",
        date_of_diagnosis="01/01/2020",
        sub_diagnosis="Oligoarthritis",
        ana_positive=True,
        on_methotrexate=False,
        biological_treatment="Adalimumab",
    )
    answers.update(overrides)
    return PatientRecord(**answers)


def test_complete_answers_have_no_issues(today):
    note = create_notepad("inputs")
    get_guideline("nordic").check_inputs(nordic_record(), note, today)
    assert not note.has_errors(include_subsections=True)
    assert not note.has_warnings(include_subsections=True)


def test_unanswered_boolean_is_an_error(today):
    note = create_notepad("inputs")
    get_guideline("nordic").check_inputs(nordic_record(on_methotrexate=None), note, today)
    assert note.has_errors(include_subsections=True)


def test_unanswered_sub_diagnosis_is_an_error(today):
    note = create_notepad("inputs")
    get_guideline("nordic").check_inputs(nordic_record(sub_diagnosis=""), note, today)
    assert note.has_errors(include_subsections=True)


def test_unknown_options_are_errors(today):
    note = create_notepad("inputs")
    get_guideline("nordic").check_inputs(nordic_record(sub_diagnosis="Gout"), note, today)
    assert note.has_errors(include_subsections=True)

    note = create_notepad("inputs")
    get_guideline("nordic").check_inputs(nordic_record(biological_treatment="Aspirin"), note, today)
    assert note.has_errors(include_subsections=True)


def test_sub_diagnosis_options_are_per_guideline(today):
    """'Oligoarthritis' is a Nordic option but not a UK one."""
    note = create_notepad("inputs")
    get_guideline("uk").check_inputs(nordic_record(), note, today)
    assert note.has_errors(include_subsections=True)


def test_date_problems_are_errors(today):
    for overrides in (
        {"date_of_birth": "31/02/2020"},
        {"date_of_diagnosis": "01/01/2030"},
        {"date_of_birth": "01/01/2021", "date_of_diagnosis": "01/01/2020"},
    ):
        note = create_notepad("inputs")
        get_guideline("nordic").check_inputs(nordic_record(**overrides), note, today)
        assert note.has_errors(include_subsections=True), overrides


def test_questions_not_asked_are_not_required(today):
    note = create_notepad("inputs")
    record = PatientRecord("01/01/2015", "01/01/2020", sub_diagnosis="Juvenile Idiopathic Arthritis")
    get_guideline("miwguc").check_inputs(record, note, today)
    assert not note.has_errors(include_subsections=True)


def test_patient_past_age_limit_is_a_warning(today):
    note = create_notepad("inputs")
    record = nordic_record(date_of_birth="01/01/2008", date_of_diagnosis="01/01/2012")
    get_guideline("nordic").check_inputs(record, note, today)
    assert not note.has_errors(include_subsections=True)
    assert note.has_warnings(include_subsections=True)


def test_sixteenth_birthday_is_not_past_age_limit(today):
    note = create_notepad("inputs")
    record = nordic_record(date_of_birth="15/06/2009", date_of_diagnosis="01/01/2012")
    get_guideline("nordic").check_inputs(record, note, today)
    assert not note.has_warnings(include_subsections=True)


def test_guideline_without_age_limit_never_warns(today):
    note = create_notepad("inputs")
    record = PatientRecord("01/01/1990", "01/01/1995", sub_diagnosis="Juvenile Idiopathic Arthritis")
    get_guideline("miwguc").check_inputs(record, note, today)
    assert not note.has_warnings(include_subsections=True)
