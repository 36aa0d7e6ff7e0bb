"""
Guideline base class.

A guideline declares the questions it asks, the answer options it accepts,
and a decision procedure mapping a PatientRecord to a RiskResult.

High-level role in UveCheck:
- Each region module subclasses Guideline with its own decision table.
- The registry holds one instance per guideline key.
- The CLI checks a record with check_inputs() before calling evaluate().
"""

import abc
import typing

from dataclasses import dataclass
from datetime import date
from stairval.notepad import Notepad

from ..dates import DateDifference, parse_date, years_days_diff
from ..patient import PatientRecord
from ..risk import INVALID_DATE_RESULT, RiskResult

_BOOLEAN_QUESTIONS = {"ana_positive", "on_methotrexate"}


@dataclass(frozen=True)
class Timeline:
    """
    The three dates a guideline reasons about, with derived elapsed times.
    """

    date_of_birth: date
    date_of_diagnosis: date
    today: date

    @property
    def age_at_onset(self) -> DateDifference:
        return years_days_diff(self.date_of_birth, self.date_of_diagnosis)

    @property
    def time_since_diagnosis(self) -> DateDifference:
        return years_days_diff(self.date_of_diagnosis, self.today)

    @property
    def current_age(self) -> DateDifference:
        return years_days_diff(self.date_of_birth, self.today)


class Guideline(metaclass=abc.ABCMeta):
    key: str
    name: str
    questions: typing.Tuple[str, ...]
    sub_diagnosis_options: typing.Tuple[str, ...]
    biological_treatment_options: typing.Optional[typing.Tuple[str, ...]] = None
    max_age: typing.Optional[int] = None

    def evaluate(self, record: PatientRecord, today: date) -> RiskResult:
        """
        Classify the patient's uveitis risk as of ``today``.

        Both dates must parse as DD/MM/YYYY, otherwise the "Invalid date
        format" error result is returned. No other answer is validated here.
        """
        date_of_birth = parse_date(record.date_of_birth)
        date_of_diagnosis = parse_date(record.date_of_diagnosis)
        if date_of_birth is None or date_of_diagnosis is None:
            return INVALID_DATE_RESULT
        return self._assess(record, Timeline(date_of_birth, date_of_diagnosis, today))

    @abc.abstractmethod
    def _assess(self, record: PatientRecord, timeline: Timeline) -> RiskResult:
        raise NotImplementedError

    def exceeds_max_age(self, timeline: Timeline) -> bool:
        return self.max_age is not None and timeline.current_age.exceeds(self.max_age)

    def check_inputs(self, record: PatientRecord, notepad: Notepad, today: date) -> None:
        """
        Report unanswered questions and answers outside the declared options:
          - every question must be answered (booleans as True/False)
          - sub-diagnosis and biological treatment must be a listed option
          - dates must parse, be in order, and not lie after ``today``
        A patient already past ``max_age`` only gets a warning.
        """
        for question in self.questions:
            value = getattr(record, question)
            if question in _BOOLEAN_QUESTIONS:
                if not isinstance(value, bool):
                    notepad.add_error(f"Question {question!r} must be answered yes or no")
            elif value is None or (isinstance(value, str) and not value.strip()):
                notepad.add_error(f"Question {question!r} is unanswered")

        if "sub_diagnosis" in self.questions and record.sub_diagnosis:
            if record.sub_diagnosis not in self.sub_diagnosis_options:
                notepad.add_error(
                    f"Unknown sub-diagnosis {record.sub_diagnosis!r} for {self.name}; "
                    f"expected one of {list(self.sub_diagnosis_options)}"
                )
        if (
            "biological_treatment" in self.questions
            and self.biological_treatment_options
            and record.biological_treatment
            and record.biological_treatment not in self.biological_treatment_options
        ):
            notepad.add_error(
                f"Unknown biological treatment {record.biological_treatment!r} for {self.name}; "
                f"expected one of {list(self.biological_treatment_options)}"
            )

        parsed = {}
        for question in ("date_of_birth", "date_of_diagnosis"):
            text = getattr(record, question)
            if not text:
                continue
            value = parse_date(text)
            if value is None:
                notepad.add_error(f"Question {question!r}: {text!r} is not a valid DD/MM/YYYY date")
            elif value > today:
                notepad.add_error(f"Question {question!r}: {text!r} is in the future")
            else:
                parsed[question] = value

        if len(parsed) == 2 and parsed["date_of_diagnosis"] < parsed["date_of_birth"]:
            notepad.add_error("Date of diagnosis precedes date of birth")

        if "date_of_birth" in parsed and self.max_age is not None:
            age = years_days_diff(parsed["date_of_birth"], today)
            if age.exceeds(self.max_age):
                notepad.add_warning(
                    f"Patient is {age.years} years old; {self.name} apply only until {self.max_age} years of age"
                )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
