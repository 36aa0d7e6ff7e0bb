"""
Patient domain model.

Defines the PatientRecord dataclass holding the answers a guideline asks for.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PatientRecord:
    """
    Answers collected for one patient.

    Attributes:
        date_of_birth: Date string in 'DD/MM/YYYY' format.
        date_of_diagnosis: Date string in 'DD/MM/YYYY' format.
        sub_diagnosis: One of the selected guideline's sub-diagnosis options.
        ana_positive: True if antinuclear antibodies were detected.
        on_methotrexate: True if the patient takes methotrexate.
        biological_treatment: One of the guideline's biological treatment options.

    Dates are kept as entered; unparseable dates are reported by the
    guideline evaluation, not here.
    """

    date_of_birth: str
    date_of_diagnosis: str
    sub_diagnosis: Optional[str] = None
    ana_positive: Optional[bool] = None
    on_methotrexate: Optional[bool] = None
    biological_treatment: Optional[str] = None

    def __post_init__(self):
        for name in ("ana_positive", "on_methotrexate"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean, got {type(value).__name__}"
                )
