"""
Guideline registry and dispatch.

Maps guideline keys and region selections to the guideline that evaluates
them. Several regions share one guideline (Czech/Slovakia, Spain/Portugal,
US/Pakistan).
"""

import logging
import types
import typing

from dataclasses import dataclass
from datetime import date

from .guidelines.argentina import ArgentinaGuideline
from .guidelines.base import Guideline
from .guidelines.czech_slovak import CzechSlovakGuideline
from .guidelines.germany import GermanGuideline
from .guidelines.miwguc import MIWGUCGuideline
from .guidelines.nordic import NordicGuideline
from .guidelines.spain_portugal import SpainPortugalGuideline
from .guidelines.uk import UKGuideline
from .guidelines.us_pakistan import USPakistanGuideline
from .patient import PatientRecord
from .risk import RiskResult

logger = logging.getLogger(__name__)


class UnknownGuidelineError(KeyError):
    """Raised when dispatching on a guideline key that is not registered."""


class UnknownRegionError(KeyError):
    """Raised when a region value has no guideline mapping."""


@dataclass(frozen=True)
class Region:
    """
    A selectable region.

    Attributes:
        value: Unique selector value (e.g. 'slovakia').
        label: Display label (e.g. 'Slovakia').
        guideline_key: Key of the guideline the region uses.
    """

    value: str
    label: str
    guideline_key: str


GUIDELINES: typing.Mapping[str, Guideline] = types.MappingProxyType(
    {
        guideline.key: guideline
        for guideline in (
            UKGuideline(),
            NordicGuideline(),
            USPakistanGuideline(),
            GermanGuideline(),
            SpainPortugalGuideline(),
            CzechSlovakGuideline(),
            ArgentinaGuideline(),
            MIWGUCGuideline(),
        )
    }
)

REGIONS: typing.Tuple[Region, ...] = tuple(
    sorted(
        (
            Region("argentina", "Argentina", "argentina"),
            Region("czech", "Czech", "czech_slovak"),
            Region("germany", "Germany", "germany"),
            Region(
                "miwguc",
                "MIWGUC - Multinational Interdisciplinary Working Group for Uveitis in Childhood",
                "miwguc",
            ),
            Region("nordic", "Nordic", "nordic"),
            Region("pakistan", "Pakistan", "us_pakistan"),
            Region("portugal", "Portugal", "spain_portugal"),
            Region("slovakia", "Slovakia", "czech_slovak"),
            Region("spain", "Spain", "spain_portugal"),
            Region("uk", "UK", "uk"),
            Region("us", "US", "us_pakistan"),
        ),
        key=lambda region: region.label.casefold(),
    )
)

_REGIONS_BY_VALUE = types.MappingProxyType({region.value: region for region in REGIONS})


def get_guideline(key: str) -> Guideline:
    try:
        return GUIDELINES[key]
    except KeyError:
        raise UnknownGuidelineError(f"No guideline registered for key: {key!r}")


def list_guidelines() -> list[tuple[str, str]]:
    """(key, display name) pairs in registry order."""
    return [(key, guideline.name) for key, guideline in GUIDELINES.items()]


def list_regions() -> list[Region]:
    return list(REGIONS)


def resolve_region(value: str) -> Guideline:
    """Return the guideline used by the region with the given selector value."""
    try:
        region = _REGIONS_BY_VALUE[value]
    except KeyError:
        raise UnknownRegionError(f"No guideline mapping for region: {value!r}")
    return get_guideline(region.guideline_key)


def evaluate(key: str, record: PatientRecord, today: typing.Optional[date] = None) -> RiskResult:
    """
    Evaluate ``record`` with the guideline registered under ``key``.

    ``today`` is the reference date for current age and time since
    diagnosis; it defaults to the current local date.
    """
    guideline = get_guideline(key)
    if today is None:
        today = date.today()
    result = guideline.evaluate(record, today)
    logger.debug(f"{guideline.name} as of {today.isoformat()}: {result.risk_level.value}")
    return result
