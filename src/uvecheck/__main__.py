"""
Command-line interface for the UveCheck toolkit.
Lists the available guidelines and regions, shows the questions a guideline
asks, and evaluates one patient's uveitis risk.
"""

import click
import json
import logging
import sys
import typing

from datetime import date
from stairval.notepad import create_notepad

from .dates import format_date, parse_date
from .guidelines.base import Guideline
from .patient import PatientRecord
from .registry import GUIDELINES, REGIONS, get_guideline, list_guidelines, list_regions, resolve_region


@click.group()
def main():
    """UveCheck: uveitis screening risk for children with juvenile idiopathic arthritis."""
    pass


def _guideline_options(command):
    command = click.option(
        "-r",
        "--region",
        "region_value",
        type=click.Choice([region.value for region in REGIONS]),
        help="region whose guideline applies (e.g. slovakia)",
    )(command)
    command = click.option(
        "-g",
        "--guideline",
        "guideline_key",
        type=click.Choice(list(GUIDELINES)),
        help="guideline key (e.g. czech_slovak)",
    )(command)
    return command


def _select_guideline(guideline_key: typing.Optional[str], region_value: typing.Optional[str]) -> Guideline:
    # exactly one of --guideline / --region
    if bool(guideline_key) == bool(region_value):
        raise click.UsageError("Give exactly one of --guideline or --region.")
    if guideline_key:
        return get_guideline(guideline_key)
    return resolve_region(region_value)


def _parse_today(ctx, param, value: typing.Optional[str]) -> date:
    if value is None:
        return date.today()
    parsed = parse_date(value)
    if parsed is None:
        raise click.BadParameter(f"{value!r} is not a valid DD/MM/YYYY date")
    return parsed


def _configure_logging(verbose_logging: bool, log_file_path: typing.Optional[str]) -> None:
    handlers: list[logging.Handler] = []
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"))
    if verbose_logging:
        handlers.append(logging.StreamHandler(sys.stderr))
    if handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose_logging else logging.INFO,
            format="%(asctime)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )


def _report_issues(notepad):
    # if there were errors, show them
    if notepad.has_errors(include_subsections=True):
        click.echo("Errors found in input:")
        for err in notepad.errors():
            click.echo(f"- {err}")
    # show any warnings but keep going
    if notepad.has_warnings(include_subsections=True):
        click.echo("Warnings found in input:")
        for w in notepad.warnings():
            click.echo(f"- {w}")


@main.command(name="list-guidelines")
def list_guidelines_command():
    """List the guideline keys and their display names."""
    for key, name in list_guidelines():
        click.echo(f"{key}\t{name}")


@main.command(name="list-regions")
def list_regions_command():
    """List the selectable regions and the guideline each one uses."""
    for region in list_regions():
        click.echo(f"{region.value}\t{region.label}\t{region.guideline_key}")


@main.command(name="questions")
@_guideline_options
def questions(guideline_key: typing.Optional[str], region_value: typing.Optional[str]):
    """
    Show the questions a guideline asks and the answers it accepts.
    """
    guideline = _select_guideline(guideline_key, region_value)
    click.echo(f"Guideline: {guideline.name}")
    click.echo(f"Questions: {', '.join(guideline.questions)}")
    click.echo("Sub-diagnosis options:")
    for option in guideline.sub_diagnosis_options:
        click.echo(f"  - {option}")
    if guideline.biological_treatment_options:
        click.echo("Biological treatment options:")
        for option in guideline.biological_treatment_options:
            click.echo(f"  - {option}")
    if guideline.max_age is not None:
        click.echo(f"Applies until age: {guideline.max_age}")


@main.command(name="evaluate")
@_guideline_options
@click.option("--dob", "--date-of-birth", "date_of_birth", required=True, help="date of birth as DD/MM/YYYY")
@click.option("--dod", "--date-of-diagnosis", "date_of_diagnosis", required=True, help="date of diagnosis as DD/MM/YYYY")
@click.option("-s", "--sub-diagnosis", "sub_diagnosis", default=None, help="sub-diagnosis, one of the guideline's options")
@click.option("--ana/--no-ana", "ana_positive", default=None, help="antinuclear antibody (ANA) positive or negative")
@click.option("--methotrexate/--no-methotrexate", "on_methotrexate", default=None, help="on methotrexate or not")
@click.option("-b", "--biological", "biological_treatment", default=None, help="biological treatment, one of the guideline's options")
@click.option(
    "--today",
    envvar="UVECHECK_TODAY",
    callback=_parse_today,
    help="reference date as DD/MM/YYYY (default: the current date; env: UVECHECK_TODAY)",
)
@click.option("-j", "--json", "as_json", is_flag=True, help="print the result as JSON")
@click.option("--verbose-logging", is_flag=True, help="Also emit debug logs to stderr")
@click.option(
    "--log-file-path",
    type=click.Path(dir_okay=False, writable=True),
    help="Append timestamped logs to this file",
)
def evaluate(
    guideline_key: typing.Optional[str],
    region_value: typing.Optional[str],
    date_of_birth: str,
    date_of_diagnosis: str,
    sub_diagnosis: typing.Optional[str],
    ana_positive: typing.Optional[bool],
    on_methotrexate: typing.Optional[bool],
    biological_treatment: typing.Optional[str],
    today: date,
    as_json: bool,
    verbose_logging: bool,
    log_file_path: typing.Optional[str],
):
    """
    Check the answers against the selected guideline, then classify the
    patient's uveitis risk and print the screening recommendation.
    """
    _configure_logging(verbose_logging, log_file_path)
    guideline = _select_guideline(guideline_key, region_value)
    logging.info(f"Evaluating with {guideline.name} as of {format_date(today)}")

    record = PatientRecord(
        date_of_birth=date_of_birth,
        date_of_diagnosis=date_of_diagnosis,
        sub_diagnosis=sub_diagnosis,
        ana_positive=ana_positive,
        on_methotrexate=on_methotrexate,
        biological_treatment=biological_treatment,
    )
    logging.debug(f"Answers: {record}")

    notepad = create_notepad("inputs")
    guideline.check_inputs(record, notepad, today)
    _report_issues(notepad)
    if notepad.has_errors(include_subsections=True):
        logging.error(f"Answers do not satisfy {guideline.name}; not evaluated")
        sys.exit(1)

    result = guideline.evaluate(record, today)
    logging.info(f"Result: {result.risk_level.value}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    click.echo(f"Guideline: {guideline.name}")
    click.echo(f"Risk level: {result.risk_level.value}")
    click.echo(f"Recommendation: {result.recommendation}")
    click.echo(f"Follow-up: {result.followup}")
    click.echo(f"Justification: {result.justification}")


if __name__ == "__main__":
    main()
