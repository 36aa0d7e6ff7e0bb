import json

import pytest
from click.testing import CliRunner
from uvecheck.__main__ import main

NORDIC_HIGH = [
    "evaluate",
    "-r", "nordic",
    "--dob", "01/01/2020",
    "--dod", "01/01/2023",
    "-s", "Oligoarthritis",
    "--ana",
    "--no-methotrexate",
    "--biological", "Adalimumab",
]


def test_list_guidelines_command():
    runner = CliRunner()
    result = runner.invoke(main, ["list-guidelines"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 8
    assert "uk\tUnited Kingdom Guidelines" in lines


def test_list_regions_command():
    runner = CliRunner()
    result = runner.invoke(main, ["list-regions"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 11
    assert "slovakia\tSlovakia\tczech_slovak" in lines


def test_questions_command():
    runner = CliRunner()
    result = runner.invoke(main, ["questions", "-r", "slovakia"])
    assert result.exit_code == 0, result.output
    assert "Guideline: Czech and Slovak Guidelines" in result.output
    assert "  - HLAB27+ Arthritis" in result.output
    assert "Applies until age: 18" in result.output


def test_evaluate_json_output(today_text):
    runner = CliRunner()
    result = runner.invoke(main, NORDIC_HIGH + ["--today", today_text, "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["riskLevel"] == "Medium Risk"
    assert payload["recommendation"] == "Every 6 Months"
    assert set(payload) == {"riskLevel", "recommendation", "followup", "justification"}


def test_evaluate_text_output_with_guideline_key(today_text):
    runner = CliRunner()
    args = [
        "evaluate",
        "-g", "miwguc",
        "--dob", "01/01/2018",
        "--dod", "15/06/2024",
        "-s", "Juvenile Idiopathic Arthritis",
        "--today", today_text,
    ]
    result = runner.invoke(main, args)
    assert result.exit_code == 0, result.output
    assert "Guideline: MIWGUC Guidelines" in result.output
    assert "Risk level: High Risk" in result.output
    assert "Recommendation: Every 2 Months" in result.output


def test_evaluate_reads_reference_date_from_environment():
    runner = CliRunner()
    result = runner.invoke(main, NORDIC_HIGH + ["--json"], env={"UVECHECK_TODAY": "01/06/2037"})
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["riskLevel"] == "Very Low Risk"


def test_evaluate_reports_input_errors(today_text):
    runner = CliRunner()
    args = NORDIC_HIGH[:]
    args[args.index("Oligoarthritis")] = "Gout"
    result = runner.invoke(main, args + ["--today", today_text])
    assert result.exit_code == 1
    assert "Errors found in input" in result.output
    assert "Gout" in result.output


@pytest.mark.parametrize(
    "selection",
    [[], ["-g", "nordic", "-r", "nordic"]],
)
def test_evaluate_requires_exactly_one_selection(selection, today_text):
    runner = CliRunner()
    args = ["evaluate", *selection, "--dob", "01/01/2020", "--dod", "01/01/2023", "--today", today_text]
    result = runner.invoke(main, args)
    assert result.exit_code == 2
    assert "exactly one of --guideline or --region" in result.output


def test_evaluate_rejects_bad_reference_date():
    runner = CliRunner()
    result = runner.invoke(main, NORDIC_HIGH + ["--today", "31/02/2025"])
    assert result.exit_code == 2


def test_evaluate_writes_log_file(tmp_path, today_text):
    log_file = tmp_path / "uvecheck.log"
    runner = CliRunner()
    result = runner.invoke(main, NORDIC_HIGH + ["--today", today_text, "--log-file-path", str(log_file)])
    assert result.exit_code == 0, result.output
    assert log_file.exists()


def test_evaluate_accepts_negated_flags(today_text):
    runner = CliRunner()
    args = [
        "evaluate",
        "-g", "nordic",
        "--dob", "01/01/2020",
        "--dod", "01/01/2023",
        "-s", "Oligoarthritis",
        "--no-ana",
        "--methotrexate",
        "--biological", "None / Other",
        "--today", today_text,
        "--json",
    ]
    result = runner.invoke(main, args)
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["riskLevel"] == "Low Risk"
    assert payload["justification"] == "Low risk due to ANA- with methotrexate, age at onset ≤ 6 years"


def test_evaluate_warns_past_age_limit_and_still_evaluates(today_text):
    runner = CliRunner()
    args = NORDIC_HIGH[:]
    args[args.index("01/01/2020")] = "01/01/2008"
    args[args.index("01/01/2023")] = "01/01/2012"
    result = runner.invoke(main, args + ["--today", today_text])
    assert result.exit_code == 0, result.output
    assert "Warnings found in input:" in result.output
    assert "Nordic Guidelines apply only until 16 years of age" in result.output
    assert "Risk level: Very Low Risk" in result.output
