import json

from typer.testing import CliRunner

from shamir_recovery.cli import app

runner = CliRunner()


def test_recover_directory(cases_dir):
    result = runner.invoke(app, ["recover", str(cases_dir)])
    assert result.exit_code == 0
    assert "case1.json: Secret = 5" in result.stdout
    assert "case2.json: Secret = 0" in result.stdout
    assert "Processing completed successfully." in result.stdout


def test_recover_directory_from_env(cases_dir):
    result = runner.invoke(app, ["recover"], env={"CASES_DIR": str(cases_dir)})
    assert result.exit_code == 0
    assert "case1.json: Secret = 5" in result.stdout


def test_recover_json_output(cases_dir):
    result = runner.invoke(app, ["recover", str(cases_dir), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout.split("\nProcessing")[0]) == {
        "case1.json": 5,
        "case2.json": 0,
    }


def test_recover_reports_failed_case(cases_dir):
    (cases_dir / "bad.json").write_text(
        json.dumps({"keys": {"n": 2, "k": 3}, "1": {"base": "10", "value": "1"}})
    )
    result = runner.invoke(app, ["recover", str(cases_dir)])
    assert result.exit_code == 1
    assert "bad.json: Error = Insufficient points provided" in result.stdout
    assert "case1.json: Secret = 5" in result.stdout
    assert "Processing completed successfully." not in result.stdout


def test_recover_missing_directory(tmp_path):
    result = runner.invoke(app, ["recover", str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_recover_no_cases(tmp_path):
    result = runner.invoke(app, ["recover", str(tmp_path)])
    assert result.exit_code == 1


def test_secret_command(tmp_path, sample_case):
    path = tmp_path / "one.json"
    path.write_text(json.dumps(sample_case))
    result = runner.invoke(app, ["secret", str(path)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "5"


def test_secret_command_failure(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps({"keys": {"n": 1, "k": 1}, "1": {"base": "40", "value": "1"}})
    )
    result = runner.invoke(app, ["secret", str(path)])
    assert result.exit_code == 1
    assert "base must be between 2 and 36" in result.output


def test_recover_json_output_includes_errors(cases_dir):
    (cases_dir / "bad.json").write_text(
        json.dumps({"keys": {"n": 1, "k": 1}, "1": {"base": "2", "value": "102"}})
    )
    result = runner.invoke(app, ["recover", str(cases_dir), "--json"])
    assert result.exit_code == 1
    mapping = json.loads(result.stdout)
    assert mapping["case1.json"] == 5
    assert mapping["case2.json"] == 0
    assert "invalid digit '2'" in mapping["bad.json"]
