import json
from decimal import Decimal

from benefit_calc.cli import main


def _write(tmp_path, record):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps(record))
    return str(path)


class TestCLI:
    def test_table_output(self, tmp_path, capsys):
        path = _write(tmp_path, {"transitCost": 500, "parkingCost": 250, "taxBracket": 22})
        assert main(["commuter", "--input", path, "--plan-year", "2025"]) == 0
        out = capsys.readouterr().out
        assert "COMMUTER results (2025 limits)" in out
        assert "3,780.00" in out

    def test_json_output(self, tmp_path, capsys):
        path = _write(tmp_path, {"totalDebt": 50000, "income": 80000, "incomeYears": 10})
        assert main(["life", "--input", path, "--json"]) == 0
        results = json.loads(capsys.readouterr().out)
        assert Decimal(results["dime_total"]) == Decimal("850000")

    def test_retirement_prints_projection(self, tmp_path, capsys):
        path = _write(tmp_path, {"currentAge": 60, "retirementAge": 62, "currentSalary": 100000})
        assert main(["retirement", "--input", path]) == 0
        out = capsys.readouterr().out
        assert "Conservative (4% rule)" in out

    def test_recommendations_printed(self, tmp_path, capsys):
        path = _write(tmp_path, {"healthElection": 3200, "expectedEligibleExpenses": 1000})
        assert main(["fsa", "--input", path]) == 0
        assert "High Forfeiture Risk" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["hsa", "--input", str(tmp_path / "nope.json")]) == 1
        assert "error:" in capsys.readouterr().err

    def test_unknown_plan_year(self, tmp_path, capsys):
        path = _write(tmp_path, {})
        assert main(["hsa", "--input", path, "--plan-year", "1999"]) == 1

    def test_filing_status_labelled(self, tmp_path, capsys):
        path = _write(tmp_path, {"transitCost": 300, "annualIncome": 80000, "filingStatus": "marriedJoint"})
        assert main(["commuter", "--input", path]) == 0
        assert "Filing status: Married filing jointly" in capsys.readouterr().out
