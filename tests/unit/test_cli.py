"""
Тесты для CLI и консольной демонстрации
"""

import json
import logging

import pytest
from click.testing import CliRunner

from advcalc.calculator import AdvancedCalculator
from advcalc.cli import cli
from advcalc.core.logger import LOGGER_NAME, ColoredFormatter, configure_logging
from advcalc.demo import build_report, run_demo


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# ТЕСТЫ: Demo
# =============================================================================


class TestDemo:
    """Тесты консольной демонстрации."""

    def test_sections_in_order(self):
        lines = []
        run_demo(AdvancedCalculator(), lines.append, async_delay=0.0)

        headers = [line for line in lines if line.startswith("===")]
        assert headers == [
            "=== BASIC OPERATIONS ===",
            "=== ADVANCED CALCULATIONS ===",
            "=== MATRIX OPERATIONS ===",
            "=== SEQUENCE GENERATION ===",
            "=== ASYNC OPERATIONS ===",
            "=== STATISTICS ===",
            "=== FIBONACCI SEQUENCE ===",
        ]

    def test_output_values(self):
        lines = []
        run_demo(AdvancedCalculator(), lines.append, async_delay=0.0)

        assert "Quadratic transform: 36.0" in lines
        assert "Factorial of 20: 2432902008176640000" in lines
        assert "Derivative at x=2: 14.0000" in lines
        assert "Integral of x² from 0 to 1: 0.3333" in lines
        assert "Root of x² - 4 = 0: 2.0000" in lines
        assert "  (2, 0)" in lines
        assert "  (1, 0)" in lines
        assert "19.00\t22.00\n43.00\t50.00" in lines
        assert "Filtered squares: 4, 16, 36, 64, 100" in lines
        assert "Moving average: 2, 3, 4, 5, 6, 7, 8, 9" in lines
        assert "Async area calculation: 314.1593" in lines
        assert "Mean: 5.9500" in lines
        assert "Count: 10" in lines
        assert (
            "First 15 Fibonacci numbers: "
            "0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377"
        ) in lines

    def test_report(self):
        report = build_report(AdvancedCalculator(), async_delay=0.0)

        assert report["operations"]["/"] == 4.0
        assert report["matrix_product"]["data"] == [[19.0, 22.0], [43.0, 50.0]]
        assert report["statistics"]["count"] == 10
        assert report["fibonacci"][-1] == 377
        assert sorted(r for r, _ in report["polynomial_roots"]) == [1.0, 2.0]
        json.dumps(report)


# =============================================================================
# ТЕСТЫ: CLI commands
# =============================================================================


class TestCli:
    """Тесты команд click."""

    def test_demo(self, runner):
        result = runner.invoke(cli, ["demo", "--async-delay", "0"])
        assert result.exit_code == 0, result.output
        assert "=== FIBONACCI SEQUENCE ===" in result.output

    def test_demo_json(self, runner):
        result = runner.invoke(cli, ["demo", "--json", "--async-delay", "0"])
        assert result.exit_code == 0, result.output
        report = json.loads(result.output)
        assert report["factorial_20"] == 2432902008176640000

    def test_calc(self, runner):
        result = runner.invoke(cli, ["calc", "8", "log", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_calc_negative_operand(self, runner):
        result = runner.invoke(cli, ["calc", "-2", "^", "3"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "-8"

    def test_calc_power_overflow(self, runner):
        """Переполнение степени печатается как inf."""
        result = runner.invoke(cli, ["calc", "10", "^", "1000"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "inf"

    def test_overflow_reported_cleanly(self, runner, monkeypatch):
        def overflow(self, a, symbol, b):
            raise OverflowError("math range error")

        monkeypatch.setattr(AdvancedCalculator, "calculate", overflow)
        result = runner.invoke(cli, ["calc", "1", "+", "2"])
        assert result.exit_code == 1
        assert "math range error" in result.output
        assert not isinstance(result.exception, OverflowError)

    def test_calc_division_by_zero(self, runner):
        result = runner.invoke(cli, ["calc", "1", "/", "0"])
        assert result.exit_code == 1
        assert "Cannot divide by zero" in result.output

    def test_calc_unknown_operation(self, runner):
        result = runner.invoke(cli, ["calc", "1", "%", "2"])
        assert result.exit_code == 1
        assert "Unknown operation" in result.output

    def test_roots(self, runner):
        result = runner.invoke(cli, ["roots", "1", "-3", "2"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["(2, 0)", "(1, 0)"]

    def test_stats(self, runner):
        result = runner.invoke(cli, ["stats", "1", "2", "3", "4"])
        assert result.exit_code == 0
        assert "Median: 2.5000" in result.output

    def test_stats_negative_values(self, runner):
        result = runner.invoke(cli, ["stats", "-1", "-3", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["min"] == -3.0

    def test_stats_json(self, runner):
        result = runner.invoke(cli, ["stats", "--json", "1", "3"])
        assert result.exit_code == 0
        assert json.loads(result.output)["mean"] == 2.0

    def test_stats_single_value(self, runner):
        result = runner.invoke(cli, ["stats", "5"])
        assert result.exit_code == 1
        assert "At least two values" in result.output

    def test_fib(self, runner):
        result = runner.invoke(cli, ["fib", "5"])
        assert result.output.strip() == "0, 1, 1, 2, 3"

    def test_fib_zero(self, runner):
        result = runner.invoke(cli, ["fib", "0"])
        assert result.exit_code == 1

    def test_factorial(self, runner):
        result = runner.invoke(cli, ["factorial", "0"])
        assert result.output.strip() == "1"

    def test_matmul(self, runner, tmp_path):
        left = tmp_path / "a.json"
        right = tmp_path / "b.json"
        left.write_text(json.dumps({"rows": 1, "columns": 2, "data": [[1, 2]]}))
        right.write_text(json.dumps({"rows": 2, "columns": 1, "data": [[3], [4]]}))

        result = runner.invoke(cli, ["matmul", str(left), str(right)])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "11.00"

        result = runner.invoke(cli, ["matmul", "--json", str(left), str(right)])
        assert json.loads(result.output) == {"rows": 1, "columns": 1, "data": [[11.0]]}

    def test_matmul_dimension_mismatch(self, runner, tmp_path):
        payload = tmp_path / "a.json"
        payload.write_text(json.dumps({"rows": 1, "columns": 2, "data": [[1, 2]]}))

        result = runner.invoke(cli, ["matmul", str(payload), str(payload)])
        assert result.exit_code == 1
        assert "incompatible for multiplication" in result.output

    def test_matmul_contract_violation(self, runner, tmp_path):
        payload = tmp_path / "a.json"
        payload.write_text(json.dumps({"rows": 1, "data": [[1]]}))

        result = runner.invoke(cli, ["matmul", str(payload), str(payload)])
        assert result.exit_code == 1
        assert "Contract violation" in result.output


# =============================================================================
# ТЕСТЫ: Logging
# =============================================================================


class TestLogging:
    """Тесты configure_logging."""

    def test_single_handler_on_repeat(self):
        configure_logging("INFO")
        logger = configure_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_plain_formatter(self):
        logger = configure_logging(logging.INFO, color=False)
        assert not isinstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")
