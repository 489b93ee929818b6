"""
Integration tests for the calculator shell.

Tests:
- Dispatch table and evaluate()
- Interactive loop (prompted and inline operands, errors, quit)
- Demonstration routine
- Command line entry point
- Logging setup
"""

import io
import logging

import pytest
from bignum.exceptions import (
    BigNumError, DivisionByZeroError, InvalidLiteralError, NoInverseError,
    UnknownOperationError,
)
from bignum.logging_config import setup_logging, get_logger
from bignum.main import main
from bignum.shell.calculator import Calculator, OPERATIONS, evaluate, get_operation
from bignum.shell.demo import demonstrate


def scripted(lines):
    """input() replacement that replays lines, then signals end of input."""
    it = iter(lines)

    def _input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


def run_calculator(lines):
    output = []
    calc = Calculator(input_fn=scripted(lines), output_fn=output.append)
    count = calc.run()
    return calc, output, count


@pytest.fixture
def reset_logging():
    yield
    logger = logging.getLogger("bignum")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)


class TestEvaluate:
    """Tests for the request/response surface."""

    def test_all_operations_registered(self):
        assert set(OPERATIONS) == {'+', '-', '*', '/', '%', 'addmod', 'mulmod', 'inverse', 'pow'}

    def test_arity(self):
        assert get_operation('+').arity == 2
        assert get_operation('pow').arity == 3
        assert get_operation('inverse').arity == 2

    def test_binary_operations(self):
        assert evaluate('+', '12345678901234567890', '98765432109876543210') == "111111111011111111100"
        assert evaluate('-', '98765432109876543210', '12345678901234567890') == "86419753208641975320"
        assert evaluate('*', '-12', '12') == "-144"
        assert evaluate('/', '-7', '2') == "-3"
        assert evaluate('%', '-7', '2') == "1"

    def test_modular_operations(self):
        assert evaluate('addmod', '5', '9', '7') == "0"
        assert evaluate('mulmod', '5', '9', '7') == "3"
        assert evaluate('pow', '2', '10', '1000') == "24"
        assert evaluate('inverse', '3', '10') == "7"

    def test_operands_stripped(self):
        assert evaluate('+', ' 1 ', '2\n') == "3"

    def test_unknown_operation(self):
        with pytest.raises(UnknownOperationError) as excinfo:
            evaluate('sqrt', '4')
        assert 'pow' in excinfo.value.context['available']

    def test_wrong_operand_count(self):
        with pytest.raises(BigNumError):
            evaluate('pow', '2', '10')

    def test_malformed_operand_rejected(self):
        with pytest.raises(InvalidLiteralError):
            evaluate('+', '12a', '1')

    def test_arithmetic_errors_propagate(self):
        with pytest.raises(DivisionByZeroError):
            evaluate('/', '5', '0')
        with pytest.raises(NoInverseError):
            evaluate('inverse', '7', '14')


class TestCalculatorLoop:
    """Tests for the interactive loop."""

    def test_prompted_operands(self):
        _, output, count = run_calculator(["+", "2", "3", "quit"])
        assert "Result: 5" in output
        assert count == 1

    def test_inline_operands(self):
        _, output, _ = run_calculator(["pow 2 10 1000", "exit"])
        assert "Result: 24" in output

    def test_error_reported_and_loop_continues(self):
        """A failing command is reported and the next one still runs."""
        calc, output, count = run_calculator(["/", "5", "0", "*", "6", "7", "quit"])
        assert "Error: Division by zero" in output
        assert "Result: 42" in output
        assert count == 2
        assert calc.history[0][1] == "Error: Division by zero"

    def test_no_inverse_reported(self):
        _, output, _ = run_calculator(["inverse 7 14"])
        assert any(line.startswith("Error: Modular inverse doesn't exist") for line in output)

    def test_unknown_operation_lists_available(self):
        _, output, _ = run_calculator(["sqrt", "quit"])
        assert "Unknown operation. Available: +, -, *, /, %, addmod, mulmod, inverse, pow" in output

    def test_blank_lines_ignored(self):
        _, _, count = run_calculator(["", "   ", "quit"])
        assert count == 0

    def test_end_of_input_stops(self):
        """EOF while prompting for an operand ends the loop."""
        _, output, count = run_calculator(["+", "2"])
        assert count == 0
        assert not any(line.startswith("Result") for line in output)

    def test_failure_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger="bignum")
        run_calculator(["% 1 0"])
        records = [r for r in caplog.records if r.getMessage() == "command failed"]
        assert records
        assert records[0].extra_info['operation'] == '%'
        assert records[0].extra_info['error'] == 'DivisionByZeroError'


class TestDemo:
    """Tests for the demonstration routine."""

    def test_demo_sections(self):
        output = []
        demonstrate(output.append)
        text = "\n".join(output)
        assert "a + b = 111111111011111111100" in text
        assert "b - a = 86419753208641975320" in text
        assert f"a * b = {12345678901234567890 * 98765432109876543210}" in text
        assert "Bit length: 512 bits" in text
        assert f"Inverse of 123 mod 1009 = {pow(123, -1, 1009)}" in text
        assert "Verification: (123 * " in text and ") mod 1009 = 1" in text
        assert f"12345^67890 mod 1000000009 = {pow(12345, 67890, 1000000009)}" in text


class TestMain:
    """Tests for the command line entry point."""

    def test_eval(self, capsys, reset_logging):
        assert main(["--eval", "+", "2", "3"]) == 0
        assert capsys.readouterr().out.strip() == "5"

    def test_eval_negative_operand(self, capsys, reset_logging):
        assert main(["--eval", "-", "-5", "3"]) == 0
        assert capsys.readouterr().out.strip() == "-8"

    def test_eval_error(self, capsys, reset_logging):
        assert main(["--eval", "/", "5", "0"]) == 1
        assert "Error: Division by zero" in capsys.readouterr().err

    def test_demo_only(self, capsys, reset_logging):
        assert main(["--demo-only"]) == 0
        out = capsys.readouterr().out
        assert "BigNum Library for Public Key Cryptosystems" in out
        assert "Bit length: 512 bits" in out
        assert "Interactive mode" not in out

    def test_interactive_without_demo(self, capsys, monkeypatch, reset_logging):
        monkeypatch.setattr("builtins.input", scripted(["mulmod 5 9 7", "quit"]))
        assert main(["--no-demo"]) == 0
        out = capsys.readouterr().out
        assert "Result: 3" in out
        assert "Basic Operations" not in out


class TestLogging:
    """Tests for logging configuration."""

    def test_structured_extra_rendered(self, reset_logging):
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        get_logger("bignum.test").debug("hello", extra={'digits': 12})
        assert "[bignum.test] hello | digits=12" in stream.getvalue()

    def test_pow_mod_debug_log(self, reset_logging):
        from bignum.core_math.bigint import BigInteger

        stream = io.StringIO()
        setup_logging(logging.DEBUG, stream=stream)
        BigInteger(2).pow_mod(BigInteger(10), BigInteger(1000))
        assert "pow_mod | exponent_digits=2 | modulus_digits=4" in stream.getvalue()

    def test_quiet_by_default(self, reset_logging):
        stream = io.StringIO()
        setup_logging(stream=stream)
        evaluate('+', '1', '1')
        assert stream.getvalue() == ""

    def test_log_file(self, tmp_path, reset_logging):
        log_file = tmp_path / "bignum.log"
        setup_logging("INFO", log_file=log_file, stream=io.StringIO())
        evaluate('*', '6', '7')
        logging.getLogger("bignum").handlers[-1].flush()
        assert "operation=*" in log_file.read_text(encoding="utf-8")

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
