"""Tests for the interactive menu."""

import io

import numpy as np
import pytest

from Fixedvec.cli import CliConfig, TokenReader, main, parse_args, run_menu

INT_CONFIG = CliConfig(dtype=np.dtype(np.int64))


def run(stdin: str, config: CliConfig = CliConfig()) -> tuple[int, str]:
    out = io.StringIO()
    code = run_menu(config, io.StringIO(stdin), out)
    return code, out.getvalue()


class TestMenu:

    def test_add_and_subtract(self):
        code, out = run("1\n1 2 3\n4 5 6\n2\n3\n0\n")
        assert code == 0
        assert "v1 + v2 = [5.0, 7.0, 9.0]" in out
        assert "v1 - v2 = [-3.0, -3.0, -3.0]" in out
        assert "Goodbye!" in out

    def test_integer_vectors(self):
        code, out = run("1 1 2 3 4 5 6 4 2 5 2 0", INT_CONFIG)
        assert code == 0
        assert "v1 * scalar = [2, 4, 6]" in out
        assert "v2 * scalar = [8, 10, 12]" in out
        assert "v1 / scalar = [0, 1, 1]" in out
        assert "v2 / scalar = [2, 2, 3]" in out

    def test_scalar_promotes(self):
        _, out = run("1 1 2 3 4 5 6 4 2.5 0", INT_CONFIG)
        assert "v1 * scalar = [2.5, 5.0, 7.5]" in out

    def test_division_by_zero_continues(self):
        code, out = run("1 1 2 3 4 5 6 5 0 6 0", INT_CONFIG)
        assert code == 0
        assert "Error: integer division by zero" in out
        assert "v1 / scalar" not in out
        assert "Vector 1: [1, 2, 3]" in out
        assert "Vector 2: [4, 5, 6]" in out

    def test_float_division_by_zero(self):
        _, out = run("1 1 2 3 4 5 6 5 0 0")
        assert "v1 / scalar = [inf, inf, inf]" in out

    @pytest.mark.parametrize("choice", ["2", "3", "4", "5", "6"])
    def test_requires_input_first(self, choice):
        code, out = run(f"{choice}\n0\n")
        assert code == 0
        assert "Please enter the vectors first!" in out

    def test_invalid_option(self):
        _, out = run("9\nabc\n0\n")
        assert out.count("Invalid option, try again.") == 2

    def test_invalid_vector_keeps_previous(self):
        _, out = run("1 1 2 3 4 5 6 1 7 x 6 0", INT_CONFIG)
        assert "Invalid number" in out
        assert "Vector 1: [1, 2, 3]" in out

    def test_invalid_first_input(self):
        _, out = run("1 1 2 x 6 0")
        assert "Invalid number" in out
        assert "Please enter the vectors first!" in out

    def test_invalid_scalar(self):
        _, out = run("1 1 2 3 4 5 6 4 y 0")
        assert "Invalid number" in out
        assert "v1 * scalar" not in out

    def test_scalar_out_of_range_continues(self):
        code, out = run("1 1 2 3 4 5 6 4 100000000000000000000000000 6 0", INT_CONFIG)
        assert code == 0
        assert "Invalid number" in out
        assert "v1 * scalar" not in out
        assert "Vector 1: [1, 2, 3]" in out

    def test_vector_element_out_of_range(self):
        _, out = run("1 1 2 100000000000000000000000000 4 5 6 6 0", INT_CONFIG)
        assert "Invalid number" in out
        assert "Please enter the vectors first!" in out

    def test_end_of_input(self):
        assert run("")[0] == 0
        assert run("1 1 2")[0] == 0
        assert run("1 1 2 3 4 5 6 5")[0] == 0

    def test_dimension(self):
        _, out = run("1 1 2 3 4 2 0", CliConfig(dimension=2, dtype=np.dtype(np.int64)))
        assert "Enter vector 1 (2 values)" in out
        assert "v1 + v2 = [4, 6]" in out


class TestTokenReader:

    def test_across_lines(self):
        reader = TokenReader(io.StringIO("1 2\n\n  3\n"))
        assert [reader.next() for _ in range(3)] == ["1", "2", "3"]
        with pytest.raises(EOFError):
            reader.next()


class TestArguments:

    def test_defaults(self):
        config = parse_args([])
        assert config == CliConfig()
        assert config.dtype == np.float64
        assert config.dimension == 3

    def test_options(self):
        config = parse_args(["--dimension", "2", "--dtype", "int32", "--log-level", "DEBUG"])
        assert config.dimension == 2
        assert config.dtype == np.int32
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "argv", [["--dtype", "bool"], ["--dtype", "nonsense"], ["-n", "0"], ["-n", "x"]]
    )
    def test_invalid(self, argv):
        with pytest.raises(SystemExit) as excinfo:
            parse_args(argv)
        assert excinfo.value.code == 2

    def test_main(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1 1 2 3 4 5 6 2 0\n"))
        assert main(["--dtype", "int64"]) == 0
        assert "v1 + v2 = [5, 7, 9]" in capsys.readouterr().out
