"""Tests for the command line entry point."""

from pathlib import Path

import pytest
from structlog.testing import capture_logs

from callertrace.__main__ import describe_symbol, main, parse_args, run
from callertrace.utils.logging import LogEventNames


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        """Test defaults leave config-driven settings unset."""
        args = parse_args([])

        assert args.config is None
        assert args.verb is None
        assert args.skip is None
        assert not args.long
        assert args.symbols == []

    def test_rejects_unknown_verb(self) -> None:
        """Test verbs are limited to the rendered set."""
        with pytest.raises(SystemExit):
            parse_args(["--verb", "x"])


class TestDescribeSymbol:
    """Test symbol description lines."""

    @pytest.mark.parametrize(
        ("symbol", "want"),
        [
            ("F", "F\t\t"),
            ("a.F", "F\ta\ta"),
            ("example.com/sample/a.F", "F\texample.com/sample/a\ta"),
            ("example.com/sample/a.F.G.func1", "F.G.func1\texample.com/sample/a\ta"),
        ],
    )
    def test_describe_symbol(self, symbol: str, want: str) -> None:
        """Test each symbol is split into function, package path and name."""
        assert describe_symbol(symbol) == want


class TestMain:
    """Test the main entry point."""

    def test_symbols(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test symbols are described one per line."""
        code = main(["example.com/sample/a.F.G.func1", "b.G"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines() == [
            "F.G.func1\texample.com/sample/a\ta",
            "G\tb\tb",
        ]

    def test_stack_function_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the stack starts at the CLI call site."""
        code = main(["--verb", "n"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("[run main TestMain.test_stack_function_names ")
        assert out.rstrip().endswith("]")

    def test_stack_long_package(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --long renders package paths."""
        main(["--verb", "P", "--long"])

        out = capsys.readouterr().out
        assert out.startswith("[callertrace/__main__ callertrace/__main__ ")

    def test_stack_skip(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --skip hides frames above the call site."""
        main(["--verb", "n", "--skip", "2"])

        out = capsys.readouterr().out
        assert out.startswith("[TestMain.test_stack_skip ")

    def test_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test format and capture settings come from the config file."""
        path = tmp_path / "config.yaml"
        path.write_text("capture:\n  max_depth: 2\nformat:\n  verb: n\n")

        code = main(["-c", str(path)])

        assert code == 0
        assert capsys.readouterr().out == "[run main]\n"

    def test_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a missing config file exits with 1."""
        code = main(["-c", str(tmp_path / "missing.yaml")])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_invalid_config(self, tmp_path: Path) -> None:
        """Test an invalid config file exits with 1."""
        path = tmp_path / "config.yaml"
        path.write_text("format:\n  verb: q\n")

        assert main(["-c", str(path)]) == 1


class TestRunEvents:
    """Test lifecycle events logged by run."""

    @pytest.mark.parametrize("argv", [["a.F"], ["--verb", "n"]])
    def test_start_and_finish_logged(
        self, argv: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test every successful run is bracketed by start and finish events."""
        with capture_logs() as logs:
            code = run(parse_args(argv))

        capsys.readouterr()
        events = [entry["event"] for entry in logs]
        assert code == 0
        assert events[0] == LogEventNames.CLI_STARTING
        assert events[-1] == LogEventNames.CLI_FINISHED

    def test_finish_not_logged_on_error(self, tmp_path: Path) -> None:
        """Test a configuration error ends the run without the finish event."""
        with capture_logs() as logs:
            code = run(parse_args(["-c", str(tmp_path / "missing.yaml")]))

        events = [entry["event"] for entry in logs]
        assert code == 1
        assert LogEventNames.CONFIG_NOT_FOUND in events
        assert LogEventNames.CLI_FINISHED not in events
