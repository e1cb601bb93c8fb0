from __future__ import annotations

import io
from pathlib import Path

import pytest

from prompted.__main__ import main, parse_cli_args
from prompted.io import ConsoleIO


def make_io(data: bytes = b"") -> ConsoleIO:
    return ConsoleIO(
        stdin=io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"),
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


def test_ask_echoes_line_without_ending() -> None:
    console = make_io(b"Ada\r\n")
    main(["ask", "Name: "], io=console)
    assert console.stdout.getvalue() == "Name: Ada\n"


def test_ask_uses_configured_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMPTED_ENCODING", "latin-1")
    console = make_io("café\n".encode("latin-1"))
    main(["ask", "Drink: "], io=console)
    assert console.stdout.getvalue() == "Drink: café\n"


def test_ask_reports_decode_failure() -> None:
    console = make_io(b"\xff\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["ask", "Name: "], io=console)
    assert excinfo.value.code == 1
    assert console.stderr.getvalue().startswith("Failed to decode line:")


def test_guess_command_plays_to_win() -> None:
    console = make_io(b"1\n")
    main(["guess", "--upper", "1"], io=console)
    assert "You win!" in console.stdout.getvalue()


def test_cylon_command_draws_requested_frames() -> None:
    console = make_io()
    main(["cylon", "--width", "3", "--delay", "0", "--cycles", "3"], io=console)
    assert console.stdout.getvalue() == " * \r  *\r * \r\n"


def test_phases_command_uses_demo_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    override = tmp_path / "demos.yaml"
    override.write_text("phases:\n  - name: load\n    seconds: 0\n", encoding="utf-8")
    monkeypatch.setenv("PROMPTED_DEMO_CONFIG", str(override))
    console = make_io()

    main(["phases"], io=console)

    assert console.stdout.getvalue() == "\r1: load\r\n"


def test_width_must_be_positive() -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_cli_args(["cylon", "--width", "0"])
    assert excinfo.value.code == 2


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        parse_cli_args([])


def test_log_level_is_case_insensitive() -> None:
    args = parse_cli_args(["--log-level", "debug", "phases"])
    assert args.log_level == "DEBUG"


def test_width_below_two_is_an_argument_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_cli_args(["cylon", "--width", "1"])
    assert excinfo.value.code == 2
    assert "Width must be at least 2" in capsys.readouterr().err


def test_cylon_width_from_demo_config_is_validated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    override = tmp_path / "demos.yaml"
    override.write_text("cylon:\n  width: 1\n", encoding="utf-8")
    monkeypatch.setenv("PROMPTED_DEMO_CONFIG", str(override))
    console = make_io()

    with pytest.raises(SystemExit) as excinfo:
        main(["cylon", "--cycles", "1", "--delay", "0"], io=console)

    assert excinfo.value.code == 2
    assert console.stderr.getvalue() == "cylon width must be at least 2, got 1\n"
    assert console.stdout.getvalue() == ""


def test_ask_with_text_only_stdin_reports_error() -> None:
    console = ConsoleIO(stdin=io.StringIO("Ada\n"), stdout=io.StringIO(), stderr=io.StringIO())
    with pytest.raises(SystemExit) as excinfo:
        main(["ask", "Name: "], io=console)
    assert excinfo.value.code == 1
    assert "byte-level stdin" in console.stderr.getvalue()
    assert console.stdout.getvalue() == ""
