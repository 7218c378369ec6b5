"""Tests for the command-line interface."""
import sys
import pytest
from src import app


def test_render_right_aligns_displays():
    lines = app.render("25 +", "15").split("\n")
    assert len(lines) == 2
    assert lines[0].endswith("25 +")
    assert lines[1].endswith("15")
    assert len(lines[0]) == len(lines[1])


def test_run_keys_prints_both_displays(capsys):
    assert app.run_keys("25 + 15 =") == 0
    out = capsys.readouterr().out.split("\n")
    assert out[0].strip() == "25 + 15 ="
    assert out[1].strip() == "40"


def test_run_keys_unknown_key(capsys):
    assert app.run_keys("5 ^ 2") == 1
    assert "Unknown key" in capsys.readouterr().out


@pytest.mark.parametrize("keys", ["5 + ٣ =", "5 + ² ="])
def test_run_keys_non_ascii_digit(keys, capsys):
    assert app.run_keys(keys) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_main_one_shot(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["app", "5", "+", "3", "×", "2", "="])
    with pytest.raises(SystemExit) as exc:
        app.main()
    assert exc.value.code == 0
    assert "16" in capsys.readouterr().out


def test_main_interactive(monkeypatch, capsys):
    lines = iter(["2 5 +", "oops", "1 5 =", "q"])
    monkeypatch.setattr(sys, "argv", ["app"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    with pytest.raises(SystemExit) as exc:
        app.main()
    assert exc.value.code == 0

    out = capsys.readouterr().out
    assert "25 +" in out
    assert "Error: Unknown key: 'oops'" in out
    assert "25 + 15 =" in out
    assert out.rstrip().endswith("40")


def test_interactive_stops_at_end_of_input(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    app.interactive()
    assert capsys.readouterr().out.strip() == "0"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
