import subprocess
import sys

from keybench.__main__ import main


def test_main_exits_zero_and_prints_both_sections(monkeypatch, capsys):
    monkeypatch.setenv("KEYBENCH_ITERATIONS", "100")
    monkeypatch.setenv("KEYBENCH_WARMUP", "0")
    assert main() == 0
    out = capsys.readouterr().out
    report, diagnostics = out.split("\n\n")
    assert len(report.splitlines()) == 6
    assert len(diagnostics.splitlines()) == 6


def test_module_entry_point(monkeypatch):
    monkeypatch.setenv("KEYBENCH_ITERATIONS", "10")
    monkeypatch.setenv("KEYBENCH_REPEAT", "2")
    proc = subprocess.run(
        [sys.executable, "-m", "keybench"],
        capture_output=True, text=True, check=False,
    )
    assert proc.returncode == 0, proc.stderr
    lines = proc.stdout.splitlines()
    assert lines[0].startswith("literal text key: ")
    assert "n=2" in lines[0]
    assert lines[-1].startswith("Integer: ")


def test_bad_setting_falls_back_to_defaults(monkeypatch):
    monkeypatch.setenv("KEYBENCH_LOG_LEVEL", "verbose")
    proc = subprocess.run(
        [sys.executable, "-m", "keybench"],
        capture_output=True, text=True, check=False,
    )
    assert proc.returncode == 0, proc.stderr
    assert "WARNING" in proc.stderr
    assert "KEYBENCH_LOG_LEVEL is not a logging level" in proc.stderr
    assert "running with default settings" in proc.stderr
    report, diagnostics = proc.stdout.split("\n\n")
    assert len(report.splitlines()) == 6
    assert len(diagnostics.splitlines()) == 6
