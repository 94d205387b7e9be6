"""Tests for the CLI interface."""
import json
import os
import subprocess
import sys
from pathlib import Path

CLI = [sys.executable, "-m", "kover"]
ROOT = Path(__file__).parent.parent

SIMPLE_SCENE = """\
begin scene
building zeta 10 10 1 1
antenna a1 5 5 3
building alpha 0 0 1 1
end scene
"""


def _run(*args: str, stdin: str = "", env: dict | None = None) -> subprocess.CompletedProcess:
    full_env = {**os.environ, "PYTHONPATH": str(ROOT / "src"), **(env or {})}
    return subprocess.run(
        [*CLI, *args],
        input=stdin, capture_output=True, text=True, cwd=str(ROOT), env=full_env,
    )


def run_cli(*args: str, stdin: str = "", env: dict | None = None) -> str:
    """Run CLI command and return stdout."""
    result = _run(*args, stdin=stdin, env=env)
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return result.stdout


def run_cli_expect_fail(*args: str, stdin: str = "", env: dict | None = None) -> subprocess.CompletedProcess:
    """Run CLI command expecting exit code 1."""
    result = _run(*args, stdin=stdin, env=env)
    assert result.returncode == 1, f"unexpected exit {result.returncode}: {result.stderr}"
    return result


class TestQueries:
    def test_summarize_empty(self):
        assert run_cli("summarize", stdin="begin scene\nend scene\n") == "An empty scene\n"

    def test_bounding_box_empty(self):
        out = run_cli("bounding-box", stdin="begin scene\nend scene\n")
        assert out == "undefined (empty scene)\n"

    def test_bounding_box(self):
        out = run_cli("bounding-box", stdin="begin scene\nbuilding b1 0 0 1 1\nend scene\n")
        assert out == "bounding box [-1, 1] x [-1, 1]\n"

    def test_describe(self):
        out = run_cli("describe", stdin=SIMPLE_SCENE)
        assert out.splitlines() == [
            "A scene with 2 buildings and 1 antenna",
            "  building alpha at 0 0 with dimensions 1 1",
            "  building zeta at 10 10 with dimensions 1 1",
            "  antenna a1 at 5 5 with range 3",
        ]


class TestErrors:
    def test_overlap(self):
        result = run_cli_expect_fail(
            "summarize",
            stdin="begin scene\nbuilding b1 0 0 2 2\nbuilding b2 3 0 2 2\nend scene\n",
        )
        assert result.stderr == "error: buildings b1 and b2 are overlapping\n"
        assert result.stdout == ""

    def test_malformed_line(self):
        result = run_cli_expect_fail(
            "describe", stdin="begin scene\nbuilding b1 0 0 1 1 extra\nend scene\n"
        )
        assert "wrong number of arguments (line #2)" in result.stderr

    def test_missing_end(self):
        result = run_cli_expect_fail("summarize", stdin="begin scene\n")
        assert "last line must be exactly 'end scene'" in result.stderr

    def test_no_subcommand(self):
        result = run_cli_expect_fail()
        assert "subcommand is mandatory" in result.stderr

    def test_unknown_subcommand(self):
        result = run_cli_expect_fail("explode", stdin="begin scene\nend scene\n")
        assert result.stderr == "error: subcommand 'explode' is not recognized\n"
        assert result.stdout == ""

    def test_extra_argument(self):
        result = run_cli_expect_fail("summarize", "extra", stdin="begin scene\nend scene\n")
        assert result.stderr == "error: subcommand is mandatory\n"

    def test_oversized_number(self):
        scene = "begin scene\nbuilding b1 1" + "0" * 5000 + " 0 1 1\nend scene\n"
        result = run_cli_expect_fail("summarize", stdin=scene)
        assert result.stderr.startswith('error: invalid integer "1000')
        assert result.stderr.endswith("(line #2)\n")
        assert "Traceback" not in result.stderr

    def test_line_length_from_env(self):
        scene = "begin scene\nbuilding b1 0 0 1 1\nend scene\n"
        result = run_cli_expect_fail(
            "summarize", stdin=scene, env={"KOVER_MAX_LINE_LENGTH": "10"}
        )
        assert "line exceeds 10 characters (line #2)" in result.stderr


class TestJson:
    def test_summary(self):
        data = json.loads(run_cli("--json", "summarize", stdin=SIMPLE_SCENE))
        assert data == {"ok": True, "summary": "A scene with 2 buildings and 1 antenna"}

    def test_bounding_box_empty(self):
        data = json.loads(run_cli("--json", "bounding-box", stdin="begin scene\nend scene\n"))
        assert data == {"ok": True, "bounding_box": None}

    def test_describe(self):
        data = json.loads(run_cli("--json", "describe", stdin=SIMPLE_SCENE))
        assert data["ok"] is True
        assert [b["id"] for b in data["buildings"]] == ["alpha", "zeta"]
        assert data["bounding_box"] == {"left": -1, "right": 11, "bottom": -1, "top": 11}

    def test_error(self):
        result = run_cli_expect_fail(
            "--json", "summarize",
            stdin="begin scene\nantenna a1 5 5 3\nantenna a2 5 5 2\nend scene\n",
        )
        data = json.loads(result.stdout)
        assert data == {
            "ok": False,
            "error": "antennas a1 and a2 have the same position",
            "line": 3,
        }


class TestHelp:
    def test_help_subcommand(self):
        out = run_cli("help")
        assert out.startswith("Usage: kover SUBCOMMAND")
        assert "bounding-box" in out

    def test_help_reads_nothing(self):
        out = run_cli("help", stdin="not a scene")
        assert "begin scene" in out

    def test_version(self):
        assert run_cli("version").startswith("kover v")
