"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def state_dir(tmp_path):
    """Isolated history/progress location for each test."""
    return tmp_path


def run_cli_command(command: list[str], state_dir: Path, timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        command: Arguments after 'python -m wordquest'
        state_dir: Directory holding history.json and progress.json
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    env = {
        **os.environ,
        "HISTORY_PATH": str(state_dir / "history.json"),
        "PROGRESS_PATH": str(state_dir / "progress.json"),
        "PYTHONIOENCODING": "utf-8",
        "COLUMNS": "200",
    }

    result = subprocess.run(
        [sys.executable, "-m", "wordquest", *command],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout,
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self, state_dir):
        """Main help should display without errors."""
        code, stdout, stderr = run_cli_command(["--help"], state_dir)

        assert code == 0, f"Help failed: {stderr}"
        assert "wordquest" in stdout.lower()
        assert "session" in stdout

    @pytest.mark.parametrize("command", ["categories", "session", "answer", "next-review", "practice"])
    def test_command_help(self, state_dir, command):
        code, stdout, stderr = run_cli_command([command, "--help"], state_dir)

        assert code == 0, f"{command} help failed: {stderr}"


class TestCLICommands:
    def test_categories(self, state_dir):
        code, stdout, stderr = run_cli_command(["categories"], state_dir)

        assert code == 0, f"Categories failed: {stderr}"
        assert "animals" in stdout

    def test_session(self, state_dir):
        code, stdout, stderr = run_cli_command(["session", "-c", "animals", "--seed", "1"], state_dir)

        assert code == 0, f"Session failed: {stderr}"
        assert "fresh_exploration" in stdout
        assert "butterfly" in stdout

    def test_session_forced_strategy(self, state_dir):
        code, stdout, stderr = run_cli_command(
            ["session", "--strategy", "cross_category", "--seed", "1"], state_dir
        )

        assert code == 0, f"Session failed: {stderr}"
        assert "cross_category" in stdout

    def test_answer_persists(self, state_dir):
        code, stdout, stderr = run_cli_command(["answer", "1", "--incorrect"], state_dir)

        assert code == 0, f"Answer failed: {stderr}"
        progress = json.loads((state_dir / "progress.json").read_text(encoding="utf-8"))
        history = json.loads((state_dir / "history.json").read_text(encoding="utf-8"))
        assert progress["forgottenWords"] == [1]
        assert history["records"][0]["wordId"] == 1
        assert history["records"][0]["consecutiveCorrect"] == 0

    def test_answer_unknown_word(self, state_dir):
        code, stdout, stderr = run_cli_command(["answer", "99999"], state_dir)

        assert code == 1
        assert "99999" in stdout

    def test_next_review(self, state_dir):
        code, stdout, stderr = run_cli_command(
            ["next-review", "1", "--correct", "--accuracy", "95"], state_dir
        )

        assert code == 0, f"Next review failed: {stderr}"
        assert "7.5 days" in stdout

    def test_practice_after_mistake(self, state_dir):
        run_cli_command(["answer", "2", "--incorrect"], state_dir)

        code, stdout, stderr = run_cli_command(["practice"], state_dir)

        assert code == 0, f"Practice failed: {stderr}"
        assert "dolphin" in stdout
