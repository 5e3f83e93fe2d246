from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and file system side effects (site generation).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "docscompiler" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


@pytest.fixture
def sample_project(tmp_path: Path, guide_site: Path) -> Path:
    """Source root holding the reference docs tree under /docs."""
    return tmp_path


def test_cli_happy_path_execution(tmp_path: Path, sample_project: Path) -> None:
    """
    TC-01: Verify a standard execution produces the site (Exit Code 0).
    """
    output_dir = tmp_path / "site"

    result = run_cli(["-i", str(sample_project), "-o", str(output_dir), "--print-tree"])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert "Documentation compiled successfully." in result.stdout
    assert "Not-documented pages: 1" in result.stdout
    assert "guide/ (multilanguage)" in result.stdout

    for lang in ("DotNet", "Http", "Java"):
        assert (output_dir / "guide" / lang / "intro.html").exists(), f"Page for {lang} missing."
    assert (output_dir / "navigation.json").exists()


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """
    TC-02: Verify CLI returns error code 2 when the source path is invalid.
    """
    missing_path = tmp_path / "non_existent_folder"

    result = run_cli(["-i", str(missing_path), "-o", str(tmp_path)])

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_json_output_structure(tmp_path: Path, sample_project: Path) -> None:
    """
    TC-03: Verify structure and content of JSON output mode.
    """
    result = run_cli([
        "-i", str(sample_project),
        "-o", str(tmp_path / "site"),
        "--root-url", "https://docs.example.com/",
        "--languages", "DotNet,Java",
        "--json",
    ])
    assert result.returncode == 0, result.stderr

    try:
        data: Dict[str, Any] = json.loads(result.stdout)
    except json.JSONDecodeError:
        pytest.fail(f"Failed to decode JSON output: {result.stdout}")

    for key in ["ok", "error", "source_path", "output_path", "root_url", "summary"]:
        assert key in data, f"JSON output missing key: {key}"

    assert data["ok"] is True
    assert data["root_url"] == "https://docs.example.com/"
    assert data["summary"]["languages"] == ["DotNet", "Java"]
    assert data["summary"]["fallbacks"] == 0
    assert not (tmp_path / "site" / "guide" / "Http").exists()


def test_cli_dump_config(tmp_path: Path, sample_project: Path) -> None:
    """
    TC-04: Verify the effective configuration reflects file and flag layers.
    """
    config_file = tmp_path / "docs.json"
    config_file.write_text(json.dumps({"home_title": "From File", "root_url": "/file/"}), encoding="utf-8")

    result = run_cli([
        "-i", str(sample_project),
        "--config", str(config_file),
        "--root-url", "/flag/",
        "--legacy",
        "--dump-config",
    ])

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["home_title"] == "From File"
    assert data["root_url"] == "/flag/"
    assert data["compilation_mode"] == "legacy"
    assert not (sample_project / "site").exists()


def test_cli_build_failure_exit_code(tmp_path: Path, sample_project: Path) -> None:
    """
    TC-05: Verify a malformed manifest fails the build with exit code 1.
    """
    (sample_project / "docs" / "guide" / ".docslist").write_text("| No slug\n", encoding="utf-8")

    result = run_cli(["-i", str(sample_project), "-o", str(tmp_path / "site")])

    assert result.returncode == 1
    assert "empty slug" in result.stderr


def test_cli_help_message() -> None:
    """
    TC-06: Verify help message is displayed (smoke test for argparse).
    """
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: docscompiler" in result.stdout
    assert "--input" in result.stdout
