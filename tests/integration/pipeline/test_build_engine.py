from __future__ import annotations

"""
Integration tests for the Build Engine.

Runs complete builds over on-disk documentation trees with the real
Markdown renderer and HTML output sink.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from docscompiler.core.pipeline.engine import run_build


@pytest.fixture
def project(tmp_path: Path, write_tree, guide_site: Path) -> Path:
    """Reference docs tree plus a C# code sample and a guide image."""
    write_tree(tmp_path / "code-samples", {
        "Basic.cs": "#region hello\nConsole.WriteLine(\"hi\");\n#endregion\n",
    })
    (guide_site / "guide" / "intro.DotNet.markdown").write_text(
        "# Intro\n\n{CODE hello@Basic.cs /}\n\n![Shot](images/shot.png)\n", encoding="utf-8"
    )
    (guide_site / "guide" / "images").mkdir()
    (guide_site / "guide" / "images" / "shot.png").write_bytes(b"\x89PNG")
    return tmp_path


def test_full_build_writes_site(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    result = run_build(mock_config_dict)

    assert result.ok is True
    assert result.error == ""
    site = Path(result.output_path)

    dotnet = (site / "guide" / "DotNet" / "intro.html").read_text(encoding="utf-8")
    assert "<h1>Intro</h1>" in dotnet
    assert '<pre class="brush: csharp">' in dotnet
    assert "Console.WriteLine(&quot;hi&quot;);" in dotnet
    assert 'src="/guide/images/shot.png"' in dotnet

    java = (site / "guide" / "Java" / "intro.html").read_text(encoding="utf-8")
    assert "Intro for Java" in java

    http = (site / "guide" / "Http" / "intro.html").read_text(encoding="utf-8")
    assert "Missing for HTTP." in http
    assert 'href="/guide/DotNet/intro.html"' in http
    assert 'href="/guide/Java/intro.html"' in http
    assert "<p><ul>" not in http

    assert (site / "guide" / "images" / "shot.png").read_bytes() == b"\x89PNG"


def test_summary_counters(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    result = run_build(mock_config_dict)

    summary = result.summary
    assert summary["documents"] == 2
    assert summary["fallbacks"] == 1
    assert summary["images"] == 1
    assert summary["index_pages"] == 0
    assert summary["languages"] == ["DotNet", "Http", "Java"]
    assert summary["tree_folders"] == 1
    assert summary["tree_documents"] == 3
    assert sorted(summary["generated_files"]) == [
        "guide/DotNet/intro.html", "guide/Http/intro.html", "guide/Java/intro.html",
    ]


def test_navigation_index(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    result = run_build(mock_config_dict)

    nav = json.loads(Path(result.navigation_path).read_text(encoding="utf-8"))
    guide = nav[0]
    assert guide["slug"] == "guide"
    assert [c["url"] for c in guide["children"]] == [
        "/guide/DotNet/intro.html", "/guide/Http/intro.html", "/guide/Java/intro.html",
    ]


def test_navigation_can_be_disabled(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    mock_config_dict["write_navigation"] = False

    result = run_build(mock_config_dict)

    assert result.navigation_path == ""
    assert not (Path(result.output_path) / "navigation.json").exists()


def test_tree_preview(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    mock_config_dict["print_tree"] = True

    result = run_build(mock_config_dict)

    assert result.tree_lines[0] == "Test Docs"
    assert result.tree_lines[1] == "└── guide/ (multilanguage)"
    assert "intro [Http] - Introduction" in result.tree_lines[3]


def test_legacy_mode_builds_index(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    (project / "docs" / "index.markdown").write_text("# Welcome", encoding="utf-8")
    (project / "docs" / "guide" / "index.markdown").write_text("# Guide", encoding="utf-8")
    mock_config_dict["compilation_mode"] = "legacy"

    result = run_build(mock_config_dict)

    assert result.compilation_mode == "legacy"
    assert result.summary["index_pages"] == 2
    site = Path(result.output_path)
    assert "<h1>Welcome</h1>" in (site / "index.html").read_text(encoding="utf-8")
    assert "<h1>Guide</h1>" in (site / "guide" / "index.html").read_text(encoding="utf-8")


def test_missing_source_directory(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    mock_config_dict["source_path"] = str(tmp_path / "missing")

    result = run_build(mock_config_dict)

    assert result.ok is False
    assert "Invalid source directory" in result.error


def test_missing_root_manifest_gives_empty_site(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    (tmp_path / "docs").mkdir()

    result = run_build(mock_config_dict)

    assert result.ok is True
    assert result.summary["generated_files"] == []


def test_malformed_manifest_aborts_build(tmp_path: Path, write_tree, mock_config_dict: Dict[str, Any]) -> None:
    write_tree(tmp_path / "docs", {".docslist": "intro.markdown | Intro | multilanguage\n"})

    with pytest.raises(ValueError, match=r"\.docslist:1"):
        run_build(mock_config_dict)


def test_legacy_mode_missing_index_aborts(project: Path, mock_config_dict: Dict[str, Any]) -> None:
    mock_config_dict["compilation_mode"] = "legacy"

    with pytest.raises(FileNotFoundError):
        run_build(mock_config_dict)
