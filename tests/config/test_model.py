# topmark:header:start
#
#   project      : ProblemGrab
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for configuration parsing, merging and freezing."""

from __future__ import annotations

from pathlib import Path

from problemgrab.config.model import CLI_OVERRIDE_STR, ModuleConfig, MutableConfig, OutputTarget
from problemgrab.constants import DEFAULT_CONTEXT_RADIUS
from problemgrab.pipeline.categories import DEFAULT_EXCLUDED_CATEGORIES

PROJECT_TOML = """\
project_name = "Demo"
context_radius = 5
excluded_categories = ["Noisy"]
exclude = ["build/"]

[output]
target = "file"
path = "reports/problems.md"

[[modules]]
name = "app"
source_roots = ["src", "tests"]

[[modules]]
name = "scripts"
"""


def test_defaults_freeze(tmp_path: Path) -> None:
    draft = MutableConfig.from_defaults()
    draft.project_root = tmp_path
    config = draft.freeze()
    assert config.project_root == tmp_path.resolve()
    assert config.project_name == tmp_path.resolve().name
    assert config.context_radius == DEFAULT_CONTEXT_RADIUS
    assert config.excluded_categories == DEFAULT_EXCLUDED_CATEGORIES
    assert config.output_target is OutputTarget.CLIPBOARD
    assert config.output_path == tmp_path.resolve() / "problems.md"
    assert config.modules == ()
    assert not config.has_errors


def test_from_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "problemgrab.toml"
    path.write_text(PROJECT_TOML, encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.config_files == [path]
    assert draft.project_name == "Demo"
    assert draft.context_radius == 5
    assert draft.exclude_patterns == ["build/"]
    assert draft.output_target is OutputTarget.FILE
    assert draft.output_path == str(tmp_path / "reports/problems.md")
    assert draft.modules == [
        ModuleConfig("app", ("src", "tests")),
        ModuleConfig("scripts", (".",)),
    ]

    config = draft.freeze()
    assert "Noisy" in config.excluded_categories
    assert DEFAULT_EXCLUDED_CATEGORIES <= config.excluded_categories


def test_pyproject_uses_tool_table(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(pyproject) is None

    pyproject.write_text('[tool.problemgrab]\nproject_name = "FromPyproject"\n', encoding="utf-8")
    draft = MutableConfig.from_toml_file(pyproject)
    assert draft is not None
    assert draft.project_name == "FromPyproject"


def test_replace_default_categories(tmp_path: Path) -> None:
    draft = MutableConfig.from_toml_dict(
        {"excluded_categories": ["OnlyThis"], "replace_default_categories": True}
    )
    draft.project_root = tmp_path
    assert draft.freeze().excluded_categories == frozenset({"OnlyThis"})


def test_negative_radius_is_an_error() -> None:
    draft = MutableConfig.from_toml_dict({"context_radius": -1}, config_file=Path("x.toml"))
    assert draft.context_radius is None
    (diag,) = draft.diagnostics
    assert "context_radius must be >= 0" in diag.message
    assert draft.freeze().has_errors


def test_invalid_module_entries_are_reported() -> None:
    draft = MutableConfig.from_toml_dict({"modules": [{"source_roots": ["a"]}, "x"]})
    assert draft.modules == []
    assert len(draft.diagnostics) == 2


def test_merge_with_last_wins_and_categories_accumulate() -> None:
    base = MutableConfig.from_toml_dict(
        {"project_name": "A", "context_radius": 1, "excluded_categories": ["X"]}
    )
    top = MutableConfig.from_toml_dict({"project_name": "B", "excluded_categories": ["Y", "X"]})
    merged = base.merge_with(top)
    assert merged.project_name == "B"
    assert merged.context_radius == 1
    assert merged.excluded_categories == ["X", "Y"]

    replacing = MutableConfig.from_toml_dict(
        {"excluded_categories": ["Z"], "replace_default_categories": True}
    )
    assert merged.merge_with(replacing).excluded_categories == ["Z"]


def test_load_merged_orders_layers(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.problemgrab]\nproject_name = "py"\ncontext_radius = 7\n', encoding="utf-8"
    )
    (tmp_path / "problemgrab.toml").write_text('project_name = "own"\n', encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text("context_radius = 1\n", encoding="utf-8")

    draft = MutableConfig.load_merged(project_root=tmp_path, extra_config_files=[extra])
    assert draft.project_name == "own"
    assert draft.context_radius == 1
    assert [Path(p).name for p in draft.config_files] == [
        "pyproject.toml",
        "problemgrab.toml",
        "extra.toml",
    ]

    bare = MutableConfig.load_merged(project_root=tmp_path, no_config=True)
    assert bare.project_name is None
    assert bare.context_radius == DEFAULT_CONTEXT_RADIUS


def test_apply_cli_args_overrides(tmp_path: Path) -> None:
    draft = MutableConfig.load_merged(project_root=tmp_path)
    draft.apply_cli_args(
        {
            "project_name": "cli",
            "context_radius": 0,
            "output_target": "stdout",
            "output_path": None,
        }
    )
    config = draft.freeze()
    assert (config.project_name, config.context_radius) == ("cli", 0)
    assert config.output_target is OutputTarget.STDOUT
    assert config.config_files[-1] == CLI_OVERRIDE_STR


def test_thaw_round_trips(tmp_path: Path) -> None:
    draft = MutableConfig.from_toml_dict({"excluded_categories": ["Extra"]})
    draft.project_root = tmp_path
    config = draft.freeze()
    assert config.thaw().freeze() == config


def test_default_excludes_skip_tool_directories_and_accumulate(tmp_path: Path) -> None:
    draft = MutableConfig.load_merged(project_root=tmp_path, no_config=True)
    assert {".git/", ".venv/", "node_modules/"} <= set(draft.freeze().exclude_patterns)

    merged = draft.merge_with(MutableConfig.from_toml_dict({"exclude": ["build/", ".git/"]}))
    assert merged.exclude_patterns == [".git/", ".venv/", "node_modules/", "build/"]
