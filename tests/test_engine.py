# topmark:header:start
#
#   project      : UIStream
#   file         : test_engine.py
#   file_relpath : tests/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Engine` facade and its injected registries."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from tests.conftest import el, make_config, stream_for, tree_of
from uistream.config.errors import CatalogError, ConfigError
from uistream.config.model import Config
from uistream.engine import Engine
from uistream.grading.report import StructuralRule
from uistream.validation import ElementOutcome

if TYPE_CHECKING:
    from pathlib import Path

CHART_CATALOG = """
[components.Chart]
required = ["series"]

[components.Chart.props.kind]
kind = "enum"
values = ["bar", "line"]

[coercions."Chart.kind"]
bars = "bar"
"""


def _chart_engine(tmp_path: Path) -> Engine:
    path = tmp_path / "charts.toml"
    path.write_text(textwrap.dedent(CHART_CATALOG), encoding="utf-8")
    return Engine.from_config(Config(catalog_path=path))


def test_default_engine_uses_packaged_catalog() -> None:
    engine = Engine.from_config()
    assert engine.registry.is_known("Stack")
    assert len(engine.coercions) > 0
    assert len(engine.passes) == 9


def test_engines_with_different_catalogs_coexist(tmp_path: Path) -> None:
    charts = _chart_engine(tmp_path)
    default = Engine.from_config()

    assert charts.registry.is_known("Chart")
    assert not charts.registry.is_known("Stack")
    assert default.registry.is_known("Stack")
    assert not default.registry.is_known("Chart")


def test_engine_coerces_with_its_own_table(tmp_path: Path) -> None:
    charts = _chart_engine(tmp_path)

    check = charts.check_element(el("c", "Chart", kind="bars", series=[1, 2]))

    assert check.outcome is ElementOutcome.VALID
    assert check.element.props["kind"] == "bar"


def test_engine_repairs_and_rejects(tmp_path: Path) -> None:
    charts = _chart_engine(tmp_path)

    repaired = charts.check_element(el("c", "Chart", kind="pie", series=[1]))
    invalid = charts.check_element(el("c", "Chart", kind="bar"))

    assert repaired.outcome is ElementOutcome.REPAIRED
    assert repaired.stripped == ("kind",)
    assert "kind" not in repaired.element.props
    assert invalid.outcome is ElementOutcome.INVALID
    assert not invalid.renderable


def test_check_is_memoized_per_element_instance() -> None:
    engine = Engine.from_config()
    element = el("b", "Badge", variant="success")
    assert engine.check_element(element) is engine.check_element(element)


def test_parse_then_grade_with_configured_limits() -> None:
    chain = [el(f"n{i}", "Stack", [f"n{i + 1}"]) for i in range(4)]
    chain.append(el("n4", "Stack"))
    stream = stream_for(tree_of("n0", *chain))

    engine = Engine.from_config(make_config(max_depth=2))
    report = engine.grade(engine.parse([stream]))

    depth = report.get(StructuralRule.DEPTH_LIMIT.key)
    assert depth is not None
    assert depth.violations == ("n3: depth 3 exceeds max 2", "n4: depth 4 exceeds max 2")


def test_custom_types_are_known_to_the_grader() -> None:
    tree = tree_of(
        "main",
        el("main", "Surface", ["stack"]),
        el("stack", "Stack", ["m"]),
        el("m", "Map"),
    )

    assert not Engine.from_config().grade(tree).all_pass
    assert Engine.from_config(make_config(custom_types=["Map"])).grade(tree).all_pass


def test_missing_catalog_file_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read file"):
        Engine.from_config(Config(catalog_path=tmp_path / "absent.toml"))


def test_malformed_catalog_is_a_catalog_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("components = 3\n", encoding="utf-8")
    with pytest.raises(CatalogError, match=r"\[components\] must be a table"):
        Engine.from_config(Config(catalog_path=path))


def test_sessions_are_independent() -> None:
    engine = Engine.from_config()
    first, second = engine.session(), engine.session()
    first.feed('{"op":"add","path":"/root","value":"a"}\n')
    assert first.tree.root == "a"
    assert second.tree.root == ""
