# topmark:header:start
#
#   project      : UIStream
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the UIStream test suite.

This file sets up global fixtures, typed pytest wrappers and small tree
builders shared by the test modules.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `uistream.config.MutableConfig` (mutable), then
      `freeze()` into a `uistream.config.Config` for the `Engine`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from uistream.config import MutableConfig
from uistream.config import logging as uistream_logging
from uistream.streaming.patch import element_path
from uistream.tree.model import UIElement, UITree

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from uistream.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_uistream_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure UIStream's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    UISTREAM_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(uistream_logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    uistream_logging.setup_logging(level=uistream_logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an isolated temporary project directory.

    The directory declares ``root = true`` so configuration discovery never
    walks into the developer's own project files.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "uistream.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


# ------------------------------ Config helpers ------------------------------


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = make_mutable_config(**overrides)
    return m.freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder from the packaged defaults with ``overrides`` applied.

    Args:
        **overrides (Any): Keyword overrides to apply to the mutable builder.

    Returns:
        MutableConfig: A mutable configuration object ready to be frozen or further edited.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


# ------------------------------- Tree helpers -------------------------------


def el(
    key: str,
    type_: str,
    kids: Sequence[str] | None = None,
    *,
    parent: str | None = None,
    action: str | None = None,
    **props: Any,
) -> UIElement:
    """Build a `UIElement` tersely.

    ``kids`` are the structural child keys. Props are passed as keyword
    arguments (``children=`` is the text prop); use ``**{"aria-label": ...}`` for
    names that are not identifiers.
    """
    record: dict[str, Any] = {"type": type_, "props": props}
    if kids is not None:
        record["children"] = list(kids)
    if parent is not None:
        record["parentKey"] = parent
    if action is not None:
        record["action"] = {"name": action}
    element = UIElement.from_value(record, key=key)
    assert element is not None
    return element


def tree_of(root: str, *elements: UIElement) -> UITree:
    """Build a `UITree` from a root key and elements."""
    return UITree(root=root, elements={e.key: e for e in elements})


def add_line(path: str, value: Any) -> str:
    """Return one ``add`` patch line (with newline)."""
    return json.dumps({"op": "add", "path": path, "value": value}) + "\n"


def stream_for(tree: UITree) -> str:
    """Return a JSONL stream that builds ``tree``: root first, then each element."""
    lines = [add_line("/root", tree.root)]
    lines.extend(add_line(element_path(e.key), e.to_dict()) for e in tree)
    return "".join(lines)


def keys_of(elements: Iterable[UIElement]) -> list[str]:
    """Return the keys of ``elements`` in order."""
    return [e.key for e in elements]
