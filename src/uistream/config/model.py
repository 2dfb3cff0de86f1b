# topmark:header:start
#
#   project      : UIStream
#   file         : model.py
#   file_relpath : src/uistream/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable builder and immutable runtime configuration.

`MutableConfig` collects values from the packaged defaults, project files and
explicit overrides (``None`` means "inherit"), then `MutableConfig.freeze`
produces the immutable `Config` consumed by the engine, graders and CLI.

Merge order (lowest to highest precedence):
    1) Packaged defaults (``uistream-default.toml``)
    2) Project configs discovered upward, root-most first; within a directory
       ``pyproject.toml`` (``[tool.uistream]``) before ``uistream.toml``
    3) Extra config files passed explicitly (``--config``), in order
    4) Programmatic overrides
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from uistream.config.errors import ConfigError
from uistream.config.io.loaders import load_config_file, load_defaults_dict
from uistream.config.keys import Toml
from uistream.config.logging import get_logger
from uistream.constants import (
    MAX_DEPTH,
    PYPROJECT_TOML_NAME,
    SIMPLE_LAYOUT_MAX_ELEMENTS,
    TRAVERSAL_LIMIT,
    UISTREAM_TOML_NAME,
)
from uistream.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from uistream.normalize.names import PassName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.config.io.types import TomlTable
    from uistream.config.logging import UIStreamLogger

logger: UIStreamLogger = get_logger(__name__)

_KNOWN_SECTIONS: dict[str, frozenset[str]] = {
    Toml.SECTION_LIMITS: frozenset(
        {Toml.KEY_MAX_DEPTH, Toml.KEY_TRAVERSAL_LIMIT, Toml.KEY_SIMPLE_LAYOUT_MAX_ELEMENTS}
    ),
    Toml.SECTION_CATALOG: frozenset({Toml.KEY_CATALOG_PATH, Toml.KEY_CUSTOM_TYPES}),
    Toml.SECTION_NORMALIZE: frozenset({Toml.KEY_DISABLED_PASSES}),
}


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        max_depth (int): Deepest nesting level accepted by the depth rule.
        traversal_limit (int): Depth at which traversal stops descending.
        simple_layout_max_elements (int): Element count below which a responsive
            Grid is not required.
        catalog_path (Path | None): Schema catalog file, None for the packaged one.
        custom_types (tuple[str, ...]): Extra accepted component types.
        disabled_passes (tuple[PassName, ...]): Normalization passes to skip.
        config_files (tuple[Path, ...]): Files merged into this snapshot.
        diagnostics (FrozenDiagnosticLog): Warnings collected while loading.
    """

    max_depth: int = MAX_DEPTH
    traversal_limit: int = TRAVERSAL_LIMIT
    simple_layout_max_elements: int = SIMPLE_LAYOUT_MAX_ELEMENTS
    catalog_path: Path | None = None
    custom_types: tuple[str, ...] = ()
    disabled_passes: tuple[PassName, ...] = ()
    config_files: tuple[Path, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            max_depth=self.max_depth,
            traversal_limit=self.traversal_limit,
            simple_layout_max_elements=self.simple_layout_max_elements,
            catalog_path=self.catalog_path,
            custom_types=list(self.custom_types),
            disabled_passes=[p.key for p in self.disabled_passes],
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the effective configuration as a TOML-compatible dict."""
        return {
            Toml.SECTION_LIMITS: {
                Toml.KEY_MAX_DEPTH: self.max_depth,
                Toml.KEY_TRAVERSAL_LIMIT: self.traversal_limit,
                Toml.KEY_SIMPLE_LAYOUT_MAX_ELEMENTS: self.simple_layout_max_elements,
            },
            Toml.SECTION_CATALOG: {
                Toml.KEY_CATALOG_PATH: str(self.catalog_path) if self.catalog_path else "",
                Toml.KEY_CUSTOM_TYPES: list(self.custom_types),
            },
            Toml.SECTION_NORMALIZE: {
                Toml.KEY_DISABLED_PASSES: [p.key for p in self.disabled_passes],
            },
        }


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Scalar fields use ``None`` for "not set here" so that `merge_with` can
    tell an explicit value from an inherited one.
    """

    max_depth: int | None = None
    traversal_limit: int | None = None
    simple_layout_max_elements: int | None = None
    catalog_path: Path | None = None
    custom_types: list[str] = field(default_factory=lambda: [])
    disabled_passes: list[str] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Unknown pass names are reported as warnings and ignored.

        Raises:
            ConfigError: If a limit is not a positive integer.
        """
        limits: dict[str, int] = {}
        for name, value, default in (
            (Toml.KEY_MAX_DEPTH, self.max_depth, MAX_DEPTH),
            (Toml.KEY_TRAVERSAL_LIMIT, self.traversal_limit, TRAVERSAL_LIMIT),
            (
                Toml.KEY_SIMPLE_LAYOUT_MAX_ELEMENTS,
                self.simple_layout_max_elements,
                SIMPLE_LAYOUT_MAX_ELEMENTS,
            ),
        ):
            resolved = default if value is None else value
            if isinstance(resolved, bool) or not isinstance(resolved, int) or resolved < 1:
                raise ConfigError(f"[{Toml.SECTION_LIMITS}] {name} must be a positive integer")
            limits[name] = resolved

        if limits[Toml.KEY_TRAVERSAL_LIMIT] <= limits[Toml.KEY_MAX_DEPTH]:
            self.diagnostics.add_warning(
                f"{Toml.KEY_TRAVERSAL_LIMIT} ({limits[Toml.KEY_TRAVERSAL_LIMIT]}) does not "
                f"exceed {Toml.KEY_MAX_DEPTH} ({limits[Toml.KEY_MAX_DEPTH]}); "
                "depth violations past the traversal limit cannot be reported"
            )

        disabled: list[PassName] = []
        for raw in self.disabled_passes:
            name = PassName.parse(raw)
            if name is None:
                self.diagnostics.add_warning(f"Unknown normalization pass ignored: {raw!r}")
            elif name not in disabled:
                disabled.append(name)

        return Config(
            max_depth=limits[Toml.KEY_MAX_DEPTH],
            traversal_limit=limits[Toml.KEY_TRAVERSAL_LIMIT],
            simple_layout_max_elements=limits[Toml.KEY_SIMPLE_LAYOUT_MAX_ELEMENTS],
            catalog_path=self.catalog_path,
            custom_types=tuple(dict.fromkeys(self.custom_types)),
            disabled_passes=tuple(disabled),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated from the packaged defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed configuration table.

        Relative catalog paths are resolved against the config file's directory.
        Unknown sections and keys are reported as warnings.

        Args:
            data (TomlTable): The parsed TOML table (already un-nested from pyproject).
            config_file (Path | None): The file the data was read from.

        Returns:
            MutableConfig: The resulting builder.
        """
        draft = cls(config_files=[config_file] if config_file else [])
        where = f" in {config_file}" if config_file else ""

        for section, value in data.items():
            if section == Toml.KEY_ROOT:
                continue
            known = _KNOWN_SECTIONS.get(section)
            if known is None or not isinstance(value, dict):
                draft.diagnostics.add_warning(f"Unknown config section [{section}]{where}")
                continue
            for key in cast("dict[str, Any]", value):
                if key not in known:
                    draft.diagnostics.add_warning(f"Unknown key [{section}] {key}{where}")

        limits = _table(data, Toml.SECTION_LIMITS)
        draft.max_depth = _int_or_none(limits.get(Toml.KEY_MAX_DEPTH))
        draft.traversal_limit = _int_or_none(limits.get(Toml.KEY_TRAVERSAL_LIMIT))
        draft.simple_layout_max_elements = _int_or_none(
            limits.get(Toml.KEY_SIMPLE_LAYOUT_MAX_ELEMENTS)
        )

        catalog = _table(data, Toml.SECTION_CATALOG)
        raw_path = catalog.get(Toml.KEY_CATALOG_PATH)
        if isinstance(raw_path, str) and raw_path:
            path = Path(raw_path)
            if not path.is_absolute() and config_file is not None:
                path = config_file.parent / path
            draft.catalog_path = path
        draft.custom_types = _str_list(catalog.get(Toml.KEY_CUSTOM_TYPES))

        normalize = _table(data, Toml.SECTION_NORMALIZE)
        draft.disabled_passes = _str_list(normalize.get(Toml.KEY_DISABLED_PASSES))

        logger.trace("MutableConfig from TOML%s: %s", where, draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a builder from ``uistream.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: None for a ``pyproject.toml`` without ``[tool.uistream]``.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        data = load_config_file(path)
        if data is None:
            logger.debug("No [tool.uistream] section in %s", path)
            return None
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``, root-most first.

        Within one directory ``pyproject.toml`` precedes ``uistream.toml`` so the
        latter wins on merge. A file setting ``root = true`` stops the walk.
        """
        per_dir: list[list[Path]] = []
        for directory in (start, *start.parents):
            found = [
                p
                for p in (directory / PYPROJECT_TOML_NAME, directory / UISTREAM_TOML_NAME)
                if p.is_file()
            ]
            if not found:
                continue
            per_dir.append(found)
            if any(_declares_root(p) for p in found):
                break
        return [p for found in reversed(per_dir) for p in found]

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered project files and explicit files.

        Args:
            start (Path | None): Discovery anchor, defaults to the working directory.
            extra_config_files (Iterable[Path]): Explicit files merged last, in order.
            no_config (bool): Skip discovery of project files.

        Returns:
            MutableConfig: The merged builder.
        """
        draft = cls.from_defaults()
        anchor = (start or Path.cwd()).resolve()
        if anchor.is_file():
            anchor = anchor.parent

        discovered = [] if no_config else cls.discover_local_config_files(anchor)
        for path in [*discovered, *extra_config_files]:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        merged = MutableConfig(
            max_depth=other.max_depth if other.max_depth is not None else self.max_depth,
            traversal_limit=other.traversal_limit
            if other.traversal_limit is not None
            else self.traversal_limit,
            simple_layout_max_elements=other.simple_layout_max_elements
            if other.simple_layout_max_elements is not None
            else self.simple_layout_max_elements,
            catalog_path=other.catalog_path or self.catalog_path,
            custom_types=other.custom_types or self.custom_types,
            disabled_passes=other.disabled_passes or self.disabled_passes,
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged


def _table(data: TomlTable, name: str) -> TomlTable:
    value = data.get(name)
    return cast("TomlTable", value) if isinstance(value, dict) else {}


def _int_or_none(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _str_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in cast("list[object]", value) if isinstance(v, str)]


def _declares_root(path: Path) -> bool:
    try:
        data = load_config_file(path)
    except ConfigError:
        return False
    return bool(data and data.get(Toml.KEY_ROOT) is True)
