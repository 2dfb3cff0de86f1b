# topmark:header:start
#
#   project      : UIStream
#   file         : schema.py
#   file_relpath : src/uistream/validation/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declarative component schemas and the registry that resolves them.

A `SchemaRegistry` is immutable configuration: build it once (from the
packaged catalog, a catalog file, or code) and inject it wherever elements are
validated. Several registries can coexist.

Resolution of an element type, in order:
    1. the alias table maps a synonym to its target type;
    2. the sub-component table maps a compound type to a named part of a
       parent schema (a missing part means "no schema");
    3. direct lookup in the component table.

Types that resolve to no schema are valid by default.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from uistream.config.errors import CatalogError
from uistream.config.io.loaders import load_default_catalog_dict, load_toml_dict
from uistream.config.keys import CatalogToml
from uistream.config.logging import get_logger
from uistream.constants import ROOT_ISSUE_PATH
from uistream.vocabulary import DIV

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from uistream.config.io.types import TomlTable
    from uistream.config.logging import UIStreamLogger

logger: UIStreamLogger = get_logger(__name__)

# Issue path segments: prop names and list indices
PathSegment = str | int


class PropKind(str, Enum):
    """Constraint kinds a catalog may declare for a prop."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"
    ANY = "any"


SCALAR_KINDS: frozenset[PropKind] = frozenset(
    {PropKind.STRING, PropKind.NUMBER, PropKind.BOOLEAN, PropKind.ENUM}
)


@dataclass(frozen=True)
class ValidationIssue:
    """One failed check.

    Attributes:
        segments (tuple[PathSegment, ...]): Location below ``props``; empty for
            the props object itself.
        message (str): Human-readable explanation.
    """

    segments: tuple[PathSegment, ...]
    message: str

    @property
    def path(self) -> str:
        """Dot-joined location, ``"(root)"`` for the props object itself."""
        return ".".join(str(s) for s in self.segments) or ROOT_ISSUE_PATH

    @property
    def is_top_level(self) -> bool:
        """True when the issue is on a direct prop (exactly one segment)."""
        return len(self.segments) == 1

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def json_type_name(value: object) -> str:
    """Return the JSON type name of a decoded value (``"null"``, ``"array"``, ...)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_dynamic_reference(value: object) -> bool:
    """Return True for a dynamic reference ``{"path": "<pointer>"}``."""
    if not isinstance(value, dict):
        return False
    ref = cast("dict[str, Any]", value)
    return set(ref) == {"path"} and isinstance(ref["path"], str)


@dataclass(frozen=True)
class PropConstraint:
    """Constraint on one prop value.

    Attributes:
        kind (PropKind): The value kind.
        values (tuple[str, ...]): Allowed values for `PropKind.ENUM`.
        items (PropConstraint | None): Element constraint for `PropKind.ARRAY`.
        fields (Mapping[str, PropConstraint]): Field constraints for `PropKind.OBJECT`.
    """

    kind: PropKind
    values: tuple[str, ...] = ()
    items: PropConstraint | None = None
    fields: Mapping[str, PropConstraint] = field(default_factory=lambda: MappingProxyType({}))

    def check(self, value: object, at: tuple[PathSegment, ...]) -> list[ValidationIssue]:
        """Return the issues found for ``value`` located at ``at``."""
        if self.kind is PropKind.ANY:
            return []
        if self.kind in SCALAR_KINDS and is_dynamic_reference(value):
            return []

        if self.kind is PropKind.ENUM:
            if isinstance(value, str) and value in self.values:
                return []
            expected = " | ".join(f"'{v}'" for v in self.values)
            received = f"'{value}'" if isinstance(value, str) else json_type_name(value)
            return [
                ValidationIssue(at, f"Invalid enum value. Expected {expected}, received {received}")
            ]

        if self.kind is PropKind.STRING:
            ok = isinstance(value, str)
        elif self.kind is PropKind.NUMBER:
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        elif self.kind is PropKind.BOOLEAN:
            ok = isinstance(value, bool)
        elif self.kind is PropKind.ARRAY:
            ok = isinstance(value, list)
        else:
            ok = isinstance(value, dict)
        if not ok:
            return [
                ValidationIssue(
                    at, f"Expected {self.kind.value}, received {json_type_name(value)}"
                )
            ]

        issues: list[ValidationIssue] = []
        if self.kind is PropKind.ARRAY and self.items is not None:
            for index, item in enumerate(cast("list[Any]", value)):
                issues.extend(self.items.check(item, (*at, index)))
        elif self.kind is PropKind.OBJECT:
            obj = cast("dict[str, Any]", value)
            for name, constraint in self.fields.items():
                if obj.get(name) is not None:
                    issues.extend(constraint.check(obj[name], (*at, name)))
        return issues


@dataclass(frozen=True)
class ComponentSchema:
    """Schema of one component type.

    Attributes:
        name (str): Component type (or ``Parent.Part`` for parts).
        required (tuple[str, ...]): Props that must be present and not null.
        props (Mapping[str, PropConstraint]): Constraints on declared props.
            Undeclared props are accepted as-is.
        parts (Mapping[str, ComponentSchema]): Named sub-schemas.
    """

    name: str
    required: tuple[str, ...] = ()
    props: Mapping[str, PropConstraint] = field(default_factory=lambda: MappingProxyType({}))
    parts: Mapping[str, ComponentSchema] = field(default_factory=lambda: MappingProxyType({}))

    def validate_props(self, props: Mapping[str, Any]) -> list[ValidationIssue]:
        """Return the issues of ``props`` in declaration order (required first)."""
        issues: list[ValidationIssue] = []
        for name in self.required:
            if props.get(name) is None:
                issues.append(ValidationIssue((name,), "Required"))
        for name, constraint in self.props.items():
            value = props.get(name)
            if value is not None:
                issues.extend(constraint.check(value, (name,)))
        return issues


@dataclass(frozen=True)
class SubComponentRef:
    """Pointer from a compound type to ``parent.parts[part]``."""

    parent: str
    part: str


@dataclass(frozen=True)
class SchemaRegistry:
    """Immutable lookup from component type to schema.

    Attributes:
        components (Mapping[str, ComponentSchema]): Direct schemas by type.
        aliases (Mapping[str, str]): Type synonyms.
        sub_components (Mapping[str, SubComponentRef]): Compound type references.
        synthetic (frozenset[str]): Types accepted without a schema (e.g. ``Div``).
        coercions (Mapping[str, Mapping[str, str]]): ``"Type.prop"`` coercion
            tables declared by the catalog (consumed by `CoercionTable`).
    """

    components: Mapping[str, ComponentSchema] = field(
        default_factory=lambda: MappingProxyType({})
    )
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    sub_components: Mapping[str, SubComponentRef] = field(
        default_factory=lambda: MappingProxyType({})
    )
    synthetic: frozenset[str] = frozenset({DIV})
    coercions: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def resolve(self, type_: str) -> ComponentSchema | None:
        """Return the schema governing ``type_``, or None when it has none."""
        if type_ in self.synthetic:
            return None
        target = self.aliases.get(type_, type_)
        ref = self.sub_components.get(target)
        if ref is not None:
            parent = self.components.get(ref.parent)
            return parent.parts.get(ref.part) if parent is not None else None
        return self.components.get(target)

    @functools.cached_property
    def known_types(self) -> frozenset[str]:
        """Every type name the registry recognizes."""
        return frozenset(
            {*self.components, *self.aliases, *self.sub_components, *self.synthetic}
        )

    def is_known(self, type_: str) -> bool:
        """Return True when ``type_`` is part of the vocabulary."""
        return type_ in self.known_types

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<catalog>") -> SchemaRegistry:
        """Build a registry from a parsed catalog table.

        Raises:
            CatalogError: If the catalog is structurally invalid.
        """
        components: dict[str, ComponentSchema] = {}
        for name, raw in _section(data, CatalogToml.SECTION_COMPONENTS, source).items():
            components[name] = _parse_component(name, raw, source)

        aliases: dict[str, str] = {}
        for name, target in _section(data, CatalogToml.SECTION_ALIASES, source).items():
            if not isinstance(target, str):
                raise CatalogError(f"{source}: alias {name!r} must map to a type name")
            aliases[name] = target

        sub_components: dict[str, SubComponentRef] = {}
        for name, raw in _section(data, CatalogToml.SECTION_SUB_COMPONENTS, source).items():
            ref = cast("dict[str, Any]", raw) if isinstance(raw, dict) else {}
            parent, part = ref.get(CatalogToml.KEY_PARENT), ref.get(CatalogToml.KEY_PART)
            if not isinstance(parent, str) or not isinstance(part, str):
                raise CatalogError(
                    f"{source}: sub-component {name!r} needs string 'parent' and 'part'"
                )
            sub_components[name] = SubComponentRef(parent=parent, part=part)

        coercions: dict[str, Mapping[str, str]] = {}
        for name, raw in _section(data, CatalogToml.SECTION_COERCIONS, source).items():
            table = cast("dict[str, Any]", raw) if isinstance(raw, dict) else None
            valid = table is not None and all(isinstance(v, str) for v in table.values())
            if table is None or not valid or "." not in name:
                raise CatalogError(
                    f"{source}: coercion {name!r} must be a 'Type.prop' table of strings"
                )
            coercions[name] = MappingProxyType(dict(table))

        synthetic_tbl = _section(data, CatalogToml.SECTION_SYNTHETIC, source)
        synthetic_raw = synthetic_tbl.get(CatalogToml.KEY_TYPES, [DIV])
        if not isinstance(synthetic_raw, list):
            raise CatalogError(f"{source}: [synthetic] types must be a list")
        synthetic = frozenset(str(t) for t in cast("list[Any]", synthetic_raw))

        registry = cls(
            components=MappingProxyType(components),
            aliases=MappingProxyType(aliases),
            sub_components=MappingProxyType(sub_components),
            synthetic=synthetic,
            coercions=MappingProxyType(coercions),
        )
        logger.debug(
            "Loaded schema catalog %s: %d components, %d aliases, %d sub-components",
            source,
            len(components),
            len(aliases),
            len(sub_components),
        )
        return registry

    @classmethod
    def from_file(cls, path: Path) -> SchemaRegistry:
        """Load a registry from a catalog TOML file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
            CatalogError: If the catalog is structurally invalid.
        """
        return cls.from_toml_dict(load_toml_dict(path), source=str(path))

    @classmethod
    def from_components(
        cls,
        components: Iterable[ComponentSchema],
        *,
        aliases: Mapping[str, str] | None = None,
        sub_components: Mapping[str, SubComponentRef] | None = None,
    ) -> SchemaRegistry:
        """Build a registry in code."""
        return cls(
            components=MappingProxyType({c.name: c for c in components}),
            aliases=MappingProxyType(dict(aliases or {})),
            sub_components=MappingProxyType(dict(sub_components or {})),
        )


@functools.lru_cache(maxsize=1)
def default_registry() -> SchemaRegistry:
    """Return the registry built from the packaged catalog (loaded once)."""
    return SchemaRegistry.from_toml_dict(load_default_catalog_dict(), source="default-catalog")


def _section(data: TomlTable, name: str, source: str) -> TomlTable:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise CatalogError(f"{source}: [{name}] must be a table")
    return cast("TomlTable", value)


def _parse_component(name: str, raw: object, source: str) -> ComponentSchema:
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: component {name!r} must be a table")
    table = cast("dict[str, Any]", raw)

    required = table.get(CatalogToml.KEY_REQUIRED, [])
    if not isinstance(required, list) or not all(isinstance(r, str) for r in required):
        raise CatalogError(f"{source}: {name}.required must be a list of prop names")

    props_tbl = table.get(CatalogToml.KEY_PROPS, {})
    parts_tbl = table.get(CatalogToml.KEY_PARTS, {})
    if not isinstance(props_tbl, dict) or not isinstance(parts_tbl, dict):
        raise CatalogError(f"{source}: {name}.props and {name}.parts must be tables")

    props = {
        prop: _parse_constraint(f"{name}.{prop}", entry, source)
        for prop, entry in cast("dict[str, Any]", props_tbl).items()
    }
    parts = {
        part: _parse_component(f"{name}.{part}", entry, source)
        for part, entry in cast("dict[str, Any]", parts_tbl).items()
    }
    return ComponentSchema(
        name=name,
        required=tuple(cast("list[str]", required)),
        props=MappingProxyType(props),
        parts=MappingProxyType(parts),
    )


def _parse_constraint(where: str, raw: object, source: str) -> PropConstraint:
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: {where} must be a table")
    entry = cast("dict[str, Any]", raw)
    try:
        kind = PropKind(entry.get(CatalogToml.KEY_KIND))
    except ValueError:
        raise CatalogError(
            f"{source}: {where} has unknown kind {entry.get(CatalogToml.KEY_KIND)!r}"
        ) from None

    values: tuple[str, ...] = ()
    if kind is PropKind.ENUM:
        raw_values = entry.get(CatalogToml.KEY_VALUES)
        if not isinstance(raw_values, list) or not raw_values:
            raise CatalogError(f"{source}: {where} enum needs a non-empty 'values' list")
        values = tuple(str(v) for v in cast("list[Any]", raw_values))

    items: PropConstraint | None = None
    if CatalogToml.KEY_ITEMS in entry:
        items = _parse_constraint(f"{where}[]", entry[CatalogToml.KEY_ITEMS], source)

    fields_tbl = entry.get(CatalogToml.KEY_FIELDS, {})
    if not isinstance(fields_tbl, dict):
        raise CatalogError(f"{source}: {where}.fields must be a table")
    fields = {
        name: _parse_constraint(f"{where}.{name}", sub, source)
        for name, sub in cast("dict[str, Any]", fields_tbl).items()
    }
    return PropConstraint(
        kind=kind, values=values, items=items, fields=MappingProxyType(fields)
    )
