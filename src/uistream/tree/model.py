# topmark:header:start
#
#   project      : UIStream
#   file         : model.py
#   file_relpath : src/uistream/tree/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable UI tree model.

A `UITree` is a flat arena: a root key plus a read-only mapping from key to
`UIElement`. Structure is expressed through each element's ``children`` key
list; ``parent_key`` is a lookup aid only and never an ownership relation.

Every "edit" helper returns a new value and leaves the receiver untouched.
Helpers that would not change anything return the receiver itself so callers
can detect no-ops with ``is``.

Wire format:
    Elements round-trip through plain JSON-compatible dicts using the keys
    ``key``, ``type``, ``props``, ``children``, ``parentKey`` and ``action``
    (see `UIElement.from_value` and `UIElement.to_dict`).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from uistream.constants import PARENT_KEY_FIELD

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def _empty_props() -> Mapping[str, Any]:
    return MappingProxyType({})


def _freeze_mapping(obj: object, name: str) -> None:
    value = getattr(obj, name)
    if not isinstance(value, MappingProxyType):
        object.__setattr__(obj, name, MappingProxyType(dict(value)))


@dataclass(frozen=True)
class Action:
    """Opaque interaction descriptor attached to an element.

    Attributes:
        name (str): Action identifier (e.g. ``"submit_form"``).
        params (Mapping[str, Any]): Free-form parameters, passed through untouched.
    """

    name: str
    params: Mapping[str, Any] = field(default_factory=_empty_props)

    def __post_init__(self) -> None:
        _freeze_mapping(self, "params")

    @classmethod
    def from_value(cls, value: object) -> Action | None:
        """Build an action from a decoded JSON value, or return None if malformed."""
        if not isinstance(value, Mapping):
            return None
        raw = cast("Mapping[str, Any]", value)
        name = raw.get("name")
        if not isinstance(name, str):
            return None
        params = raw.get("params")
        return cls(name=name, params=dict(params) if isinstance(params, Mapping) else {})

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible representation."""
        out: dict[str, Any] = {"name": self.name}
        if self.params:
            out["params"] = dict(self.params)
        return out


@dataclass(frozen=True)
class UIElement:
    """One addressable node of a UI tree.

    Attributes:
        key (str): Identifier, unique within a tree.
        type (str): Open-ended component type tag (e.g. ``"Stack"``).
        props (Mapping[str, Any]): Read-only property bag.
        children (tuple[str, ...] | None): Ordered child keys, or None when absent.
        parent_key (str | None): Optional back-reference to the parent key.
        action (Action | None): Optional interaction descriptor.
    """

    key: str
    type: str
    props: Mapping[str, Any] = field(default_factory=_empty_props)
    children: tuple[str, ...] | None = None
    parent_key: str | None = None
    action: Action | None = None

    def __post_init__(self) -> None:
        _freeze_mapping(self, "props")

    @classmethod
    def from_value(cls, value: object, *, key: str) -> UIElement | None:
        """Build an element from a decoded JSON value.

        The ``key`` taken from the patch path wins over any ``key`` field in the
        record. Malformed fields degrade to their empty form instead of failing.

        Args:
            value (object): The decoded JSON value.
            key (str): The element key from the patch path.

        Returns:
            UIElement | None: The element, or None when ``value`` is not a JSON object.
        """
        if not isinstance(value, Mapping):
            return None
        raw = cast("Mapping[str, Any]", value)

        type_ = raw.get("type")
        props = raw.get("props")
        children = raw.get("children")
        parent_key = raw.get(PARENT_KEY_FIELD)

        return cls(
            key=key,
            type=type_ if isinstance(type_, str) else "",
            props=dict(props) if isinstance(props, Mapping) else {},
            children=(
                tuple(c for c in children if isinstance(c, str))
                if isinstance(children, list)
                else None
            ),
            parent_key=parent_key if isinstance(parent_key, str) else None,
            action=Action.from_value(raw.get("action")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible wire representation."""
        out: dict[str, Any] = {
            "key": self.key,
            "type": self.type,
            "props": dict(self.props),
        }
        if self.children is not None:
            out["children"] = list(self.children)
        if self.parent_key is not None:
            out[PARENT_KEY_FIELD] = self.parent_key
        if self.action is not None:
            out["action"] = self.action.to_dict()
        return out

    # --- copy-on-write helpers ---

    def evolve(self, **changes: Any) -> UIElement:
        """Return a copy with ``changes`` applied (``dataclasses.replace``)."""
        return replace(self, **changes)

    def with_props(self, **updates: Any) -> UIElement:
        """Return a copy with the given props set, or self when nothing changes."""
        if all(k in self.props and self.props[k] == v for k, v in updates.items()):
            return self
        return replace(self, props={**self.props, **updates})

    def without_props(self, names: Iterable[str]) -> UIElement:
        """Return a copy without the given props, or self when none is present."""
        drop = {n for n in names if n in self.props}
        if not drop:
            return self
        return replace(self, props={k: v for k, v in self.props.items() if k not in drop})

    def with_children(self, children: Iterable[str] | None) -> UIElement:
        """Return a copy with a new child list, or self when it is unchanged."""
        new = tuple(children) if children is not None else None
        if new == self.children:
            return self
        return replace(self, children=new)

    @property
    def child_keys(self) -> tuple[str, ...]:
        """Child keys, empty when ``children`` is absent."""
        return self.children or ()

    def prop_str(self, name: str) -> str | None:
        """Return ``props[name]`` when it is a string, else None."""
        value = self.props.get(name)
        return value if isinstance(value, str) else None


@dataclass(frozen=True)
class UITree:
    """Flat key to element arena with a root key.

    Attributes:
        root (str): Root element key; ``""`` means "no tree yet".
        elements (Mapping[str, UIElement]): Read-only mapping of key to element.
    """

    root: str = ""
    elements: Mapping[str, UIElement] = field(default_factory=_empty_props)

    def __post_init__(self) -> None:
        _freeze_mapping(self, "elements")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UITree:
        """Build a tree from its JSON-compatible form (``{"root", "elements"}``)."""
        root = data.get("root")
        raw_elements = data.get("elements")
        elements: dict[str, UIElement] = {}
        if isinstance(raw_elements, Mapping):
            for key, value in cast("Mapping[str, Any]", raw_elements).items():
                element = UIElement.from_value(value, key=str(key))
                if element is not None:
                    elements[element.key] = element
        return cls(root=root if isinstance(root, str) else "", elements=elements)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible representation."""
        return {
            "root": self.root,
            "elements": {k: e.to_dict() for k, e in self.elements.items()},
        }

    def get(self, key: str | None) -> UIElement | None:
        """Return the element at ``key`` or None."""
        if key is None:
            return None
        return self.elements.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.elements

    def __iter__(self) -> Iterator[UIElement]:
        return iter(self.elements.values())

    def __len__(self) -> int:
        return len(self.elements)

    # --- copy-on-write helpers ---

    def with_root(self, root: str) -> UITree:
        """Return a tree with a new root key, or self when unchanged."""
        if root == self.root:
            return self
        return UITree(root=root, elements=self.elements)

    def with_elements(self, *updated: UIElement) -> UITree:
        """Return a tree with the given elements inserted or overwritten.

        Elements identical (``is``) to the stored ones are ignored so the
        receiver is returned when nothing changes.
        """
        changed = [e for e in updated if self.elements.get(e.key) is not e]
        if not changed:
            return self
        elements = dict(self.elements)
        for e in changed:
            elements[e.key] = e
        return UITree(root=self.root, elements=elements)

    def without_elements(self, *keys: str) -> UITree:
        """Return a tree without the given keys, or self when none is present."""
        drop = {k for k in keys if k in self.elements}
        if not drop:
            return self
        return UITree(
            root=self.root,
            elements={k: e for k, e in self.elements.items() if k not in drop},
        )

    def edit(self, updated: Iterable[UIElement] = (), removed: Iterable[str] = ()) -> UITree:
        """Apply a batch of element updates and removals in one copy."""
        return self.with_elements(*updated).without_elements(*removed)


EMPTY_TREE: UITree = UITree()


def is_renderable_tree(tree: UITree) -> bool:
    """Return True when the tree has a root key that resolves to an element."""
    return bool(tree.root) and tree.root in tree.elements


def unknown_types(tree: UITree, known: Iterable[str]) -> list[str]:
    """Return the sorted, de-duplicated element types absent from ``known``."""
    known_set = set(known)
    return sorted({e.type for e in tree if e.type not in known_set})
