# topmark:header:start
#
#   project      : UIStream
#   file         : engine.py
#   file_relpath : src/uistream/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Engine facade: injected configuration and registries in one place.

An `Engine` bundles a frozen `Config`, a `SchemaRegistry` and a
`CoercionTable`. Several engines with different registries can coexist; none
of them touches global state.

Example:
    ```python
    from uistream.engine import Engine

    engine = Engine.from_config()
    session = engine.session()
    for chunk in chunks:
        session.feed(chunk)
    tree = engine.normalize(session.finish())
    report = engine.grade(tree)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING

from uistream.config.logging import get_logger
from uistream.config.model import Config
from uistream.grading.composition import grade_composition
from uistream.grading.structural import grade_tree
from uistream.normalize.pipeline import DEFAULT_PASSES, normalize_tree, select_passes
from uistream.streaming.session import StreamSession
from uistream.validation.coercion import CoercionTable, default_coercions
from uistream.validation.schema import SchemaRegistry, default_registry
from uistream.validation.validator import ElementValidator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.config.logging import UIStreamLogger
    from uistream.grading.report import GradeReport
    from uistream.normalize.base import BaseNormalizer
    from uistream.tree.model import UIElement, UITree
    from uistream.validation.validator import ElementCheck

logger: UIStreamLogger = get_logger(__name__)


@dataclass(frozen=True)
class Engine:
    """Streaming, validation, grading and normalization bound to one configuration.

    Attributes:
        config (Config): Frozen configuration (limits, custom types, disabled passes).
        registry (SchemaRegistry): Component schemas.
        coercions (CoercionTable): Pre-validation coercions.
    """

    config: Config = field(default_factory=Config)
    registry: SchemaRegistry = field(default_factory=default_registry)
    coercions: CoercionTable = field(default_factory=default_coercions)

    @classmethod
    def from_config(cls, config: Config | None = None) -> Engine:
        """Build an engine, loading the catalog named by ``config`` if any.

        Raises:
            ConfigError: If the configured catalog cannot be read or parsed.
            CatalogError: If the configured catalog is structurally invalid.
        """
        config = config or Config()
        if config.catalog_path is not None:
            registry = SchemaRegistry.from_file(config.catalog_path)
        else:
            registry = default_registry()
        logger.debug(
            "Engine ready: %d component schemas, %d custom types, %d disabled passes",
            len(registry.components),
            len(config.custom_types),
            len(config.disabled_passes),
        )
        return cls(
            config=config,
            registry=registry,
            coercions=CoercionTable.from_registry(registry),
        )

    @cached_property
    def validator(self) -> ElementValidator:
        """Element validator bound to this engine's registries."""
        return ElementValidator(registry=self.registry, coercions=self.coercions)

    @cached_property
    def passes(self) -> tuple[BaseNormalizer, ...]:
        """Enabled normalization passes, in pipeline order."""
        return select_passes(self.config.disabled_passes, DEFAULT_PASSES)

    def session(self) -> StreamSession:
        """Start an independent streaming session."""
        return StreamSession()

    def parse(self, chunks: Iterable[str | bytes]) -> UITree:
        """Decode and apply a complete chunk sequence in a fresh session."""
        return self.session().run(chunks)

    def check_element(self, element: UIElement) -> ElementCheck:
        """Coerce, validate and (when needed) repair ``element``."""
        return self.validator.check(element)

    def normalize(self, tree: UITree) -> UITree:
        """Run the enabled normalization passes once."""
        return normalize_tree(tree, self.passes)

    def grade(self, tree: UITree) -> GradeReport:
        """Run the structural grader with this engine's limits and registries."""
        return grade_tree(
            tree,
            validator=self.validator,
            custom_types=self.config.custom_types,
            max_depth=self.config.max_depth,
            traversal_limit=self.config.traversal_limit,
        )

    def grade_composition(self, tree: UITree) -> GradeReport:
        """Run the composition grader with this engine's limits."""
        return grade_composition(
            tree,
            simple_layout_max_elements=self.config.simple_layout_max_elements,
            traversal_limit=self.config.traversal_limit,
        )
