# topmark:header:start
#
#   project      : UIStream
#   file         : base.py
#   file_relpath : src/uistream/normalize/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for normalization passes.

The pipeline invokes passes as *callables*. `BaseNormalizer` implements the
common lifecycle:

    tree = normalizer(tree)  # internally: may_proceed → run

Contract
--------
- Passes are pure: ``run()`` never mutates its input and returns a new tree
  only when something changed.
- A pass that makes no change returns the identical input reference, so
  callers can detect no-ops with ``is``.
- Passes are idempotent: applying a pass to its own output is a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from uistream.config.logging import get_logger

if TYPE_CHECKING:
    from uistream.config.logging import UIStreamLogger
    from uistream.normalize.names import PassName
    from uistream.tree.model import UITree

logger: UIStreamLogger = get_logger(__name__)


@dataclass(frozen=True)
class BaseNormalizer:
    """Reusable foundation for normalization passes.

    Subclass this to implement a concrete pass by overriding ``run()`` and
    optionally ``may_proceed()``. Do not override ``__call__``.

    Attributes:
        name (PassName): Stable pass identifier used in configuration and logs.
    """

    name: PassName

    def __call__(self, tree: UITree) -> UITree:
        """Run the pass on ``tree``.

        Args:
            tree (UITree): The input tree (never mutated).

        Returns:
            UITree: The rewritten tree, or ``tree`` itself when nothing changed.
        """
        if not self.may_proceed(tree):
            logger.trace("Pass %s skipped", self.name.key)
            return tree
        result = self.run(tree)
        if result is not tree:
            logger.debug("Pass %s rewrote the tree", self.name.key)
        return result

    def may_proceed(self, tree: UITree) -> bool:
        """Return whether the pass should run on ``tree``.

        Default: run when the tree holds at least one element.
        """
        return len(tree) > 0

    def run(self, tree: UITree) -> UITree:
        """Perform the rewrite. Subclasses must implement this method."""
        raise NotImplementedError
