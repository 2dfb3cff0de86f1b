# topmark:header:start
#
#   project      : UIStream
#   file         : empty_selects.py
#   file_relpath : src/uistream/normalize/passes/empty_selects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn a Select without any option into a plain Input.

A Select with neither structural option children nor a non-empty ``options``
list renders as an unusable empty dropdown. Its label and placeholder survive
on the Input; Select-only props are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.vocabulary import INPUT, SELECT, SELECT_ONLY_PROPS

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


def _is_empty_select(element: UIElement) -> bool:
    if element.type != SELECT or element.child_keys:
        return False
    options = element.props.get("options")
    return not (isinstance(options, list) and options)


class EmptySelects(BaseNormalizer):
    """Convert option-less Selects into Inputs."""

    def __init__(self) -> None:
        super().__init__(name=PassName.EMPTY_SELECTS)

    def run(self, tree: UITree) -> UITree:
        """Replace every empty Select."""
        return tree.with_elements(
            *(
                e.without_props(SELECT_ONLY_PROPS).evolve(type=INPUT)
                for e in tree
                if _is_empty_select(e)
            )
        )


normalize_empty_selects = EmptySelects()
