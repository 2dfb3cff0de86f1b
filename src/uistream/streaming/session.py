# topmark:header:start
#
#   project      : UIStream
#   file         : session.py
#   file_relpath : src/uistream/streaming/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One generation session: a decoder plus the current tree snapshot.

Sessions share nothing. Each owns its decoder buffer and its tree; discarding
the session discards both. Stopping calls to `StreamSession.feed` cancels
decoding, and `StreamSession.finish` still recovers a trailing record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.config.logging import get_logger
from uistream.streaming.applier import apply_patches
from uistream.streaming.decoder import PatchDecoder
from uistream.tree.model import EMPTY_TREE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.config.logging import UIStreamLogger
    from uistream.streaming.patch import PatchOp
    from uistream.tree.model import UITree

logger: UIStreamLogger = get_logger(__name__)


class StreamSession:
    """Fold a chunked patch stream into successive `UITree` snapshots.

    Attributes:
        decoder (PatchDecoder): The session's decoder.
        ops_applied (int): Number of operations applied so far.
    """

    def __init__(self) -> None:
        self.decoder: PatchDecoder = PatchDecoder()
        self._tree: UITree = EMPTY_TREE
        self._finalized: bool = False
        self.ops_applied: int = 0

    @property
    def tree(self) -> UITree:
        """The current snapshot."""
        return self._tree

    @property
    def finalized(self) -> bool:
        """True once `finish` has run."""
        return self._finalized

    def feed(self, chunk: str | bytes) -> list[PatchOp]:
        """Decode ``chunk``, apply the resulting operations, and return them.

        Feeding after `finish` starts a new line of input but keeps the tree.
        """
        ops = self.decoder.push(chunk)
        self._apply(ops)
        return ops

    def finish(self) -> UITree:
        """Flush the decoder, apply any trailing operation, and return the final tree."""
        self._apply(self.decoder.flush())
        self._finalized = True
        logger.debug(
            "Session finished: %d ops applied, %d records dropped, %d elements",
            self.ops_applied,
            self.decoder.records_dropped,
            len(self._tree),
        )
        return self._tree

    def run(self, chunks: Iterable[str | bytes]) -> UITree:
        """Feed every chunk, then finish."""
        for chunk in chunks:
            self.feed(chunk)
        return self.finish()

    def reset(self) -> None:
        """Discard all state and start over at the empty tree."""
        self.decoder = PatchDecoder()
        self._tree = EMPTY_TREE
        self._finalized = False
        self.ops_applied = 0

    def _apply(self, ops: list[PatchOp]) -> None:
        if ops:
            self._tree = apply_patches(self._tree, ops)
            self.ops_applied += len(ops)
            self._finalized = False


def parse_jsonl_to_tree(text: str) -> UITree:
    """Build a tree from a complete JSONL document through the streaming path."""
    return StreamSession().run([text])
