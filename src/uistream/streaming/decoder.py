# topmark:header:start
#
#   project      : UIStream
#   file         : decoder.py
#   file_relpath : src/uistream/streaming/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental JSONL patch decoder.

`PatchDecoder` turns arbitrarily split text (or UTF-8 byte) chunks into
`PatchOp` values, one per complete newline-terminated record, in arrival
order. Generators routinely wrap their output in Markdown fences, emit blank
lines, or get cut off mid-record; such lines are skipped or dropped and never
raise.

Example:
    ```python
    decoder = PatchDecoder()
    ops = decoder.push('{"op":"add","path"')      # []
    ops = decoder.push(':"/root","value":"x"}\\n')  # [PatchOp(...)]
    ops = decoder.flush()                          # []
    ```
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Final

from uistream.config.logging import get_logger
from uistream.diagnostic.model import DiagnosticLog
from uistream.streaming.patch import parse_patch_line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.config.logging import UIStreamLogger
    from uistream.streaming.patch import PatchOp

logger: UIStreamLogger = get_logger(__name__)

CODE_FENCE: Final[str] = "```"

# Longest record excerpt quoted in a diagnostic
_PREVIEW_LEN: Final[int] = 60


def _preview(line: str) -> str:
    text = line.strip()
    return text if len(text) <= _PREVIEW_LEN else text[:_PREVIEW_LEN] + "..."


def is_skippable_line(line: str) -> bool:
    """Return True for blank lines and Markdown code fence lines."""
    stripped = line.strip()
    return not stripped or stripped.startswith(CODE_FENCE)


class PatchDecoder:
    """Stateful line splitter and record parser for one stream.

    Attributes:
        diagnostics (DiagnosticLog): One warning per dropped record.
        records_seen (int): Number of non-skipped records parsed so far.
        records_dropped (int): Number of records that failed to parse.
    """

    def __init__(self) -> None:
        self._buffer: str = ""
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._line_no: int = 0
        self.diagnostics: DiagnosticLog = DiagnosticLog()
        self.records_seen: int = 0
        self.records_dropped: int = 0

    @property
    def pending(self) -> str:
        """Text buffered after the last complete line."""
        return self._buffer

    def push(self, chunk: str | bytes) -> list[PatchOp]:
        """Feed one chunk and return the operations completed by it.

        Args:
            chunk (str | bytes): Text, or UTF-8 bytes that may end mid-character.

        Returns:
            list[PatchOp]: Operations for every line completed by this chunk.
        """
        text = self._utf8.decode(chunk) if isinstance(chunk, bytes) else chunk
        if not text:
            return []
        self._buffer += text
        if "\n" not in text:
            return []
        *lines, self._buffer = self._buffer.split("\n")
        return self._parse_lines(lines)

    def flush(self) -> list[PatchOp]:
        """Parse whatever is still buffered as a final record and reset the buffer.

        Incomplete trailing UTF-8 sequences are replaced, not raised.

        Returns:
            list[PatchOp]: Zero or one operation.
        """
        tail = self._buffer + self._utf8.decode(b"", final=True)
        self._buffer = ""
        self._utf8.reset()
        if not tail:
            return []
        return self._parse_lines(tail.split("\n"))

    def decode_all(self, chunks: Iterable[str | bytes]) -> list[PatchOp]:
        """Push every chunk, flush, and return all operations in order."""
        ops: list[PatchOp] = []
        for chunk in chunks:
            ops.extend(self.push(chunk))
        ops.extend(self.flush())
        return ops

    def _parse_lines(self, lines: Iterable[str]) -> list[PatchOp]:
        ops: list[PatchOp] = []
        for raw in lines:
            self._line_no += 1
            line = raw.rstrip("\r")
            if is_skippable_line(line):
                continue
            self.records_seen += 1
            op = parse_patch_line(line)
            if op is None:
                self.records_dropped += 1
                self.diagnostics.add_warning(
                    f"line {self._line_no}: dropped malformed patch record: {_preview(line)!r}"
                )
                logger.debug("Dropped malformed patch record at line %d", self._line_no)
                continue
            logger.trace("Decoded %s %s", op.op.value, op.path)
            ops.append(op)
        return ops
