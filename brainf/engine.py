from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from brainf.errors import InputExhausted, SinkFailure, TapeLimitExceeded
from brainf.opcodes import Opcode, OpKind

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    def read_byte(self) -> int | None:
        """Return the next byte (0-255), or None once the source is exhausted."""
        ...


class ByteSink(Protocol):
    def write_byte(self, value: int) -> None:
        """Accept and flush one byte; raise OSError if the write is rejected."""
        ...


class EofPolicy(str, Enum):
    ERROR = "error"
    ZERO = "zero"
    UNCHANGED = "unchanged"


class Tape:
    """Byte cells that grow on demand in both directions.

    Starts with a single zero cell at position 0. Growing to the left prepends
    cells, so the leftmost cell is always position 0.
    """

    def __init__(self, *, max_cells: int | None = None) -> None:
        self._cells = bytearray(1)
        self._max_cells = max_cells
        self.position = 0

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def current(self) -> int:
        return self._cells[self.position]

    @current.setter
    def current(self, value: int) -> None:
        self._cells[self.position] = value & 0xFF

    def cells(self) -> bytes:
        return bytes(self._cells)

    def _check_growth(self, extra: int) -> None:
        if self._max_cells is None:
            return
        size = len(self._cells) + extra
        if size > self._max_cells:
            raise TapeLimitExceeded(size, limit=self._max_cells)

    def shift_left(self, n: int) -> None:
        if self.position >= n:
            self.position -= n
            return
        extra = n - self.position
        self._check_growth(extra)
        self._cells[0:0] = bytes(extra)
        self.position = 0

    def shift_right(self, n: int) -> None:
        target = self.position + n
        extra = target + 1 - len(self._cells)
        if extra > 0:
            self._check_growth(extra)
            self._cells.extend(bytes(extra))
        self.position = target


@dataclass(frozen=True)
class RunStats:
    steps: int
    bytes_read: int
    bytes_written: int
    tape_size: int


class ExecutionEngine:
    """Runs a compiled opcode list against a fresh tape.

    ``table`` must come from ``build_jump_table`` for the same opcodes. Each
    ``run()`` call starts from a clean tape and program counter.
    """

    def __init__(
        self,
        opcodes: Sequence[Opcode],
        table: Sequence[int],
        *,
        source: ByteSource,
        sink: ByteSink,
        eof: EofPolicy = EofPolicy.ERROR,
        max_cells: int | None = None,
    ) -> None:
        if len(table) != len(opcodes):
            raise ValueError(
                f"jump table has {len(table)} entries for {len(opcodes)} opcodes"
            )
        self.opcodes = list(opcodes)
        self.table = list(table)
        self.source = source
        self.sink = sink
        self.eof = EofPolicy(eof)
        self.max_cells = max_cells

    def run(self) -> RunStats:
        opcodes = self.opcodes
        table = self.table
        tape = Tape(max_cells=self.max_cells)
        end = len(opcodes)
        pc = 0
        steps = 0
        bytes_read = 0
        bytes_written = 0

        while pc < end:
            op = opcodes[pc]
            kind = op.kind
            steps += 1
            if kind == OpKind.ADD:
                tape.current = tape.current + op.count
            elif kind == OpKind.SUB:
                tape.current = tape.current - op.count
            elif kind == OpKind.LEFT:
                tape.shift_left(op.count)
            elif kind == OpKind.RIGHT:
                tape.shift_right(op.count)
            elif kind == OpKind.PRINT:
                try:
                    self.sink.write_byte(tape.current)
                except (OSError, ValueError) as e:
                    raise SinkFailure(str(e), pc=pc) from e
                bytes_written += 1
            elif kind == OpKind.INPUT:
                value = self.source.read_byte()
                if value is None:
                    if self.eof == EofPolicy.ERROR:
                        raise InputExhausted(pc=pc)
                    if self.eof == EofPolicy.ZERO:
                        tape.current = 0
                else:
                    tape.current = value
                    bytes_read += 1
            elif kind == OpKind.BEGIN_LOOP:
                if tape.current == 0:
                    pc = table[pc]
            elif kind == OpKind.END_LOOP:
                if tape.current != 0:
                    pc = table[pc]
            pc += 1

        stats = RunStats(
            steps=steps,
            bytes_read=bytes_read,
            bytes_written=bytes_written,
            tape_size=len(tape),
        )
        logger.debug("run finished: %s", stats)
        return stats
