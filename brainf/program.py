from __future__ import annotations

from dataclasses import dataclass

from brainf.engine import ByteSink, ByteSource, EofPolicy, ExecutionEngine, RunStats
from brainf.opcodes import Opcode


@dataclass(frozen=True, slots=True)
class Program:
    """Compiled opcodes paired with their validated jump table."""

    opcodes: tuple[Opcode, ...]
    table: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.opcodes)

    def engine(
        self,
        *,
        source: ByteSource,
        sink: ByteSink,
        eof: EofPolicy = EofPolicy.ERROR,
        max_cells: int | None = None,
    ) -> ExecutionEngine:
        return ExecutionEngine(
            self.opcodes, self.table, source=source, sink=sink, eof=eof, max_cells=max_cells
        )

    def run(
        self,
        *,
        source: ByteSource,
        sink: ByteSink,
        eof: EofPolicy = EofPolicy.ERROR,
        max_cells: int | None = None,
    ) -> RunStats:
        return self.engine(source=source, sink=sink, eof=eof, max_cells=max_cells).run()
