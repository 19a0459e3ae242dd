from __future__ import annotations


class BrainfError(Exception):
    pass


class CompileError(BrainfError):
    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        prefix = ""
        if index is not None:
            prefix = f"opcode {index}: "
        super().__init__(prefix + str(message))


class StructuralError(CompileError):
    pass


class UnmatchedClose(StructuralError):
    def __init__(self, index: int) -> None:
        super().__init__("mismatched ']'", index=index)


class UnmatchedOpen(StructuralError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"{count} unmatched '['")


class MagnitudeOverflow(CompileError):
    def __init__(self, magnitude: int, *, limit: int, index: int) -> None:
        self.magnitude = magnitude
        self.limit = limit
        super().__init__(f"run magnitude {magnitude} exceeds limit {limit}", index=index)


class ExecutionError(BrainfError):
    def __init__(self, message: str, *, pc: int | None = None) -> None:
        self.pc = pc
        prefix = ""
        if pc is not None:
            prefix = f"pc {pc}: "
        super().__init__(prefix + str(message))


class InputExhausted(ExecutionError):
    def __init__(self, *, pc: int) -> None:
        super().__init__("input exhausted", pc=pc)


class SinkFailure(ExecutionError):
    def __init__(self, reason: str, *, pc: int) -> None:
        super().__init__(f"output sink rejected write: {reason}", pc=pc)


class TapeLimitExceeded(ExecutionError):
    def __init__(self, size: int, *, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"tape would grow to {size} cells (limit {limit})")
