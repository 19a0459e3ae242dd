from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OpKind(str, Enum):
    ADD = "add"
    SUB = "sub"
    LEFT = "left"
    RIGHT = "right"
    PRINT = "print"
    INPUT = "input"
    BEGIN_LOOP = "begin_loop"
    END_LOOP = "end_loop"

    @property
    def counted(self) -> bool:
        return self in _COUNTED

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_char(cls, ch: str) -> OpKind:
        try:
            return _KINDS[ch]
        except KeyError:
            raise ValueError(f"not a command character: {ch!r}") from None


_COUNTED = frozenset({OpKind.ADD, OpKind.SUB, OpKind.LEFT, OpKind.RIGHT})

_SYMBOLS = {
    OpKind.ADD: "+",
    OpKind.SUB: "-",
    OpKind.LEFT: "<",
    OpKind.RIGHT: ">",
    OpKind.PRINT: ".",
    OpKind.INPUT: ",",
    OpKind.BEGIN_LOOP: "[",
    OpKind.END_LOOP: "]",
}

_KINDS = {sym: kind for kind, sym in _SYMBOLS.items()}

COMMANDS = frozenset(_KINDS)


@dataclass(frozen=True, slots=True)
class Opcode:
    kind: OpKind
    count: int = 1

    def __post_init__(self) -> None:
        if self.kind.counted:
            if self.count < 1:
                raise ValueError(f"{self.kind.value} needs a positive count, got {self.count}")
        elif self.count != 1:
            raise ValueError(f"{self.kind.value} does not take a count")

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    def __str__(self) -> str:
        if self.kind.counted and self.count > 1:
            return f"{self.symbol}{self.count}"
        return self.symbol


def add(n: int) -> Opcode:
    return Opcode(OpKind.ADD, n)


def sub(n: int) -> Opcode:
    return Opcode(OpKind.SUB, n)


def left(n: int) -> Opcode:
    return Opcode(OpKind.LEFT, n)


def right(n: int) -> Opcode:
    return Opcode(OpKind.RIGHT, n)


PRINT = Opcode(OpKind.PRINT)
INPUT = Opcode(OpKind.INPUT)
BEGIN_LOOP = Opcode(OpKind.BEGIN_LOOP)
END_LOOP = Opcode(OpKind.END_LOOP)
