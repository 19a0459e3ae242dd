from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


HELLO_WORLD = (
    ">+++IGNORED BY INTERPRETER+++++[<+++++++++>-]<.>++++[<+++++REDUNDANT COMMENT!!!++>-]"
    "<+.+++++++..+++.>>++++++[<+++++++>-]<+\n"
    "+.------------.>++++++[<+++++++++>-]<+.<.+++.------.-IGNORED BY INTERPRETER-------."
    ">>>++++[<++++++++>-\n"
    "]<+."
)


@pytest.fixture()
def hello_world() -> str:
    return HELLO_WORLD


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BRAINF_EOF", "BRAINF_MAX_CELLS", "BRAINF_MAX_MAGNITUDE"):
        monkeypatch.delenv(name, raising=False)
