from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from brainf.engine import EofPolicy


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # A `.env` next to the package wins over one found from the working directory.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


class InterpreterSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    eof: EofPolicy = EofPolicy.ERROR
    # None leaves the tape unbounded.
    max_cells: int | None = Field(default=None, ge=1)
    max_magnitude: int | None = Field(default=None, ge=1)

    def with_overrides(self, **overrides: Any) -> InterpreterSettings:
        """Return validated settings with the non-None overrides applied."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return InterpreterSettings.model_validate(data)


def _env(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def load_settings() -> InterpreterSettings:
    load_env()
    raw: dict[str, Any] = {
        "eof": (_env("BRAINF_EOF") or "").lower() or None,
        "max_cells": _env("BRAINF_MAX_CELLS"),
        "max_magnitude": _env("BRAINF_MAX_MAGNITUDE"),
    }
    return InterpreterSettings.model_validate({k: v for k, v in raw.items() if v is not None})
