from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw


def _get_separator(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    # Allow escaped newlines/tabs from shell env files.
    return raw.replace("\\n", "\n").replace("\\t", "\t")


@dataclass(frozen=True, slots=True)
class Settings:
    # Strategy installed in the process-wide registry at import time
    marshaller: str = field(default_factory=lambda: _get_str("XERRORS_MARSHALLER", "default"))

    # Joins cause messages in XError text
    cause_separator: str = field(
        default_factory=lambda: _get_separator("XERRORS_CAUSE_SEPARATOR", "\n")
    )


settings = Settings()
