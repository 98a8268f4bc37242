from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

OUTPUT_FORMATS = ("text", "json")


def repo_root() -> Path:
    # Project root is the directory that contains the `wsdecode/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class DecoderSettings:
    label_blank: str = "."
    label_tab: str = "-"
    output_format: str = "text"

    def __post_init__(self) -> None:
        for name in ("label_blank", "label_tab"):
            glyph = getattr(self, name)
            if len(glyph) != 1 or not glyph.isprintable() or glyph.isspace():
                raise ValueError(f"{name} must be a single printable character, got {glyph!r}")
        if self.label_blank == self.label_tab:
            raise ValueError("label_blank and label_tab must differ")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}")


def load_settings() -> DecoderSettings:
    load_env()
    return DecoderSettings(
        label_blank=os.getenv("WSDECODE_LABEL_BLANK") or ".",
        label_tab=os.getenv("WSDECODE_LABEL_TAB") or "-",
        output_format=(os.getenv("WSDECODE_FORMAT") or "text").strip().lower(),
    )
