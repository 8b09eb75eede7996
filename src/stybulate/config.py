"""Command-line defaults, overridable through ``STYBULATE_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Rendering options of the ``stybulate`` command."""

    fmt: str = "simple"
    header: bool = False
    str_align: str = "left"
    num_align: str = "decimal"
    # SGR parameters for the borders, e.g. "1;32"
    border_style: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        config = cls()
        if env.get("STYBULATE_FORMAT"):
            config.fmt = env["STYBULATE_FORMAT"]
        if env.get("STYBULATE_HEADER"):
            config.header = env["STYBULATE_HEADER"].strip().lower() in _TRUTHY
        if env.get("STYBULATE_STR_ALIGN"):
            config.str_align = env["STYBULATE_STR_ALIGN"]
        if env.get("STYBULATE_NUM_ALIGN"):
            config.num_align = env["STYBULATE_NUM_ALIGN"]
        if env.get("STYBULATE_BORDER_STYLE"):
            config.border_style = env["STYBULATE_BORDER_STYLE"]
        return config
