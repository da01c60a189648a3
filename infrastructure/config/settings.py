# infrastructure/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import dotenv_values

DEFAULT_ENV_PATH = Path(__file__).parent.parent.parent / ".env"


@dataclass(frozen=True)
class EngineSettings:
    """
    Engine settings taken from the environment, with a .env file filling in
    what the environment does not set.

      PROCESS_DESCRIPTION_PATH  search directories for descriptions (os.pathsep separated)
      PROCESS_LOG_LEVEL         loguru level for the command line runner
      PROCESS_MAX_STEPS         step budget for process runs (unset = unbounded)
    """
    description_paths: Tuple[Path, ...] = field(default_factory=tuple)
    log_level: str = "INFO"
    max_steps: Optional[int] = None

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[Path] = DEFAULT_ENV_PATH,
    ) -> "EngineSettings":
        values = {}
        if env_file is not None and Path(env_file).exists():
            values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
        values.update(os.environ if environ is None else environ)

        raw_paths = values.get("PROCESS_DESCRIPTION_PATH", "")
        paths = tuple(Path(p) for p in raw_paths.split(os.pathsep) if p.strip())

        return cls(
            description_paths=paths,
            log_level=values.get("PROCESS_LOG_LEVEL", "INFO").upper(),
            max_steps=_parse_max_steps(values.get("PROCESS_MAX_STEPS")),
        )


def _parse_max_steps(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"PROCESS_MAX_STEPS must be an integer: {raw!r}") from None
    if value <= 0:
        raise ValueError(f"PROCESS_MAX_STEPS must be positive: {raw!r}")
    return value
