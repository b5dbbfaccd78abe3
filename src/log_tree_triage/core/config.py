"""Pipeline configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .filters import DEFAULT_THRESHOLD

THRESHOLD_ENV = "LOG_TREE_THRESHOLD"
ENCODING_ENV = "LOG_TREE_ENCODING"


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    threshold: int = DEFAULT_THRESHOLD
    encoding: str = "utf-8"
    decode_errors: str = "replace"


def resolve_pipeline_config(cfg: PipelineConfig | None = None) -> PipelineConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = PipelineConfig()

    env = os.getenv(THRESHOLD_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{THRESHOLD_ENV} must be an integer") from exc
        cfg = replace(cfg, threshold=value)

    encoding = os.getenv(ENCODING_ENV)
    if encoding:
        cfg = replace(cfg, encoding=encoding)

    return cfg
