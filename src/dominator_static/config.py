"""Application configuration: settings schema and dominator_static.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from dominator_static.errors import ConfigError


CONFIG_FILE = "dominator_static.yaml"
ENV_PREFIX = "DOMINATOR_STATIC_"
OUT_DIR_ENV = "OUT_DIR"


class Settings(BaseModel):
    trim_whitespace: bool = Field(default=False, description="Strip leading/trailing whitespace of every text node")
    output_dir:    Optional[str] = Field(default=None, description="Output root; falls back to $OUT_DIR")
    output_suffix: str = Field(default=".rs.inc", pattern=r"^\.", description="Extension for generated files")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    def resolve_output_dir(self) -> Path:
        """Configured output directory, else $OUT_DIR (as set for build scripts)."""
        out = self.output_dir or os.getenv(OUT_DIR_ENV)
        if not out:
            raise ConfigError(f"No output directory: pass --out-dir or set {OUT_DIR_ENV}")
        return Path(out)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from dominator_static.yaml, then DOMINATOR_STATIC_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
