"""
Configuration handling for godependants
"""

from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from godependants.constants import DEFAULT_GO_COMMAND
import logging

try:
    # Python 3.11+ standard library
    import tomllib
except ModuleNotFoundError:
    # Fallback for Python <3.11
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)


class GodependantsConfig(BaseModel):
    """Main configuration model for godependants"""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    go_command: str = Field(
        default=DEFAULT_GO_COMMAND, description="Go toolchain executable"
    )
    build_flags: List[str] = Field(
        default_factory=list,
        description="Extra flags passed to `go list` (e.g. -tags=integration)",
    )
    env: Dict[str, str] = Field(
        default_factory=dict,
        description="Environment overrides for the toolchain (e.g. GOFLAGS)",
    )
    direct: bool = Field(
        default=False, description="Only list direct dependants by default"
    )
    quiet: bool = Field(default=False, description="Disable stderr diagnostics")

    @field_validator("go_command")
    def validate_go_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("go_command must not be empty")
        return v

    @classmethod
    def from_toml(cls, path: Path) -> "GodependantsConfig":
        """Load config from TOML file"""
        with open(path, "rb") as f:
            config_data = tomllib.load(f)
        return cls(**config_data.get("tool", {}).get("godependants", {}))


def load_config(path: Optional[Path] = None) -> GodependantsConfig:
    """Load configuration from file or return defaults"""
    if path and path.exists():
        logger.debug(f"Reading config file: {path}")
        return GodependantsConfig.from_toml(path)
    return GodependantsConfig()
