"""
Runtime Configuration Store.

Settings for the Rust backend, resolved from ``[tool.shellrs]`` in the nearest
``pyproject.toml`` and overridden by explicit (CLI) arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for code generation.
  """

  indent_width: int = Field(4, description="Spaces added per nesting step of emitted code.")
  strict_mode: bool = Field(False, description="If True, fail on unsupported constructs instead of emitting a fallback.")
  runtime_module: str = Field("cmd_lib", description="Name of the runtime module imported by the prelude.")

  @field_validator("indent_width")
  @classmethod
  def validate_indent(cls, v: int) -> int:
    """
    Rejects negative indentation steps.

    Args:
        v (int): Requested width.

    Returns:
        int: The validated width.

    Raises:
        ValueError: If the width is negative.
    """
    if v < 0:
      raise ValueError(f"indent_width must be non-negative, got {v}")
    return v

  @field_validator("runtime_module")
  @classmethod
  def validate_module(cls, v: str) -> str:
    """
    Ensures the runtime module name can be used in `mod` and `use` lines.

    Args:
        v (str): Requested module name.

    Returns:
        str: The stripped module name.

    Raises:
        ValueError: If the name is not a valid identifier.
    """
    v_clean = v.strip()
    if not v_clean.isidentifier():
      raise ValueError(f"runtime_module must be a valid identifier, got '{v}'")
    return v_clean

  @classmethod
  def load(
    cls,
    indent_width: Optional[int] = None,
    strict_mode: Optional[bool] = None,
    runtime_module: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        indent_width (Optional[int]): Override for the indentation step.
        strict_mode (Optional[bool]): Override for strict mode.
        runtime_module (Optional[str]): Override for the runtime module name.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    values: Dict[str, Any] = dict(toml_config)
    overrides = {
      "indent_width": indent_width,
      "strict_mode": strict_mode,
      "runtime_module": runtime_module,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    known = {k: v for k, v in values.items() if k in cls.model_fields}
    return cls(**known)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None
      return data.get("tool", {}).get("shellrs", {}), parent

  return {}, None
