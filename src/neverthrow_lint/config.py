"""
Runtime Configuration Store.

Holds the name sets the rule engine classifies against and the module whose
imports are tracked. Values default to the neverthrow API and may be
overridden from ``[tool.neverthrow_lint]`` in ``pyproject.toml`` or from the CLI.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, ValidationError, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "neverthrow_lint"

DEFAULT_CONSTRUCTOR_NAMES = ["Ok", "Err"]
DEFAULT_FACTORY_NAMES = ["ok", "err", "okAsync", "errAsync"]
DEFAULT_HANDLING_METHODS = ["match", "unwrapOr", "_unsafeUnwrap"]
DEFAULT_TRANSFORMING_METHODS = [
  "map",
  "mapErr",
  "andThen",
  "orElse",
  "asyncAndThen",
  "asyncMap",
  "isOk",
  "isErr",
]
# Helpers whose names contain "result" but which never return a Result.
DEFAULT_HEURISTIC_EXCLUSIONS = [
  "isResultConstructorCall",
  "isResultMethodCall",
  "isResultIdentifier",
  "hasResultMethodChain",
  "checkResult",
  "hasResult",
  "processResult",
]


class LintConfig(BaseModel):
  """
  Configuration container for the must-use-result rule.
  """

  target_module: str = Field("neverthrow", description="Module whose imports bind factory names.")
  constructor_names: List[str] = Field(
    default_factory=lambda: list(DEFAULT_CONSTRUCTOR_NAMES),
    description="Class names whose `new` invocations always produce a Result.",
  )
  factory_names: List[str] = Field(
    default_factory=lambda: list(DEFAULT_FACTORY_NAMES),
    description="Function names producing a Result when imported from the target module.",
  )
  handling_methods: List[str] = Field(
    default_factory=lambda: list(DEFAULT_HANDLING_METHODS),
    description="Methods that resolve a Result.",
  )
  transforming_methods: List[str] = Field(
    default_factory=lambda: list(DEFAULT_TRANSFORMING_METHODS),
    description="Methods that propagate a Result without resolving it.",
  )
  heuristic_token: str = Field("result", description="Case-insensitive substring marking likely Result producers.")
  heuristic_exclusions: List[str] = Field(
    default_factory=lambda: list(DEFAULT_HEURISTIC_EXCLUSIONS),
    description="Exact callee names exempt from the name heuristic.",
  )

  @field_validator("target_module", "heuristic_token")
  @classmethod
  def validate_non_empty(cls, v: str) -> str:
    """
    Strips whitespace and rejects empty values.

    Args:
        v (str): Raw value.

    Returns:
        str: The stripped value.

    Raises:
        ValueError: If the value is blank.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("Value must not be empty.")
    return v_clean

  @field_validator("constructor_names", "factory_names", "handling_methods")
  @classmethod
  def validate_name_set(cls, v: List[str]) -> List[str]:
    """
    Rejects empty name sets, which would silently disable a category.

    Args:
        v (List[str]): Raw list of names.

    Returns:
        List[str]: The names with surrounding whitespace removed.

    Raises:
        ValueError: If no usable name remains.
    """
    cleaned = [name.strip() for name in v if name.strip()]
    if not cleaned:
      raise ValueError("Name set must contain at least one entry.")
    return cleaned

  @classmethod
  def from_mapping(cls, data: Dict[str, Any]) -> "LintConfig":
    """
    Validates a raw mapping (e.g. a TOML table).

    Args:
        data (Dict[str, Any]): Raw settings.

    Returns:
        LintConfig: The validated configuration.

    Raises:
        ValueError: If validation fails.
    """
    try:
      return cls.model_validate(data)
    except ValidationError as e:
      raise ValueError(f"Invalid neverthrow-lint configuration: {e}")

  @classmethod
  def load(
    cls,
    search_path: Optional[Path] = None,
    target_module: Optional[str] = None,
  ) -> "LintConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        target_module (Optional[str]): Override for the tracked module name.

    Returns:
        LintConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    settings = dict(toml_config)
    if target_module:
      settings["target_module"] = target_module

    return cls.from_mapping(settings)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.

  Raises:
      ValueError: If the nearest pyproject.toml is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Could not parse {toml_path}: {e}")

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
