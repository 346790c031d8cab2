"""Export configuration loader.

Loads and validates element-copier.config.json configuration files.
"""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .copier_logging import get_logger
from .errors import ConfigurationError

logger = get_logger()

# Default configuration file name
CONFIG_FILENAME = "element-copier.config.json"

# Environment variable pointing at an explicit config file
CONFIG_ENV_VAR = "ELEMENT_COPIER_CONFIG"

# id prefix of the picking overlay's own elements
DEFAULT_IGNORED_ID_PREFIX = "__html-picker"


class ExportConfig(BaseModel):
    """Settings for one export run.

    Keys may be given in snake_case or in the camelCase form used by the
    JSON config file.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    # Class naming
    root_class_name: str = Field(default="copied-el", alias="rootClassName", min_length=1)
    child_class_prefix: str = Field(
        default="copied-el-c", alias="childClassPrefix", min_length=1
    )

    # Elements owned by the picking overlay, skipped with their subtree
    ignored_id_prefix: str = Field(
        default=DEFAULT_IGNORED_ID_PREFIX, alias="ignoredIdPrefix"
    )

    # Pretty-printing
    indent_width: int = Field(default=2, alias="indentWidth", ge=1, le=8)
    inline_text_limit: int = Field(default=80, alias="inlineTextLimit", ge=1)

    @model_validator(mode="after")
    def check_class_names(self) -> "ExportConfig":
        """Reject a root class name that a child ordinal would also produce."""
        suffix = self.root_class_name.removeprefix(self.child_class_prefix)
        if suffix != self.root_class_name and suffix.isdigit() and suffix[0] != "0":
            raise ValueError(
                f"rootClassName '{self.root_class_name}' collides with the "
                f"generated child class names '{self.child_class_prefix}N'"
            )
        return self

    def child_class_name(self, ordinal: int) -> str:
        """Generated class name for the ordinal-th descendant (1-based)."""
        return f"{self.child_class_prefix}{ordinal}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the config-file key names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportConfig":
        """Create from dictionary.

        Raises:
            ConfigurationError: If a value fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


class ExportConfigLoader:
    """Loader for export configuration."""

    def __init__(self, project_path: Path | None = None):
        """Initialize the config loader.

        Args:
            project_path: Path to the project root. Defaults to current directory.
        """
        self.project_path = Path(project_path) if project_path else Path.cwd()

    def load(self, config_path: Path | None = None) -> ExportConfig:
        """Load export configuration.

        Precedence (highest to lowest):
        1. Explicit config_path
        2. Environment variable ELEMENT_COPIER_CONFIG
        3. element-copier.config.json in project root
        4. Default configuration

        Args:
            config_path: Optional explicit path to config file.

        Returns:
            Loaded ExportConfig instance.

        Raises:
            ConfigurationError: If an explicit path is missing, or a config
                file is not valid JSON or holds invalid values.
        """
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(
                    f"Config file not found: {config_path}",
                    config_file=str(config_path),
                )
            return self._load_from_file(config_path)

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            env_config_path = Path(env_path)
            if env_config_path.exists():
                return self._load_from_file(env_config_path)
            logger.warning(f"{CONFIG_ENV_VAR} points at missing file {env_path}")

        project_config = self.project_path / CONFIG_FILENAME
        if project_config.exists():
            return self._load_from_file(project_config)

        logger.debug("No export config found, using defaults")
        return ExportConfig()

    def _load_from_file(self, config_path: Path) -> ExportConfig:
        """Load configuration from a file.

        Args:
            config_path: Path to the config file.

        Returns:
            Loaded ExportConfig instance.
        """
        logger.debug(f"Loading export config from {config_path}")
        content = config_path.read_text(encoding="utf-8")
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Config file is not valid JSON: {e}",
                config_file=str(config_path),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                config_file=str(config_path),
            )

        try:
            return ExportConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                config_file=str(config_path),
            ) from e


def load_export_config(
    config_path: Path | None = None, project_path: Path | None = None
) -> ExportConfig:
    """Convenience function to load export configuration.

    Args:
        config_path: Optional explicit config file.
        project_path: Optional project root path.

    Returns:
        Loaded ExportConfig instance.
    """
    loader = ExportConfigLoader(project_path)
    return loader.load(config_path)
