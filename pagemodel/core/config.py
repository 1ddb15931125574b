"""
Pydantic model for validating pagemodel.yml

Every key is optional. A missing file means all defaults are used.

Example:

    timeout: 20
    poll_frequency: 0.25
    screenshot_dir: build/screenshots
    remote_url: http://127.0.0.1:4723
    capabilities:
        platformName: Android
        appium:automationName: UiAutomator2
        appium:app: /path/to/TheApp.apk
"""

from logging import getLogger
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from yaml.error import MarkedYAMLError

from pagemodel.core.exceptions import ConfigError

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "pagemodel.yml"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(
        15.0,
        gt=0,
        description="Seconds to wait for an element to be present before failing.",
    )
    poll_frequency: float = Field(
        0.5, gt=0, description="Seconds between presence checks while waiting."
    )
    implicit_wait: float = Field(
        0.0, ge=0, description="Implicit wait applied to the driver when opened."
    )
    screenshot_dir: Path = Field(
        Path("screenshots"), description="Where screenshots are written on failure."
    )
    remote_url: Optional[str] = Field(
        None, description="URL of a Selenium grid or Appium server."
    )
    capabilities: Dict[str, Any] = Field(
        {}, description="Capabilities sent when a remote session is created."
    )


def load_settings(path: Union[str, Path, None] = None, **overrides) -> Settings:
    """Load settings from a yaml file

    If no path is given, ./pagemodel.yml is used when it exists.
    Keyword arguments whose value is not None override values from the file.
    """
    data = {}
    if path is None and Path(DEFAULT_CONFIG_FILENAME).exists():
        path = DEFAULT_CONFIG_FILENAME

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError("File not found", config_name=str(path))
        logger.debug(f"loading settings from {path}")
        data = _load_yaml(path)

    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(_format_errors(e), config_name=str(path or "<defaults>"))


def _load_yaml(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except MarkedYAMLError as e:
            line_num = e.problem_mark.line + 1
            column_num = e.problem_mark.column
            raise ConfigError(
                f"An error occurred parsing yaml at line {line_num}, column {column_num}: {e.problem}",
                config_name=str(path),
            )
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a mapping at the top level but found {type(data).__name__}",
            config_name=str(path),
        )
    return data


def _format_errors(e: ValidationError) -> str:
    messages = []
    for error in e.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}")
    return "Invalid settings (" + "; ".join(messages) + ")"
