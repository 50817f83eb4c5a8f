"""Configuration for assertkit reporters.

Settings live in the ``[tool.assertkit]`` table of a project's
``pyproject.toml``::

    [tool.assertkit]
    max_repr_length = 120
    pytrace = true

A missing file or table yields the defaults.
"""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from assertkit.errors import ConfigError

logger = logging.getLogger(__name__)


class AssertConfig(BaseModel):
    """Reporter settings.

    Parameters
    ----------
    max_repr_length:
        Maximum length of a value rendered in a failure message.
    pytrace:
        Whether ``pytest.fail`` shows the Python traceback of an aborted
        check.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    max_repr_length: int = Field(80, ge=8)
    pytrace: StrictBool = False


DEFAULT_CONFIG = AssertConfig()


def load_config(path: str | Path) -> AssertConfig:
    """Load an ``AssertConfig`` from the ``pyproject.toml`` at ``path``.

    Raises
    ------
    ConfigError
        If the file is not valid TOML, or the table holds unknown keys or
        values of the wrong type.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("No %s; using default assertkit settings", path)
        return DEFAULT_CONFIG

    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path} is not valid TOML: {exc}") from exc

    table = document.get("tool", {}).get("assertkit")
    if table is None:
        logger.debug("No [tool.assertkit] table in %s", path)
        return DEFAULT_CONFIG
    if not isinstance(table, dict):
        raise ConfigError("[tool.assertkit] must be a table")

    try:
        config = AssertConfig.model_validate(table)
    except ValidationError as exc:
        raise _config_error(exc) from exc
    logger.debug("Loaded assertkit settings from %s: %s", path, config)
    return config


def _config_error(exc: ValidationError) -> ConfigError:
    problems = [(".".join(str(part) for part in problem["loc"]), problem["msg"]) for problem in exc.errors()]
    if len(problems) == 1:
        key, message = problems[0]
        return ConfigError(message, key=key)
    return ConfigError("; ".join(f"{key}: {message}" for key, message in problems))
