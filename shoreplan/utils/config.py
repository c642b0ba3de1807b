import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from shoreplan.schema.excursion import ExcursionConfig
from shoreplan.validation.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_yaml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML mapping from disk.

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable or not a YAML mapping.
    """
    path = Path(filepath)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration {path} must be a YAML mapping")
    return data


def load_excursion_config(filepath: Union[str, Path]) -> ExcursionConfig:
    """
    Load and validate an itinerary configuration file.

    A relative ``storage_dir`` is resolved against the configuration file's
    directory.
    """
    path = Path(filepath)
    data = load_yaml(path)
    try:
        config = ExcursionConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid excursion configuration {path}:\n{e}") from e

    storage_dir = Path(config.storage_dir)
    if not storage_dir.is_absolute():
        config.storage_dir = str(path.resolve().parent / storage_dir)

    logger.debug(
        f"Loaded '{config.excursion_name}' with {len(config.activities)} activities"
    )
    return config


def save_excursion_config(config: ExcursionConfig, filepath: Union[str, Path]) -> None:
    """
    Saves an excursion configuration to a YAML file, preserving activity order.

    Args:
        config: The configuration to write.
        filepath: Destination path.
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_none=True)
    try:
        with open(path, "w", encoding="utf-8") as f:
            # sort_keys=False preserves insertion order (the itinerary order)
            yaml.dump(
                data, f, sort_keys=False, default_flow_style=False, allow_unicode=True
            )
        logger.info(f"✅ Configuration saved to {path}")
    except Exception as e:
        logger.error(f"❌ Failed to save configuration: {e}")
        raise
