"""Building a Layout from application-supplied configuration.

This is the boundary between the embedding application and the layout
models. Nothing here reads process-wide state: the application passes in
its `keyboard_layout` configuration namespace, or the path of a JSON file
holding it.

Example:
    ```python
    settings = {
        "layout": {
            "leds": [{"id": "l1", "x": 0, "y": 0}],
            "keys": [{"id": "k1", "x": 0, "y": 0, "opts": {"led": "l1"}}],
        }
    }
    layout = load_from_config(settings)
    ```
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from keyboard_layout.exceptions import MissingConfiguration, wrap_pydantic_error
from keyboard_layout.models import KeyboardLayoutConfig, Layout
from keyboard_layout.persistence import PydanticPersistence

logger = logging.getLogger(__name__)


def load_from_config(
    config: Union[KeyboardLayoutConfig, Mapping[str, Any], None],
    source: str | None = None,
) -> Layout:
    """
    Build the layout defined in the `keyboard_layout` configuration namespace.

    Args:
        config: The namespace, as a KeyboardLayoutConfig or a plain mapping
        source: Where the configuration came from, used in error messages

    Returns:
        Layout: The configured layout

    Raises:
        MissingConfiguration: If `config` is None or has no `layout` entry
        ConfigValidationError: If an entry has the wrong shape or type
        LayoutError: If keys and LEDs are inconsistent (see Layout.new)
    """
    if config is None:
        logger.error("No keyboard_layout configuration supplied")
        raise MissingConfiguration(source)

    if not isinstance(config, KeyboardLayoutConfig):
        try:
            config = KeyboardLayoutConfig.model_validate(dict(config))
        except ValidationError as e:
            logger.error(f"Invalid keyboard_layout configuration: {e}")
            raise wrap_pydantic_error(e, source) from e

    if config.layout is None:
        logger.error("keyboard_layout configuration has no 'layout' entry")
        raise MissingConfiguration(source)

    layout = config.layout.to_layout()
    logger.info(
        f"Loaded keyboard layout with {len(layout.keys)} keys and {len(layout.leds)} LEDs"
        + (f" from {source}" if source else "")
    )
    return layout


def load_from_file(path: Path) -> Layout:
    """
    Build the layout defined in a JSON file holding the configuration namespace.

    Raises:
        MissingConfiguration: If the file does not exist or defines no layout
        ConfigFileInvalidError: If the file is empty or not valid JSON
        ConfigValidationError: If an entry has the wrong shape or type
    """
    try:
        config = PydanticPersistence.load_json(path, KeyboardLayoutConfig)
    except FileNotFoundError as e:
        logger.error(f"Layout configuration file not found: {path}")
        raise MissingConfiguration(str(path)) from e

    return load_from_config(config, source=str(path))
