"""Loading Pydantic models from JSON files.

Layout configuration is read-only input, so only the loading half of the
usual persistence helpers lives here. Low-level Pydantic errors are
converted into KeyboardLayoutError subclasses with recovery hints.
"""

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from keyboard_layout.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless helpers for reading Pydantic models from disk.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json(
            path=Path("layout.json"),
            model_type=KeyboardLayoutConfig,
        )
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid or the file is empty
            ConfigValidationError: If the JSON content fails Pydantic validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")

            if not json_content.strip():
                raise ConfigFileInvalidError(str(path), "File is empty")

            model = model_type.model_validate_json(json_content)

            logger.debug(f"Loaded {model_type.__name__} from {path}")
            return model

        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        except ConfigurationError:
            raise

        except OSError as e:
            logger.error(f"Unexpected error loading {model_type.__name__} from {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unexpected error: {e}") from e
