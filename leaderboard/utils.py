"""JSON file helpers for the ranker config and output."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('leaderboard.utils')


def load_model(path: Path | str, schema: type[T], default: T) -> T:
    """Read a JSON file into `schema`, or return `default` if it is missing or invalid."""
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            return schema.model_validate(json.load(f))
    except FileNotFoundError:
        logger.debug(f'{path} not found, using defaults')
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning(f'Ignoring invalid {path}: {e}')
    return default


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
    create_dirs: bool = True,
) -> None:
    """
    Save data as JSON file.

    Pydantic models (or lists of them) are dumped by alias so the file
    carries the public field names.

    Args:
        path: Path to write to (str or Path object)
        data: Data to serialize (JSON-serializable, a Pydantic model, or a list of models)
        indent: Indentation level (default: 2 spaces)
        create_dirs: Create parent directories if they don't exist (default: True)

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')

    if create_dirs:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f'Failed to create directory {path.parent}: {e}')
            raise

    if isinstance(data, BaseModel):
        json_data = data.model_dump(by_alias=True)
    elif isinstance(data, list):
        json_data = [
            item.model_dump(by_alias=True) if isinstance(item, BaseModel) else item
            for item in data
        ]
    else:
        json_data = data

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False)
        logger.debug(f'Successfully saved JSON to: {path}')
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise
