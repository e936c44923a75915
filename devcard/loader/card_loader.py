"""
Card loading for devcard.

Decodes devcard YAML into plain Python mappings and strips control
characters so user text cannot inject terminal escapes.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

# C0/C1 control characters except \t and \n
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f\x80-\x9f]')

# Keys that never leave the local machine
PRIVATE_KEYS = ('private_note',)


class CardLoadError(ValueError):
    """Raised when a card file cannot be read or decoded."""


def strip_control(text: str) -> str:
    """Remove control characters from text, keeping newlines and tabs."""
    return _CONTROL_CHARS.sub('', text)


def sanitize_record(obj: Any) -> Any:
    """Recursively strip control characters from every string in a record."""
    if isinstance(obj, str):
        return strip_control(obj)
    if isinstance(obj, (list, tuple)):
        return [sanitize_record(item) for item in obj]
    if isinstance(obj, dict):
        return {sanitize_record(k) if isinstance(k, str) else k: sanitize_record(v)
                for k, v in obj.items()}
    return obj


def parse_card(text: str, source: str = '<string>') -> Dict[str, Any]:
    """
    Decode devcard YAML text.

    Args:
        text: YAML document
        source: Name used in error messages

    Returns:
        Decoded card mapping ({} for an empty document)

    Raises:
        CardLoadError: If the YAML is invalid or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CardLoadError(f"Invalid YAML in {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CardLoadError(
            f"Expected a mapping at the top of {source}, got {type(data).__name__}"
        )
    return data


def load_card(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and decode a devcard YAML file.

    Raises:
        CardLoadError: If the file is missing, unreadable or not a valid card
    """
    path = Path(path).expanduser()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise CardLoadError(f"File not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CardLoadError(f"Error reading file {path}: {e}") from e

    logger.debug("Loaded card from %s (%d bytes)", path, len(text))
    return parse_card(text, source=str(path))


def safe_card_data(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a sanitized copy of a card without private fields."""
    return {k: v for k, v in sanitize_record(record).items() if k not in PRIVATE_KEYS}
