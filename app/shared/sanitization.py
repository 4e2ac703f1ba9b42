"""Free-text input sanitization for fields rendered back in the admin UI"""

import html
import re
from typing import Optional

CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def sanitize_text(value: Optional[str], max_length: int = 500) -> Optional[str]:
    """
    Strip, HTML-escape and length-check a free-text field.

    Returns None for None and empty strings so optional columns stay NULL.
    The limit applies to the escaped value, which is what gets stored.

    Raises:
        ValueError: If the escaped value is longer than ``max_length``
    """
    if value is None:
        return None

    value = str(value).strip()
    if not value:
        return None

    value = CONTROL_CHARS.sub("", html.escape(value, quote=True))
    if len(value) > max_length:
        raise ValueError(f"Texto excede o limite de {max_length} caracteres")
    return value
