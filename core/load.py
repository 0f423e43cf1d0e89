"""Loading raw package.json / registry document text."""

import json
from typing import Any

from .errors import InvalidFormat


def load_document(content: str) -> Any:
    """Parse raw JSON text into a document.

    No schema check is performed here; any well-formed JSON value is returned.

    Args:
        content: The package.json or registry document text

    Returns:
        The parsed document

    Raises:
        InvalidFormat: If the text is not valid JSON
    """
    try:
        return json.loads(content)
    except (json.JSONDecodeError, TypeError) as e:
        raise InvalidFormat(f"Invalid package.json format: {e}", cause=e) from e
