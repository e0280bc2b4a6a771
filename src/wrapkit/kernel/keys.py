"""Key formatting: naming-convention transforms for output keys."""

import re
from enum import Enum


class KeyStyle(str, Enum):
    """Naming convention applied to keys that are not overridden."""

    MATCH_PROPERTY_NAME = "match_property_name"
    CONVERT_TO_SNAKE_CASE = "convert_to_snake_case"
    CONVERT_TO_CAMEL_CASE = "convert_to_camel_case"


# Word boundaries: "launchLive" -> "launch|Live", "URLString" -> "URL|String"
_SNAKE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """Convert a camelCase / PascalCase name to snake_case.

    Pure function of its input; already snake-cased names come back unchanged.

    Examples:
        launchLiveStreamURL -> launch_live_stream_url
        URLString -> url_string
    """
    return _SNAKE_BOUNDARY.sub("_", name).lower()


def to_camel_case(name: str) -> str:
    """Convert a snake_case name to camelCase.

    Leading underscores are kept; names without inner underscores come back
    unchanged.
    """
    stripped = name.lstrip("_")
    prefix = name[: len(name) - len(stripped)]
    head, *rest = stripped.split("_")
    return prefix + head + "".join(part[:1].upper() + part[1:] for part in rest if part)


def format_key(name: str, style: KeyStyle = KeyStyle.MATCH_PROPERTY_NAME) -> str:
    """Apply a naming convention to a default field name."""
    if style == KeyStyle.CONVERT_TO_SNAKE_CASE:
        return to_snake_case(name)
    if style == KeyStyle.CONVERT_TO_CAMEL_CASE:
        return to_camel_case(name)
    return name
