"""Parameter checks shared by the resource handlers."""

from collections.abc import Mapping
from typing import Any, NoReturn


class KanValidationError(ValueError):
    """Raised when a tool call lacks a parameter its action needs."""


def require(params: Mapping[str, Any], action: str, *fields: str) -> None:
    """Fail on the first field that is absent, None or an empty string."""
    for name in fields:
        if params.get(name) in (None, ""):
            raise KanValidationError(f"{name} required for {action}")


def pick(params: Mapping[str, Any], *fields: str) -> dict[str, Any]:
    """Copy the optional fields the caller actually supplied.

    Presence decides, not truthiness: False, 0 and "" are forwarded.
    """
    return {name: params[name] for name in fields if params.get(name) is not None}


def unknown_action(resource: str, action: Any) -> NoReturn:
    raise KanValidationError(f"Unknown {resource} action: {action}")
