"""
Parameter readers used by action handlers.

Handlers receive the validated arguments as a plain dict keyed by wire names
(``teamId``, ``voiceId``...). These helpers apply the presence rules on top of
schema validation: strings are trimmed, blank counts as missing, and a missing
required value raises ToolInputError naming the parameter.
"""

from typing import Any, Dict, Optional, Union

from .errors import ToolInputError

Number = Union[int, float]


def read_string_param(
    params: Dict[str, Any],
    key: str,
    required: bool = False,
    label: Optional[str] = None,
) -> Optional[str]:
    """
    Read a string parameter.

    Args:
        params: Validated arguments
        key: Parameter name
        required: Raise when missing or blank
        label: Name used in the error message (defaults to key)

    Returns:
        Trimmed value, or None when absent/blank and not required
    """
    name = label or key
    raw = params.get(key)
    if raw is None:
        value = None
    elif isinstance(raw, str):
        value = raw.strip() or None
    else:
        raise ToolInputError(f"{name} must be a string")

    if value is None and required:
        raise ToolInputError(f"{name} required")
    return value


def read_number_param(
    params: Dict[str, Any],
    key: str,
    required: bool = False,
    default: Optional[Number] = None,
    label: Optional[str] = None,
) -> Optional[Number]:
    """Read a numeric parameter, falling back to *default* when absent."""
    name = label or key
    raw = params.get(key)
    if raw is None:
        if required:
            raise ToolInputError(f"{name} required")
        return default
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ToolInputError(f"{name} must be a number")
    return raw


def require_repo(owner: Optional[str], repo: Optional[str], action: str) -> None:
    """Owner and repo must be given together for repository-scoped actions."""
    if not owner or not repo:
        raise ToolInputError(f"owner and repo are required for {action}")


def drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of *values* without None entries (absent fields are not sent)."""
    return {key: value for key, value in values.items() if value is not None}
