"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This attribute is not allowed here",
    "string_type": "Must be a string",
    "bool_type": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be a mapping",
    "literal_error": "Must be one of the allowed values",
    "enum": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "string_pattern_mismatch": "Does not match the required pattern",
    "too_short": "List is too short",
}

# Attribute names that are commonly misspelled, mapped to their spelling
COMMON_TYPOS: dict[str, str] = {
    "renameAll": "rename_all",
    "rename-all": "rename_all",
    "renameAllFields": "rename_all_fields",
    "tsType": "ts_type",
    "ts-type": "ts_type",
    "type_params": "generics",
    "typeParams": "generics",
    "extend": "extends",
    "skip_serializing": "skip",
    "variant": "variants",
    "field": "fields",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, error["msg"])

    if error_type in ("literal_error", "enum"):
        base_msg = f"Must be one of: {ctx.get('expected', 'unknown')}"
    elif error_type == "string_pattern_mismatch":
        base_msg = f"Does not match pattern: {ctx.get('pattern', '')}"
    elif error_type == "too_short":
        base_msg = f"Must contain at least {ctx.get('min_length', 1)} item(s)"
    elif error_type == "value_error":
        base_msg = str(ctx.get("error", error["msg"]))

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string, e.g. ``types[0].fields[1].name``.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    if error_type == "extra_forbidden" and error["loc"]:
        attribute = str(error["loc"][-1])
        if attribute in COMMON_TYPOS:
            return f"Did you mean '{COMMON_TYPOS[attribute]}'?"

    suggestions: dict[str, str] = {
        "missing": "Add the required attribute to your YAML",
        "extra_forbidden": "Remove this attribute or check for typos",
        "literal_error": f"Use one of the allowed values: {ctx.get('expected', '')}",
        "enum": f"Use one of the allowed values: {ctx.get('expected', '')}",
        "string_pattern_mismatch": "Names must be identifiers (letters, digits and '_')",
    }

    return suggestions.get(error_type)
