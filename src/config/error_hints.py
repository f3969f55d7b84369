"""Error hints for configuration and item validation errors.

Provides user-friendly hints with actionable remediation steps
for common validation errors.
"""

from typing import Final


# Mapping of error types to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    "missing": "This field is required. Please add it to your file.",
    "extra_forbidden": "Unknown field. Check the spelling against the documented fields.",
    "int_type": "This field must be an integer (whole number).",
    "int_parsing": "This field must be an integer (whole number).",
    "string_type": "This field must be a text string.",
    "bool_type": "This field must be true or false.",
    "bool_parsing": "This field must be true or false.",
    "list_type": "This field must be a list/array.",
    "model_type": "This section must be an object/mapping.",
    "greater_than_equal": "The value is too small. Check the minimum allowed.",
    "less_than_equal": "The value is too large. Check the maximum allowed.",
    "string_too_long": "The text is too long. Check maximum length requirement.",
    "too_long": "Too many entries. Split the batch into smaller files.",
    "string_pattern_mismatch": "The format is invalid. Use a version like '1.0'.",
    "file_not_found": "The file does not exist. Check the file path.",
    "file_read_error": "The file could not be read. Check that the path is a readable file, not a directory.",
    "yaml_parse_error": "Invalid YAML syntax. Check for proper indentation and formatting.",
}

# Field-specific hints for more context
FIELD_HINTS: Final[dict[str, str]] = {
    "version": "Must be a version string like '1.0'.",
    "top_n": "Must be a whole number of items, 0 or more (20 is typical).",
    "min_score": "Must be a whole number; items scoring below it are dropped.",
    "market_moving_only": "Must be true or false.",
    "feed_max_chars": "Must be between 1 and 50000 characters.",
    "diagnostic_limit": "Must be a whole number of entries, 0 or more.",
    "content": "Item text, at most 50000 characters.",
    "source": "Source name, at most 500 characters.",
    "title": "Optional headline, at most 1000 characters.",
    "url": "Optional link, at most 2000 characters.",
}


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a validation error.

    Args:
        error_type: The Pydantic error type (e.g., 'missing', 'int_type').
        field_name: Optional field name for field-specific hints.

    Returns:
        A user-friendly hint string.
    """
    if field_name:
        # 'items.0.content' -> 'content'
        simple_field = field_name.split(".")[-1]
        if simple_field in FIELD_HINTS:
            return FIELD_HINTS[simple_field]

    return ERROR_HINTS.get(
        error_type, "Check the configuration documentation for valid values."
    )


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a validation error with optional hint.

    Args:
        location: The error location (e.g., '0.content').
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}" if location else message
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
