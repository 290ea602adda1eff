"""CLI module for yaml-to-ts."""

from yaml_to_ts.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree, locate_line
from yaml_to_ts.cli.exception_handler import handle_exceptions
from yaml_to_ts.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "handle_exceptions",
    "locate_line",
    "translate_pydantic_error",
]
