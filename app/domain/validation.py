"""Declarative field validation.

A rule is a pure function ``(value) -> str | None`` returning an error message
when the value violates the constraint. Entities declare a rule table mapping
each field name to its rules; :func:`validate_fields` evaluates the whole table.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

Rule = Callable[[Any], str | None]


def not_blank(message: str = "Cette valeur ne doit pas être vide.") -> Rule:
    """Fails on None, empty strings and empty collections."""

    def rule(value: Any) -> str | None:
        if value is None or value == "" or value == [] or value == {}:
            return message
        return None

    return rule


def not_null(message: str = "Cette valeur ne doit pas être nulle.") -> Rule:
    def rule(value: Any) -> str | None:
        return message if value is None else None

    return rule


def max_length(limit: int, message: str | None = None) -> Rule:
    """Fails when a string is longer than *limit* characters. None passes."""
    text = message or f"Cette chaîne est trop longue. Elle doit avoir au maximum {limit} caractères."

    def rule(value: Any) -> str | None:
        if isinstance(value, str) and len(value) > limit:
            return text
        return None

    return rule


def validate(value: Any, rules: Sequence[Rule]) -> list[str]:
    """Run every rule against *value* and collect the error messages."""
    return [error for error in (rule(value) for rule in rules) if error is not None]


def validate_fields(
    values: Mapping[str, Any],
    rule_table: Mapping[str, Sequence[Rule]],
) -> dict[str, list[str]]:
    """Validate each field of *values* against its rules.

    Only fields with at least one error appear in the result, so an empty dict
    means the values are valid.
    """
    errors: dict[str, list[str]] = {}
    for field_name, rules in rule_table.items():
        messages = validate(values.get(field_name), rules)
        if messages:
            errors[field_name] = messages
    return errors
