"""Serializer fields shared across the domain apps."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class EnumChoiceField(serializers.ChoiceField):
    """ChoiceField whose error lists the accepted names, e.g.

    ``Invalid role. Available roles are: USER, OWNER``
    """

    def __init__(self, choices, *, label_name: str, plural_name: str | None = None, **kwargs):
        names = ", ".join(str(value) for value, _ in choices)
        plural_name = plural_name or f"{label_name}s"
        error_messages = kwargs.pop("error_messages", {})
        error_messages.setdefault(
            "invalid_choice",
            f"Invalid {label_name}. Available {plural_name} are: {names}",
        )
        super().__init__(choices, error_messages=error_messages, **kwargs)
