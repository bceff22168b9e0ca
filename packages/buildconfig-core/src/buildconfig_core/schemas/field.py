"""Typed constant declarations for generated BuildConfig classes.

This module defines FieldType and ClassField, plus the rules that turn
a field into a Java type expression and a Java literal:

- String  -> "escaped text"
- boolean -> true / false
- int     -> 42
- long    -> 42L
- raw     -> value emitted verbatim, typed by the declared raw_type
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Java identifier pattern (ASCII subset)
JAVA_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Reserved words that can never be used as identifiers
JAVA_RESERVED_WORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "final", "finally", "float", "for", "goto",
        "if", "implements", "import", "instanceof", "int", "interface",
        "long", "native", "new", "package", "private", "protected", "public",
        "return", "short", "static", "strictfp", "super", "switch",
        "synchronized", "this", "throw", "throws", "transient", "try", "void",
        "volatile", "while", "true", "false", "null", "_",
    }
)  # fmt: skip

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1

_INTEGER_LITERAL = re.compile(r"^[+-]?\d+$")

_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


class FieldType(str, Enum):
    """Type tags a BuildConfig field may declare."""

    STRING = "string"
    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    RAW = "raw"

    @classmethod
    def parse(cls, tag: str | FieldType) -> FieldType:
        """Parse a type tag case-insensitively.

        Accepts "integer" as an alias for "int".

        Raises:
            ValueError: If the tag is not a known type.
        """
        if isinstance(tag, FieldType):
            return tag
        normalized = str(tag).strip().lower()
        if normalized == "integer":
            normalized = cls.INT.value
        try:
            return cls(normalized)
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown field type '{tag}'. Expected one of: {known}") from None


def is_java_identifier(name: str) -> bool:
    """Return True if name is a legal, non-reserved Java identifier."""
    return bool(JAVA_IDENTIFIER_PATTERN.match(name)) and name not in JAVA_RESERVED_WORDS


def is_java_package_name(name: str) -> bool:
    """Return True if name is a dotted sequence of Java identifiers."""
    return all(is_java_identifier(part) for part in name.split("."))


def escape_java_string(value: str) -> str:
    """Escape text for use inside a Java string literal.

    Control characters use octal escapes; unicode escapes would be
    translated by javac before lexing and break the literal.
    """
    out: list[str] = []
    for ch in value:
        if ch in _STRING_ESCAPES:
            out.append(_STRING_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\{ord(ch):03o}")
        else:
            out.append(ch)
    return "".join(out)


def _coerce_boolean(value: Any) -> bool:
    # Known false words stay false, anything else follows Python truthiness
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _FALSE_STRINGS:
            return False
    return bool(value)


def _coerce_integer(value: Any, lower: int, upper: int, kind: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"boolean value cannot be used as {kind}")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _INTEGER_LITERAL.match(value.strip()):
        number = int(value.strip())
    else:
        raise ValueError(f"'{value}' is not a valid {kind} literal")
    if not lower <= number <= upper:
        raise ValueError(f"{number} is out of range for {kind}")
    return number


class ClassField(BaseModel):
    """A single typed constant declaration, stored as declared.

    Nothing beyond basic shape is checked on construction. The type tag,
    identifier, and literal are validated when the owning profile is
    generated, so every error can name both profile and field.

    Attributes:
        name: Constant name in the generated class.
        type: Declared type tag (String, boolean, int, long, raw).
        value: Literal value, rendered according to type.
        raw_type: Java type expression, required when type is raw.

    Example:
        >>> ClassField(name="DEBUG", type="boolean", value=True).render_literal()
        'true'
        >>> ClassField(name="SEED", type="long", value=42).render_literal()
        '42L'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Constant name")
    type: str = Field(..., min_length=1, description="Declared type tag")
    value: Any = Field(default=None, description="Literal value")
    raw_type: str | None = Field(default=None, description="Java type expression for raw fields")

    @field_validator("type", mode="before")
    @classmethod
    def accept_field_type(cls, value: Any) -> Any:
        """Store FieldType members by their tag."""
        if isinstance(value, FieldType):
            return value.value
        return value

    @property
    def field_type(self) -> FieldType:
        """The parsed type tag.

        Raises:
            ValueError: If the tag is unknown.
        """
        return FieldType.parse(self.type)

    def java_type(self) -> str:
        """Return the Java type expression for this field.

        Raises:
            ValueError: If the tag is unknown or raw_type is misused.
        """
        field_type = self.field_type
        if field_type is FieldType.RAW:
            if not self.raw_type or not self.raw_type.strip():
                raise ValueError("raw fields must declare raw_type")
            return self.raw_type.strip()
        if self.raw_type is not None:
            raise ValueError(f"raw_type is only allowed on raw fields, not {field_type.value}")
        return {
            FieldType.STRING: "String",
            FieldType.BOOLEAN: "boolean",
            FieldType.INT: "int",
            FieldType.LONG: "long",
        }[field_type]

    def render_literal(self) -> str:
        """Render the value as a Java literal.

        Raises:
            ValueError: If the value cannot be expressed for the declared type.
        """
        field_type = self.field_type
        if field_type is FieldType.STRING:
            if self.value is None:
                raise ValueError("String fields require a value")
            return f'"{escape_java_string(str(self.value))}"'
        if field_type is FieldType.BOOLEAN:
            return "true" if _coerce_boolean(self.value) else "false"
        if field_type is FieldType.INT:
            return str(_coerce_integer(self.value, INT_MIN, INT_MAX, "int"))
        if field_type is FieldType.LONG:
            return f"{_coerce_integer(self.value, LONG_MIN, LONG_MAX, 'long')}L"
        # An empty raw value would render as `X = ;`, which never compiles
        if self.value is None or str(self.value) == "":
            raise ValueError("raw fields require a value")
        return str(self.value)
