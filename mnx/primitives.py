"""
mnx.primitives

Primitive codec: JSON scalars <-> typed values.

Every primitive is an ``Annotated`` type carrying its own decode rule
(a pydantic validator) and encode rule (a pydantic serializer):

- decode is strict about JSON kinds: no numeric strings, no bools as ints;
- encode refuses values of the wrong Python type with ``EncodeError``
  instead of writing whatever the caller left in the model.

Optionality is expressed by the models as ``Optional[X] = None``: a missing
key and a key holding ``null`` both decode to ``None``, and ``None`` is
written back as ``null``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Type, TypeVar, Union

from pydantic import AfterValidator, BeforeValidator, Field, PlainSerializer, PlainValidator, Strict
from pydantic_core import PydanticCustomError

from mnx.enums import (
    BarlineType,
    BeamHookDirection,
    BracketPolicy,
    ClefSign,
    EnclosureSymbol,
    GraceKind,
    GroupSymbol,
    JumpType,
    NoteBase,
    NumberDisplay,
    PitchStep,
    Stem,
)
from mnx.errors import EncodeError

E = TypeVar("E", bound=Enum)


# =========================
# Scalars
# =========================
def encode_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"expected an integer, got {type(value).__name__} {value!r}")
    return value


def encode_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise EncodeError(f"expected a boolean, got {type(value).__name__} {value!r}")
    return value


def encode_str(value: Any) -> str:
    # enum members are str subclasses; a plain string field must not hold one
    if not isinstance(value, str) or isinstance(value, Enum):
        raise EncodeError(f"expected a string, got {type(value).__name__} {value!r}")
    return str(value)


Int = Annotated[int, Strict(), PlainSerializer(encode_int, return_type=int)]
Bool = Annotated[bool, Strict(), PlainSerializer(encode_bool, return_type=bool)]
Str = Annotated[str, Strict(), PlainSerializer(encode_str, return_type=str)]


# =========================
# Fraction: [numerator, denominator]
# =========================
def check_fraction(value: List[int]) -> List[int]:
    if value[1] <= 0:
        raise PydanticCustomError(
            "fraction_denominator",
            "fraction denominator must be positive, got {denominator}",
            {"denominator": value[1]},
        )
    return value


FractionPair = Annotated[
    List[Int],
    Field(min_length=2, max_length=2),
    AfterValidator(check_fraction),
]


# =========================
# Integer-or-string union (tuplet/dynamic/ottava ``value``)
# =========================
def decode_label_value(value: Any) -> Union[int, str]:
    # JSON booleans are ints in Python; they are not label values
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise PydanticCustomError(
            "label_value_type",
            "value must be an integer or a string, got {kind}",
            {"kind": type(value).__name__},
        )
    return value


def encode_label_value(value: Any) -> Union[int, str]:
    if isinstance(value, bool) or not isinstance(value, (int, str)) or isinstance(value, Enum):
        raise EncodeError(f"value must be an integer or a string, got {type(value).__name__} {value!r}")
    return value


LabelValue = Annotated[
    Union[int, str],
    PlainValidator(decode_label_value),
    PlainSerializer(encode_label_value),
]


# =========================
# Enumerations
# =========================
def decode_enum(enum_cls: Type[E], value: Any) -> E:
    """Exact, case-sensitive lookup of a JSON literal."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError(
            "enum_type",
            "{enum} literal must be a string, got {kind}",
            {"enum": enum_cls.__name__, "kind": type(value).__name__},
        )
    member = enum_cls._value2member_map_.get(value)
    if member is None:
        raise PydanticCustomError(
            "enum_literal",
            "unknown {enum} literal {literal}",
            {"enum": enum_cls.__name__, "literal": repr(value), "expected": [m.value for m in enum_cls]},
        )
    return member


def encode_enum(enum_cls: Type[E], value: Any) -> str:
    if not isinstance(value, enum_cls):
        raise EncodeError(f"{value!r} is not a {enum_cls.__name__} member")
    return value.value


def enum_codec(enum_cls: Type[E]) -> Any:
    """Build the annotated field type for ``enum_cls``."""

    def _decode(value: Any) -> E:
        return decode_enum(enum_cls, value)

    def _encode(value: Any) -> str:
        return encode_enum(enum_cls, value)

    return Annotated[enum_cls, BeforeValidator(_decode), PlainSerializer(_encode, return_type=str)]


BarlineTypeField = enum_codec(BarlineType)
JumpTypeField = enum_codec(JumpType)
NoteBaseField = enum_codec(NoteBase)
StemField = enum_codec(Stem)
GroupSymbolField = enum_codec(GroupSymbol)
BeamHookDirectionField = enum_codec(BeamHookDirection)
ClefSignField = enum_codec(ClefSign)
BracketPolicyField = enum_codec(BracketPolicy)
EnclosureSymbolField = enum_codec(EnclosureSymbol)
PitchStepField = enum_codec(PitchStep)
GraceKindField = enum_codec(GraceKind)
NumberDisplayField = enum_codec(NumberDisplay)
