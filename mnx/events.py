"""
mnx.events

Notes, rests, markings and the sequence content items.

A content item is a tagged variant selected by its ``type`` key:

    event | grace | tuplet | dynamic | ottava | space

``Grace.content`` holds events only; ``Tuplet.content`` holds any content
item, so tuplets nest.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Literal, Optional, Union, get_args

from pydantic import Discriminator, Field, SerializationInfo, SerializerFunctionWrapHandler, Tag, model_serializer
from pydantic.config import ConfigDict

from mnx.base import Location, MnxRecord, Value, json_keys
from mnx.enums import ContentKind
from mnx.errors import EncodeError
from mnx.primitives import (
    Bool,
    BracketPolicyField,
    EnclosureSymbolField,
    GraceKindField,
    Int,
    LabelValue,
    NumberDisplayField,
    PitchStepField,
    StemField,
    Str,
)


# =========================
# Lyrics / markings
# =========================
class Lines(MnxRecord):
    pass


class Lyrics(MnxRecord):
    lines: Optional[Lines] = None


class Accent(MnxRecord):
    pointing: Optional[StemField] = None


class Breath(MnxRecord):
    symbol: Optional[Str] = None


class SoftAccent(MnxRecord):
    pass


class Spiccato(MnxRecord):
    pass


class Staccatissimo(MnxRecord):
    pass


class Staccato(MnxRecord):
    pass


class Stress(MnxRecord):
    pass


class StrongAccent(MnxRecord):
    pointing: Optional[StemField] = None


class Tenuto(MnxRecord):
    pass


class Tremolo(MnxRecord):
    marks: Int


class Unstress(MnxRecord):
    pass


class Markings(MnxRecord):
    accent: Optional[Accent] = None
    breath: Optional[Breath] = None
    soft_accent: Optional[SoftAccent] = Field(default=None, alias="softAccent")
    spiccato: Optional[Spiccato] = None
    staccatissimo: Optional[Staccatissimo] = None
    staccato: Optional[Staccato] = None
    stress: Optional[Stress] = None
    strong_accent: Optional[StrongAccent] = Field(default=None, alias="strongAccent")
    tenuto: Optional[Tenuto] = None
    tremolo: Optional[Tremolo] = None
    unstress: Optional[Unstress] = None


# =========================
# Notes / rests / slurs
# =========================
class Enclosure(MnxRecord):
    symbol: EnclosureSymbolField


class AccidentalDisplay(MnxRecord):
    enclosure: Optional[Enclosure] = None
    show: Bool


class Perform(MnxRecord):
    pass


class Pitch(MnxRecord):
    alter: Optional[Int] = None
    octave: Int
    step: PitchStepField


class Tie(MnxRecord):
    location: Optional[Str] = None
    side: Optional[StemField] = None
    target: Optional[Str] = Field(default=None, description="id of the note tied to")


class Note(MnxRecord):
    accidental_display: Optional[AccidentalDisplay] = Field(default=None, alias="accidentalDisplay")
    class_: Optional[Str] = Field(default=None, alias="class")
    id: Optional[Str] = None
    perform: Optional[Perform] = None
    pitch: Pitch
    smufl_font: Optional[Str] = Field(default=None, alias="smuflFont")
    staff: Optional[Int] = None
    tie: Optional[Tie] = None


class Rest(MnxRecord):
    staff_position: Optional[Int] = Field(default=None, alias="staffPosition")


class Slur(MnxRecord):
    end_note: Optional[Str] = Field(default=None, alias="endNote")
    line_type: Optional[Str] = Field(default=None, alias="lineType")
    location: Optional[Str] = None
    side: Optional[StemField] = None
    side_end: Optional[StemField] = Field(default=None, alias="sideEnd")
    start_note: Optional[Str] = Field(default=None, alias="startNote")
    target: Optional[Str] = None


class NoteValueQuantity(MnxRecord):
    """``multiple`` notes of ``duration``: one side of a tuplet ratio, or the length of a space."""

    duration: Value
    multiple: Int


# Tags for the two shapes a space duration may take; never JSON keys.
NOTE_VALUE = "note-value"
NOTE_VALUE_QUANTITY = "note-value-quantity"
DURATION_SHAPES: FrozenSet[str] = frozenset({NOTE_VALUE, NOTE_VALUE_QUANTITY})


def duration_shape(value: Any) -> str:
    if isinstance(value, NoteValueQuantity):
        return NOTE_VALUE_QUANTITY
    if isinstance(value, dict) and ("duration" in value or "multiple" in value):
        return NOTE_VALUE_QUANTITY
    return NOTE_VALUE


# {"base": ...} or {"duration": {"base": ...}, "multiple": n}
SpaceDuration = Annotated[
    Union[
        Annotated[Value, Tag(NOTE_VALUE)],
        Annotated[NoteValueQuantity, Tag(NOTE_VALUE_QUANTITY)],
    ],
    Discriminator(duration_shape),
]


# =========================
# Content items
# =========================
# Union of the keys any content-item variant declares. A key declared by
# another variant is kept verbatim on the item it appears on.
CONTENT_ITEM_KEYS: FrozenSet[str] = frozenset(
    {
        "bracket",
        "class",
        "color",
        "content",
        "duration",
        "end",
        "glyph",
        "graceType",
        "id",
        "inner",
        "lyrics",
        "markings",
        "measure",
        "notes",
        "orient",
        "outer",
        "rest",
        "showNumber",
        "showValue",
        "slash",
        "slurs",
        "smuflFont",
        "staff",
        "stemDirection",
        "type",
        "value",
    }
)


class ContentItemRecord(MnxRecord):
    model_config = ConfigDict(extra="allow")

    tolerated_keys: ClassVar[FrozenSet[str]] = CONTENT_ITEM_KEYS

    @property
    def kind(self) -> ContentKind:
        return ContentKind(self.type)

    @model_serializer(mode="wrap")
    def _emit_known_keys(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Dict[str, Any]:
        tag = get_args(type(self).model_fields["type"].annotation)[0]
        if self.type != tag:
            raise EncodeError(f"{type(self).__name__} holds type {self.type!r}, expected {tag!r}")

        # extras set by attribute assignment bypass validation
        data = handler(self)
        declared = json_keys(type(self)) if info.by_alias else frozenset(type(self).model_fields)
        return {key: value for key, value in data.items() if key in declared or key in self.tolerated_keys}


class Event(ContentItemRecord):
    """Notes sounded together, or a rest."""

    duration: Optional[Value] = None
    id: Optional[Str] = None
    lyrics: Optional[Lyrics] = None
    markings: Optional[Markings] = None
    measure: Optional[Bool] = Field(default=None, description="whole-measure rest")
    notes: Optional[List[Note]] = None
    orient: Optional[Str] = None
    rest: Optional[Rest] = None
    slurs: Optional[List[Slur]] = None
    smufl_font: Optional[Str] = Field(default=None, alias="smuflFont")
    staff: Optional[Int] = None
    stem_direction: Optional[StemField] = Field(default=None, alias="stemDirection")
    type: Literal["event"]


class Grace(ContentItemRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    content: List[Event]
    grace_type: Optional[GraceKindField] = Field(default=None, alias="graceType")
    slash: Optional[Bool] = None
    type: Literal["grace"]


class Tuplet(ContentItemRecord):
    bracket: Optional[BracketPolicyField] = None
    content: Optional[List[ContentItem]] = None
    inner: NoteValueQuantity
    outer: NoteValueQuantity
    show_number: Optional[NumberDisplayField] = Field(default=None, alias="showNumber")
    show_value: Optional[NumberDisplayField] = Field(default=None, alias="showValue")
    type: Literal["tuplet"]
    value: Optional[LabelValue] = None


class Dynamic(ContentItemRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    end: Location
    glyph: Optional[Str] = None
    type: Literal["dynamic"]
    value: LabelValue


class Ottava(ContentItemRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    end: Location
    glyph: Optional[Str] = None
    type: Literal["ottava"]
    value: LabelValue


class Space(ContentItemRecord):
    duration: SpaceDuration
    id: Optional[Str] = None
    orient: Optional[Str] = None
    staff: Optional[Int] = None
    type: Literal["space"]


ContentItem = Annotated[
    Union[Event, Grace, Tuplet, Dynamic, Ottava, Space],
    Field(discriminator="type"),
]

CONTENT_ITEM_TYPES = {
    ContentKind.event: Event,
    ContentKind.grace: Grace,
    ContentKind.tuplet: Tuplet,
    ContentKind.dynamic: Dynamic,
    ContentKind.ottava: Ottava,
    ContentKind.space: Space,
}

Tuplet.model_rebuild()
