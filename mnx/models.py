"""
mnx.models

Document records: header, global timeline, parts, layouts and scores.

Field order is the JSON key order written on encode. JSON keys that are
Python keywords are renamed with a trailing underscore (``class`` ->
``class_``, ``global`` -> ``global_``); the alias keeps the JSON spelling.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from mnx.base import Location, MnxRecord, Position, Value
from mnx.enums import StaffKind
from mnx.events import ContentItem
from mnx.primitives import (
    BarlineTypeField,
    BeamHookDirectionField,
    Bool,
    ClefSignField,
    GroupSymbolField,
    Int,
    JumpTypeField,
    StemField,
    Str,
)


# =========================
# Header
# =========================
class Support(MnxRecord):
    use_accidental_display: Optional[Bool] = Field(default=None, alias="useAccidentalDisplay")


class MnxHeader(MnxRecord):
    support: Optional[Support] = None
    version: Int


# =========================
# Global timeline
# =========================
class Barline(MnxRecord):
    type: BarlineTypeField


class Ending(MnxRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    duration: Int = Field(..., description="Number of measures the ending spans")
    numbers: Optional[List[Int]] = None
    open: Optional[Bool] = None


class Fine(MnxRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    location: Position


class Jump(MnxRecord):
    location: Position
    type: JumpTypeField


class Key(MnxRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    fifths: Int


class RepeatEnd(MnxRecord):
    times: Optional[Int] = None


class RepeatStart(MnxRecord):
    pass


class Segno(MnxRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    glyph: Optional[Str] = None
    location: Position


class Tempo(MnxRecord):
    bpm: Int
    location: Optional[Location] = None
    value: Value


class Time(MnxRecord):
    count: Int
    unit: Int


class GlobalMeasure(MnxRecord):
    """Per-measure things shared by every part."""

    barline: Optional[Barline] = None
    ending: Optional[Ending] = None
    fine: Optional[Fine] = None
    index: Optional[Int] = None
    jump: Optional[Jump] = None
    key: Optional[Key] = None
    number: Optional[Int] = None
    repeat_end: Optional[RepeatEnd] = Field(default=None, alias="repeatEnd")
    repeat_start: Optional[RepeatStart] = Field(default=None, alias="repeatStart")
    segno: Optional[Segno] = None
    tempos: Optional[List[Tempo]] = None
    time: Optional[Time] = None


class Style(MnxRecord):
    color: Optional[Str] = None
    selector: Str


class Global(MnxRecord):
    measures: List[GlobalMeasure]
    styles: Optional[List[Style]] = None


# =========================
# Parts
# =========================
class BeamHook(MnxRecord):
    direction: BeamHookDirectionField
    event: Str


class Beam(MnxRecord):
    """Beamed events; ``inner`` holds the secondary beams, to any depth."""

    events: List[Str]
    hooks: Optional[List[BeamHook]] = None
    inner: Optional[List[Beam]] = None


class Clef(MnxRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    color: Optional[Str] = None
    glyph: Optional[Str] = None
    octave: Optional[Int] = None
    sign: ClefSignField
    staff_position: Int = Field(..., alias="staffPosition")


class ClefChange(MnxRecord):
    clef: Clef
    position: Optional[Position] = None
    staff: Optional[Int] = None


class Sequence(MnxRecord):
    """One voice's ordered stream of content items in one measure."""

    content: List[ContentItem]
    orient: Optional[Str] = None
    staff: Optional[Int] = None
    voice: Optional[Str] = None


class PartMeasure(MnxRecord):
    beams: Optional[List[Beam]] = None
    clefs: Optional[List[ClefChange]] = None
    sequences: List[Sequence]


class Part(MnxRecord):
    id: Optional[Str] = None
    measures: Optional[List[PartMeasure]] = None
    name: Optional[Str] = None
    short_name: Optional[Str] = Field(default=None, alias="shortName")
    smufl_font: Optional[Str] = Field(default=None, alias="smuflFont")
    staves: Optional[Int] = None


# =========================
# Layouts
# =========================
class Source(MnxRecord):
    """Binds a part (optionally one voice/staff of it) to a layout staff."""

    label: Optional[Str] = None
    labelref: Optional[Str] = None
    part: Str
    staff: Optional[Int] = None
    stem: Optional[StemField] = None
    voice: Optional[Str] = None


class LayoutGroup(MnxRecord):
    class_: Optional[Str] = Field(default=None, alias="class")
    content: List[LayoutContent]
    label: Optional[Str] = None
    symbol: Optional[GroupSymbolField] = None
    type: Literal["group"]

    @property
    def kind(self) -> StaffKind:
        return StaffKind.group


class LayoutStaff(MnxRecord):
    label: Optional[Str] = None
    labelref: Optional[Str] = None
    sources: List[Source]
    type: Literal["staff"]

    @property
    def kind(self) -> StaffKind:
        return StaffKind.staff


LayoutContent = Annotated[Union[LayoutGroup, LayoutStaff], Field(discriminator="type")]


class Layout(MnxRecord):
    content: List[LayoutContent]
    id: Str


# =========================
# Scores
# =========================
class MultimeasureRest(MnxRecord):
    duration: Int
    label: Optional[Str] = None
    start: Int


class LayoutChange(MnxRecord):
    layout: Str
    location: Location


class System(MnxRecord):
    layout: Optional[Str] = None
    layout_changes: Optional[List[LayoutChange]] = Field(default=None, alias="layoutChanges")
    measure: Int


class Page(MnxRecord):
    layout: Optional[Str] = None
    systems: List[System]


class Score(MnxRecord):
    layout: Optional[Str] = None
    multimeasure_rests: Optional[List[MultimeasureRest]] = Field(default=None, alias="multimeasureRests")
    name: Str
    pages: Optional[List[Page]] = None


# =========================
# Document root
# =========================
class MnxModel(MnxRecord):
    """
    A whole MNX document.

    Id strings (parts in layout sources, layouts in scores, systems and
    layout changes, event/note ids in ties, slurs, beams and hooks) are
    recorded as written; nothing here resolves them.
    """

    global_: Global = Field(..., alias="global")
    layouts: Optional[List[Layout]] = None
    mnx: MnxHeader
    parts: List[Part]
    scores: Optional[List[Score]] = None


LayoutGroup.model_rebuild()
Beam.model_rebuild()
