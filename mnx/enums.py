"""
Fixed string enumerations of the MNX schema.

Member values are the exact JSON literals (case-sensitive). Member names
follow the literal wherever it is a valid identifier.

Models declare ``type`` tags as ``Literal`` strings; ``EventKind`` is not used by
any model and is exported for callers that dispatch on grace content.
"""

from __future__ import annotations

from enum import Enum


class BarlineType(str, Enum):
    dashed = "dashed"
    dotted = "dotted"
    double = "double"
    final = "final"
    heavy = "heavy"
    heavyHeavy = "heavyHeavy"
    heavyLight = "heavyLight"
    noBarline = "noBarline"
    regular = "regular"
    short = "short"
    tick = "tick"


class JumpType(str, Enum):
    dsalfine = "dsalfine"
    segno = "segno"


class NoteBase(str, Enum):
    """Rhythmic denomination of a value, longest first."""

    duplexMaxima = "duplexMaxima"
    maxima = "maxima"
    longa = "longa"
    breve = "breve"
    whole = "whole"
    half = "half"
    quarter = "quarter"
    eighth = "eighth"
    sixteenth = "16th"
    thirty_second = "32nd"
    sixty_fourth = "64th"
    one_twenty_eighth = "128th"
    two_fifty_sixth = "256th"
    five_twelfth = "512th"
    one_thousand_twenty_fourth = "1024th"
    two_thousand_forty_eighth = "2048th"
    four_thousand_ninety_sixth = "4096th"


class Stem(str, Enum):
    up = "up"
    down = "down"


class GroupSymbol(str, Enum):
    brace = "brace"
    bracket = "bracket"
    noSymbol = "noSymbol"


class StaffKind(str, Enum):
    group = "group"
    staff = "staff"


class BeamHookDirection(str, Enum):
    left = "left"
    right = "right"


class ClefSign(str, Enum):
    C = "C"
    F = "F"
    G = "G"


class BracketPolicy(str, Enum):
    auto = "auto"
    yes = "yes"
    no = "no"


class EnclosureSymbol(str, Enum):
    brackets = "brackets"
    parentheses = "parentheses"


class PitchStep(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"


class EventKind(str, Enum):
    event = "event"


class ContentKind(str, Enum):
    event = "event"
    grace = "grace"
    tuplet = "tuplet"
    dynamic = "dynamic"
    ottava = "ottava"
    space = "space"


class GraceKind(str, Enum):
    makeTime = "makeTime"
    stealPrevious = "stealPrevious"
    stealFollowing = "stealFollowing"


class NumberDisplay(str, Enum):
    both = "both"
    inner = "inner"
    noNumber = "noNumber"


ALL_ENUMS = (
    BarlineType,
    JumpType,
    NoteBase,
    Stem,
    GroupSymbol,
    StaffKind,
    BeamHookDirection,
    ClefSign,
    BracketPolicy,
    EnclosureSymbol,
    PitchStep,
    EventKind,
    ContentKind,
    GraceKind,
    NumberDisplay,
)
