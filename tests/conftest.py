import copy

import pytest

from mnx.config import get_settings


MINIMAL_DOCUMENT = {"mnx": {"version": 1}, "global": {"measures": []}, "parts": []}


FULL_DOCUMENT = {
    "mnx": {"version": 1, "support": {"useAccidentalDisplay": True}},
    "global": {
        "measures": [
            {
                "barline": {"type": "regular"},
                "ending": {"class": "first", "color": "#000000", "duration": 1, "numbers": [1], "open": False},
                "index": 1,
                "number": 1,
                "key": {"fifths": -2},
                "time": {"count": 4, "unit": 4},
                "tempos": [
                    {
                        "bpm": 96,
                        "value": {"base": "quarter"},
                        "location": {"bar": 0, "position": {"fraction": [0, 1]}},
                    }
                ],
                "repeatStart": {},
                "segno": {"glyph": "segno", "location": {"fraction": [0, 1]}},
            },
            {
                "barline": {"type": "final"},
                "repeatEnd": {"times": 2},
                "fine": {"location": {"fraction": [3, 4]}},
                "jump": {"type": "dsalfine", "location": {"fraction": [1, 1]}},
            },
        ],
        "styles": [{"selector": "part", "color": "#333333"}],
    },
    "parts": [
        {
            "id": "P1",
            "name": "Piano",
            "shortName": "Pno.",
            "smuflFont": "Bravura",
            "staves": 2,
            "measures": [
                {
                    "clefs": [
                        {"clef": {"sign": "G", "staffPosition": -2}, "staff": 1},
                        {
                            "clef": {"sign": "F", "staffPosition": 2, "octave": -1},
                            "staff": 2,
                            "position": {"fraction": [0, 1]},
                        },
                    ],
                    "beams": [
                        {
                            "events": ["e1", "e2"],
                            "hooks": [{"direction": "left", "event": "e2"}],
                            "inner": [{"events": ["e2"]}],
                        }
                    ],
                    "sequences": [
                        {
                            "voice": "1",
                            "staff": 1,
                            "content": [
                                {
                                    "type": "event",
                                    "id": "e1",
                                    "duration": {"base": "eighth", "dots": 1},
                                    "notes": [
                                        {
                                            "id": "n1",
                                            "class": "lead",
                                            "pitch": {"step": "C", "octave": 5, "alter": 1},
                                            "accidentalDisplay": {
                                                "show": True,
                                                "enclosure": {"symbol": "parentheses"},
                                            },
                                            "tie": {"target": "n2"},
                                        }
                                    ],
                                    "markings": {
                                        "accent": {"pointing": "up"},
                                        "staccato": {},
                                        "tremolo": {"marks": 3},
                                    },
                                    "slurs": [{"target": "e2", "side": "up", "lineType": "dashed"}],
                                    "stemDirection": "up",
                                },
                                {
                                    "type": "grace",
                                    "graceType": "stealPrevious",
                                    "slash": True,
                                    "content": [
                                        {
                                            "type": "event",
                                            "id": "g1",
                                            "duration": {"base": "16th"},
                                            "notes": [{"pitch": {"step": "D", "octave": 5}}],
                                        }
                                    ],
                                },
                                {
                                    "type": "tuplet",
                                    "inner": {"duration": {"base": "eighth"}, "multiple": 3},
                                    "outer": {"duration": {"base": "quarter"}, "multiple": 1},
                                    "bracket": "yes",
                                    "showNumber": "inner",
                                    "content": [
                                        {
                                            "type": "event",
                                            "id": "e2",
                                            "duration": {"base": "eighth"},
                                            "notes": [{"id": "n2", "pitch": {"step": "C", "octave": 5, "alter": 1}}],
                                        },
                                        {"type": "event", "duration": {"base": "eighth"}, "rest": {"staffPosition": 0}},
                                        {"type": "event", "duration": {"base": "eighth"}, "rest": {}},
                                    ],
                                },
                                {
                                    "type": "dynamic",
                                    "value": "mf",
                                    "glyph": "dynamicMF",
                                    "end": {"bar": 0, "position": {"fraction": [1, 2]}},
                                },
                                {"type": "ottava", "value": 1, "end": {"bar": 1, "position": {"fraction": [1, 1]}}},
                                {"type": "space", "duration": {"duration": {"base": "quarter"}, "multiple": 2}},
                            ],
                        },
                        {"voice": "2", "staff": 2, "content": [{"type": "event", "measure": True, "rest": {}}]},
                    ],
                },
                {"sequences": [{"content": [{"type": "event", "duration": {"base": "whole"}, "rest": {}}]}]},
            ],
        }
    ],
    "layouts": [
        {
            "id": "L1",
            "content": [
                {
                    "type": "group",
                    "symbol": "brace",
                    "label": "Piano",
                    "content": [
                        {"type": "staff", "sources": [{"part": "P1", "staff": 1}]},
                        {"type": "staff", "sources": [{"part": "P1", "staff": 2, "stem": "down", "voice": "2"}]},
                    ],
                }
            ],
        }
    ],
    "scores": [
        {
            "name": "Full score",
            "layout": "L1",
            "multimeasureRests": [{"start": 0, "duration": 2, "label": "2"}],
            "pages": [
                {
                    "systems": [
                        {
                            "measure": 0,
                            "layout": "L1",
                            "layoutChanges": [
                                {"layout": "L1", "location": {"bar": 1, "position": {"fraction": [0, 1]}}}
                            ],
                        }
                    ]
                }
            ],
        }
    ],
}


def document_with_content(*items):
    """A one-part, one-measure document whose single sequence holds ``items``."""
    return {
        "mnx": {"version": 1},
        "global": {"measures": [{}]},
        "parts": [{"id": "P1", "measures": [{"sequences": [{"content": list(items)}]}]}],
    }


@pytest.fixture
def make_doc():
    return document_with_content


@pytest.fixture
def minimal_doc():
    return copy.deepcopy(MINIMAL_DOCUMENT)


@pytest.fixture
def full_doc():
    return copy.deepcopy(FULL_DOCUMENT)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep MNX_* variables from the environment out of every test."""
    for name in ("MNX_STRICT_KEYS", "MNX_OMIT_ABSENT", "MNX_MAX_INPUT_BYTES", "MNX_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
