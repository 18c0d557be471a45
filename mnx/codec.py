"""
mnx.codec

Document codec: JSON tree <-> MnxModel.

    bytes/str --loads--> JSON tree --decode--> MnxModel
    MnxModel --encode--> JSON tree --dumps--> str

- decode is a single top-down pass; nothing is cached and no id is resolved.
- encode writes every known key in declared order; absent optionals are
  written as ``null`` unless ``omit_absent`` is set.
- failures are fatal for the whole document: ``SchemaError`` on decode,
  ``EncodeError`` on encode.

The codec keeps no state; concurrent calls on distinct inputs need no locking.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from mnx.base import JSON_CONTEXT, STRICT_KEYS
from mnx.config import get_settings
from mnx.errors import EncodeError, InputTooLargeError, SchemaError
from mnx.events import DURATION_SHAPES
from mnx.models import MnxModel

logger = logging.getLogger(__name__)


# ---------------------------
# Error translation
# ---------------------------
def json_path(root: Any, loc: Sequence[Union[str, int]]) -> str:
    """
    Render a pydantic error location as a JSON path into ``root``.

    Tagged unions add the selected tag (e.g. ``event``) to the location;
    such segments are not keys of the input and are skipped.
    """
    path = "$"
    node = root
    for part in loc:
        if isinstance(part, int) and isinstance(node, list):
            path += f"[{part}]"
            node = node[part] if 0 <= part < len(node) else None
        elif isinstance(node, dict) and part in node:
            path += f".{part}"
            node = node[part]
        elif part in DURATION_SHAPES or (isinstance(node, dict) and node.get("type") == part):
            continue
        else:
            path += f"[{part}]" if isinstance(part, int) else f".{part}"
            node = None
    return path


def _describe(error: Dict[str, Any]) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"missing required field {error['loc'][-1]!r}"
    if kind == "union_tag_not_found":
        discriminator = ctx.get("discriminator", "type").strip("'")
        return f"missing required field {discriminator!r}"
    if kind == "union_tag_invalid":
        return f"unknown type {ctx.get('tag')!r} (expected one of {ctx.get('expected_tags')})"
    return error["msg"]


def _schema_error(root: Any, exc: ValidationError) -> SchemaError:
    problems: List[Dict[str, Any]] = []
    for error in exc.errors(include_url=False):
        problems.append(
            {
                "path": json_path(root, error["loc"]),
                "cause": _describe(error),
                "type": error["type"],
            }
        )

    first = problems[0]
    logger.debug("MNX decode failed with %d problem(s); first at %s", len(problems), first["path"])
    return SchemaError(first["path"], first["cause"], problems)


# ---------------------------
# JSON tree <-> model
# ---------------------------
def decode(root: Any, *, strict_keys: Optional[bool] = None) -> MnxModel:
    """
    Validate a JSON tree (as produced by ``json.loads``) and build the model.

    ``strict_keys`` selects the unknown-field policy for this call; the
    default comes from settings (lenient: unknown keys are dropped).
    """
    if strict_keys is None:
        strict_keys = get_settings().strict_keys

    context = {JSON_CONTEXT: True, STRICT_KEYS: strict_keys}
    try:
        model = MnxModel.model_validate(root, context=context)
    except ValidationError as exc:
        raise _schema_error(root, exc) from exc

    logger.debug(
        "Decoded MNX document: %d part(s), %d global measure(s)",
        len(model.parts),
        len(model.global_.measures),
    )
    return model


def encode(model: MnxModel, *, omit_absent: Optional[bool] = None) -> Dict[str, Any]:
    """Serialize ``model`` to a JSON tree with MNX key spellings."""
    if not isinstance(model, MnxModel):
        raise EncodeError(f"expected MnxModel, got {type(model).__name__}")
    if omit_absent is None:
        omit_absent = get_settings().omit_absent

    try:
        data = model.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=omit_absent,
            warnings="error",
        )
    except EncodeError:
        raise
    except PydanticSerializationError as exc:
        logger.debug("MNX encode failed: %s", exc)
        raise EncodeError(str(exc)) from exc

    logger.debug("Encoded MNX document: %d part(s)", len(model.parts))
    return data


# ---------------------------
# Text <-> model
# ---------------------------
def loads(
    data: Union[str, bytes, bytearray],
    *,
    strict_keys: Optional[bool] = None,
    max_input_bytes: Optional[int] = None,
) -> MnxModel:
    """Parse MNX JSON text. Input over the size bound is refused unparsed."""
    limit = max_input_bytes if max_input_bytes is not None else get_settings().max_input_bytes
    size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
    if size > limit:
        raise InputTooLargeError(size, limit)

    try:
        root = json.loads(data)
    except ValueError as exc:
        raise SchemaError("$", f"invalid JSON: {exc}") from exc

    return decode(root, strict_keys=strict_keys)


def dumps(
    model: MnxModel,
    *,
    indent: Optional[int] = None,
    omit_absent: Optional[bool] = None,
) -> str:
    if indent is None:
        indent = get_settings().json_indent
    return json.dumps(encode(model, omit_absent=omit_absent), indent=indent, ensure_ascii=False)
