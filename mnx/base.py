from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, ClassVar, FrozenSet, Optional, Type

from pydantic import BaseModel, Field, ValidationInfo, model_validator
from pydantic.config import ConfigDict
from pydantic_core import PydanticCustomError

from mnx.primitives import FractionPair, Int, NoteBaseField

logger = logging.getLogger(__name__)

# Validation context keys set by mnx.codec
JSON_CONTEXT = "mnx_json"
STRICT_KEYS = "strict_keys"


@lru_cache(maxsize=None)
def json_keys(model: Type[BaseModel]) -> FrozenSet[str]:
    """JSON keys declared by ``model`` (aliases where a field has one)."""
    return frozenset(field.alias or name for name, field in model.model_fields.items())


# =========================
# Base record
# =========================
class MnxRecord(BaseModel):
    """
    Base for every MNX record.

    - JSON keys are field aliases; models may also be built by field name.
    - Unknown keys are dropped (lenient) or rejected (strict) while decoding
      JSON; the policy comes from the validation context set by the codec.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Keys accepted without a field of their own (kept only with extra="allow")
    tolerated_keys: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _apply_key_policy(cls, data: Any, info: ValidationInfo) -> Any:
        context = info.context or {}
        if not isinstance(data, dict):
            return data

        tolerated = cls.tolerated_keys
        if not context.get(JSON_CONTEXT):
            # built by field name: only records keeping extras need filtering
            if not tolerated:
                return data
            names = json_keys(cls) | frozenset(cls.model_fields)
            return {
                key: value
                for key, value in data.items()
                if key in names or (key in tolerated and value is not None)
            }

        own = json_keys(cls)
        unknown = sorted(str(key) for key in data if key not in own and key not in tolerated)
        if unknown:
            if context.get(STRICT_KEYS):
                raise PydanticCustomError(
                    "unknown_keys",
                    "unknown field(s) {keys} for {record}",
                    {"keys": ", ".join(unknown), "record": cls.__name__},
                )
            logger.debug("Dropping unknown field(s) %s on %s", unknown, cls.__name__)

        # a tolerated key holding null is as absent as a missing one
        return {
            key: value
            for key, value in data.items()
            if key in own or (key in tolerated and value is not None)
        }


# =========================
# Shared fragments
# =========================
class Position(MnxRecord):
    """A point within a measure as a fraction of the measure, refined by a grace index."""

    fraction: FractionPair
    grace_index: Optional[Int] = Field(default=None, alias="graceIndex")


class Location(MnxRecord):
    """A point in the global timeline."""

    bar: Int
    position: Position


class Value(MnxRecord):
    base: NoteBaseField
    dots: Optional[Int] = None
