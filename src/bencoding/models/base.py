"""Base class and shared Pydantic configuration for bencode values.

Every value variant inherits from BaseValue, which fixes the validation
behaviour for the whole model: strict types, immutable instances and no
extra fields.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class BaseValue(BaseModel):
    """Base class for the four bencode value variants.

    Subclasses declare their payload as Pydantic fields. Equality is the
    Pydantic model equality: same variant and equal field contents, which
    makes Dictionary comparison independent of key order.

    Attributes:
        kind: Short name of the variant (``"integer"``, ``"string"``,
            ``"list"`` or ``"dictionary"``)
    """

    model_config = ConfigDict(
        # No coercion: an int field rejects bool and str, a bytes field rejects str
        strict=True,
        # Values are never mutated once built
        frozen=True,
        extra="forbid",
    )

    kind: ClassVar[str] = ""

    def to_python(self) -> Any:
        """Return the plain Python representation of this value."""
        raise NotImplementedError
