"""Data models for natural-language date resolution.

- RecognizerKind: the recognizer families and their fixed confidence tiers
- ParseOptions: validated resolver options (reference instant, strict mode)
- ParseResult: outcome of a single resolution attempt
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chronofns.core.timestamps import now, to_timestamp


class RecognizerKind(str, Enum):
    """Recognizer families, in chain order, plus the fallback tier.

    Confidence is a fixed tier per family, not a probabilistic estimate.
    """

    KEYWORD = "keyword"
    OFFSET = "offset"
    WEEKDAY = "weekday"
    PERIOD = "period"
    TIME_OF_DAY = "time_of_day"
    FALLBACK = "fallback"

    @property
    def confidence(self) -> float:
        return CONFIDENCE_TIERS[self]


CONFIDENCE_TIERS: Dict[RecognizerKind, float] = {
    RecognizerKind.KEYWORD: 0.95,
    RecognizerKind.OFFSET: 0.90,
    RecognizerKind.WEEKDAY: 0.85,
    RecognizerKind.PERIOD: 0.80,
    RecognizerKind.TIME_OF_DAY: 0.75,
    RecognizerKind.FALLBACK: 0.50,
}

# can_resolve requires strictly more than this
TRUSTED_CONFIDENCE_THRESHOLD = 0.5


class ParseOptions(BaseModel):
    """Options for a resolution call.

    Example:
        >>> options = ParseOptions(
        ...     reference_instant=datetime(2025, 7, 9, 15, 0),
        ...     strict=True,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    reference_instant: Optional[datetime] = Field(
        default=None,
        description="Baseline 'now' for relative phrases; current time when omitted",
    )
    strict: bool = Field(
        default=False,
        description="Disable the generic date-literal fallback",
    )
    week_start_day: int = Field(
        default=0,
        ge=0,
        le=6,
        description="First day of the week for week boundaries (0 = Sunday)",
    )

    @field_validator("reference_instant", mode="before")
    @classmethod
    def _coerce_reference(cls, value: Any) -> Optional[datetime]:
        if value is None:
            return None
        return to_timestamp(value)

    def resolve_reference(self) -> datetime:
        """Reference instant, defaulting to the current time at call."""
        if self.reference_instant is None:
            return now()
        return self.reference_instant


@dataclass(frozen=True)
class ParseResult:
    """Outcome of resolving one phrase.

    ``instant`` is None exactly when ``confidence`` is 0. ``matched`` is the
    text consumed by the winning recognizer and ``remaining`` the rest of the
    normalized input.
    """

    instant: Optional[datetime]
    confidence: float
    matched: str
    remaining: str
    kind: Optional[RecognizerKind] = None

    @classmethod
    def no_match(cls, text: str) -> "ParseResult":
        return cls(instant=None, confidence=0.0, matched="", remaining=text)

    @property
    def succeeded(self) -> bool:
        return self.instant is not None

    @property
    def trusted(self) -> bool:
        """True for a recognizer match; the fallback tier and failures are not trusted."""
        return self.instant is not None and self.confidence > TRUSTED_CONFIDENCE_THRESHOLD

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "instant": self.instant.isoformat(timespec="milliseconds") if self.instant else None,
            "confidence": self.confidence,
            "matched": self.matched,
            "remaining": self.remaining,
            "kind": self.kind.value if self.kind else None,
        }
