"""Typed result models for cikmov."""

from dataclasses import dataclass, field
from typing import Optional

from cikmov.exceptions import InvalidResult
from cikmov.postcode import is_canonical


@dataclass(frozen=True)
class Result:
    """
    Complete outcome of analysing one postcode-like string.

    Construction checks the invariants below and raises InvalidResult
    when any of them is broken, so every Result in circulation is
    internally consistent.
    """

    input: str
    normalized_input: str            # spaced and upper-cased, not validated
    input_was_valid: bool
    best_candidate: Optional[str]    # canonical form
    confidence: int                  # 0-100
    applied_postcode: Optional[str]  # canonical form, set above the threshold
    alternatives: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable for alternatives but store a tuple
        object.__setattr__(self, "alternatives", tuple(self.alternatives))
        self._check_invariants()

    def _check_invariants(self) -> None:
        if not 0 <= self.confidence <= 100:
            raise InvalidResult("confidence must be between 0 and 100")
        if self.normalized_input != self.normalized_input.upper():
            raise InvalidResult("normalized input must be uppercase")

        if self.input_was_valid:
            if self.confidence != 100:
                raise InvalidResult("valid input must have 100 confidence")
            if self.best_candidate is None:
                raise InvalidResult("valid input must have a best candidate")
            if self.applied_postcode != self.best_candidate:
                raise InvalidResult(
                    "valid input must apply the canonical candidate"
                )

        if self.best_candidate is None and self.applied_postcode is not None:
            raise InvalidResult(
                "cannot apply a postcode without a best candidate"
            )
        if self.best_candidate is not None and not is_canonical(
            self.best_candidate
        ):
            raise InvalidResult("best candidate must be canonical")
        if self.applied_postcode is not None and not is_canonical(
            self.applied_postcode
        ):
            raise InvalidResult("applied postcode must be canonical")

        if len(set(self.alternatives)) != len(self.alternatives):
            raise InvalidResult("alternatives must be unique")
        if self.best_candidate in self.alternatives:
            raise InvalidResult(
                "alternatives must not include the best candidate"
            )
        for alternative in self.alternatives:
            if not isinstance(alternative, str) or not is_canonical(alternative):
                raise InvalidResult(
                    "each alternative must be a canonical postcode"
                )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "input": self.input,
            "normalized_input": self.normalized_input,
            "input_was_valid": self.input_was_valid,
            "best_candidate": self.best_candidate,
            "confidence": self.confidence,
            "applied_postcode": self.applied_postcode,
            "alternatives": list(self.alternatives),
        }
