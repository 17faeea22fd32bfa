"""Analyser: the main entry point for the library."""

from __future__ import annotations

import logging

from cikmov import postcode
from cikmov.candidates import generate_candidates
from cikmov.exceptions import InvalidThreshold
from cikmov.models import Result
from cikmov.ranking import rank_candidates

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONFIDENCE = 85


class Analyser:
    """
    Classifies a string as a UK postcode and repairs it where it can.

    The analyser holds nothing but its threshold, so one instance can be
    shared freely, including across threads.
    """

    def __init__(self, min_confidence_to_apply: int = DEFAULT_MIN_CONFIDENCE):
        if (
            isinstance(min_confidence_to_apply, bool)
            or not isinstance(min_confidence_to_apply, int)
            or not 0 <= min_confidence_to_apply <= 100
        ):
            raise InvalidThreshold(min_confidence_to_apply)
        self._threshold = min_confidence_to_apply

    @property
    def min_confidence_to_apply(self) -> int:
        return self._threshold

    # ── Public API ────────────────────────────────────────────────

    def analyse(self, raw: str) -> Result:
        """
        Analyse *raw* user input.

        Always returns a Result; input that cannot be read as a postcode
        yields one with zero confidence and no candidate.
        """
        compact = postcode.compact_from_input(raw)
        display = postcode.display_from_compact(compact)

        if not compact:
            logger.debug("Empty input after normalisation: %r", raw)
            return self._rejected(raw, display)

        if postcode.is_valid_compact(compact):
            canonical = postcode.format_compact(compact)
            logger.debug("Input %r is already valid: %s", raw, canonical)
            return Result(
                input=raw,
                normalized_input=canonical,
                input_was_valid=True,
                best_candidate=canonical,
                confidence=100,
                applied_postcode=canonical,
                alternatives=(),
            )

        # Without both letters and digits no substitution path exists
        if not _has_letter(compact) or not _has_digit(compact):
            logger.debug("Input %r lacks letters or digits", raw)
            return self._rejected(raw, display)

        scores = generate_candidates(compact)
        if not scores:
            logger.debug("No valid candidates for %r", raw)
            return self._rejected(raw, display)

        ranking = rank_candidates(scores, self._threshold)
        return Result(
            input=raw,
            normalized_input=display,
            input_was_valid=False,
            best_candidate=ranking.best_candidate,
            confidence=ranking.confidence,
            applied_postcode=ranking.applied_postcode,
            alternatives=ranking.alternatives,
        )

    # ── Private helpers ───────────────────────────────────────────

    @staticmethod
    def _rejected(raw: str, display: str) -> Result:
        return Result(
            input=raw,
            normalized_input=display,
            input_was_valid=False,
            best_candidate=None,
            confidence=0,
            applied_postcode=None,
            alternatives=(),
        )


def analyse(
    raw: str, min_confidence_to_apply: int = DEFAULT_MIN_CONFIDENCE
) -> Result:
    """Analyse *raw* with a one-off Analyser; see Analyser.analyse."""
    return Analyser(min_confidence_to_apply).analyse(raw)


def _has_letter(compact: str) -> bool:
    return any(char.isalpha() for char in compact)


def _has_digit(compact: str) -> bool:
    return any(char.isdigit() for char in compact)
