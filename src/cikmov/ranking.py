"""Ranking of generated candidates and the confidence model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from cikmov.postcode import format_compact

logger = logging.getLogger(__name__)

ALTERNATIVE_SCORE_WINDOW = 4
TIE_AMBIGUITY_PENALTY = 15
NEAR_AMBIGUITY_PENALTY = 6
MAX_ALTERNATIVES = 5


@dataclass(frozen=True)
class Ranking:
    """Outcome of ranking a non-empty set of scored candidates."""

    best_candidate: str          # canonical form
    top_score: int
    confidence: int              # top_score less any ambiguity penalty
    applied_postcode: Optional[str]
    alternatives: tuple[str, ...]


def rank_candidates(
    scores: dict[str, int], min_confidence_to_apply: int
) -> Ranking:
    """
    Pick the best candidate from *scores* (compact -> score).

    Candidates are ordered by score, highest first, ties broken by the
    canonical string. Anything within ALTERNATIVE_SCORE_WINDOW of the
    top score becomes an alternative, and its presence lowers the
    confidence: an exact tie costs TIE_AMBIGUITY_PENALTY, otherwise a
    near miss costs NEAR_AMBIGUITY_PENALTY. The two never stack.
    """
    if not scores:
        raise ValueError("Cannot rank an empty candidate set.")

    ranked = sorted(
        ((format_compact(compact), score) for compact, score in scores.items()),
        key=lambda item: (-item[1], item[0]),
    )

    best, top_score = ranked[0]
    alternatives: list[str] = []
    has_top_tie = False
    has_near_ambiguity = False

    for canonical, score in ranked[1:]:
        delta = top_score - score
        if delta > ALTERNATIVE_SCORE_WINDOW:
            break
        if delta == 0:
            has_top_tie = True
        else:
            has_near_ambiguity = True
        alternatives.append(canonical)

    alternatives = list(dict.fromkeys(alternatives))[:MAX_ALTERNATIVES]

    confidence = top_score
    if has_top_tie:
        confidence -= TIE_AMBIGUITY_PENALTY
    elif has_near_ambiguity:
        confidence -= NEAR_AMBIGUITY_PENALTY
    confidence = max(0, min(100, confidence))

    applied = best if confidence >= min_confidence_to_apply else None

    logger.debug(
        "Ranked %d candidate(s): best=%s top=%d tie=%s near=%s confidence=%d",
        len(ranked), best, top_score, has_top_tie, has_near_ambiguity,
        confidence,
    )
    return Ranking(
        best_candidate=best,
        top_score=top_score,
        confidence=confidence,
        applied_postcode=applied,
        alternatives=tuple(alternatives),
    )
