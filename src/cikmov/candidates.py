"""Candidate generation: every grammar-valid repair reachable by substitution."""

import itertools
import logging

from cikmov import postcode
from cikmov.substitution import options_for_character

logger = logging.getLogger(__name__)

MAX_SCORE = 100


def generate_candidates(compact: str) -> dict[str, int]:
    """
    Map each valid compact postcode reachable from *compact* to its score.

    Every character is substituted independently according to the
    confusion tables, once per outward pattern of the right length.
    A candidate reachable through several patterns keeps its best score.
    An empty dict means nothing could be repaired.
    """
    if not 5 <= len(compact) <= 7:
        return {}

    outward = compact[: -postcode.INWARD_LENGTH]
    inward = compact[-postcode.INWARD_LENGTH:]

    patterns = postcode.outward_patterns_for_length(len(outward))
    compatible = [p for p in patterns if is_class_compatible_outward(outward, p)]
    # Prefer repairs that keep every character's class
    if compatible:
        patterns = tuple(compatible)

    scores: dict[str, int] = {}
    for pattern in patterns:
        options = _options_by_position(outward, inward, pattern)
        if options is None:
            logger.debug("Pattern %s not viable for %r", pattern, compact)
            continue

        for combination in itertools.product(*options):
            candidate = "".join(char for char, _ in combination)
            if not postcode.is_valid_compact_for_pattern(candidate, pattern):
                continue
            penalty = sum(cost for _, cost in combination)
            score = max(0, MAX_SCORE - penalty)
            if score > scores.get(candidate, -1):
                scores[candidate] = score

    logger.debug(
        "Generated %d candidate(s) for %r across patterns %s",
        len(scores), compact, ", ".join(patterns),
    )
    return scores


def is_class_compatible_outward(outward: str, pattern: str) -> bool:
    """True if every character of *outward* already has its token's class."""
    tokens = postcode.outward_tokens(pattern)
    if not tokens or len(outward) != len(tokens):
        return False
    return all(
        postcode.char_matches_token(char, token)
        for char, token in zip(outward, tokens)
    )


def _options_by_position(
    outward: str, inward: str, pattern: str
) -> list[list[tuple[str, int]]] | None:
    """Substitution options per position, or None if any position has none."""
    positions = [
        (char, token, True)
        for char, token in zip(outward, postcode.outward_tokens(pattern))
    ]
    positions += [
        (char, token, False)
        for char, token in zip(inward, postcode.INWARD_TOKENS)
    ]

    options_by_position = []
    for char, token, is_outward in positions:
        options = options_for_character(char, token, is_outward)
        if not options:
            return None
        options_by_position.append(options)
    return options_by_position
