"""UK postcode grammar, validation and normalisation."""

import re
from types import MappingProxyType

from cikmov.exceptions import PostcodeInvalid

GIR_COMPACT = "GIR0AA"
GIR_CANONICAL = "GIR 0AA"

INWARD_LENGTH = 3
INWARD_TOKENS = ("D", "L", "L")

_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")
_CANONICAL_RE = re.compile(r"[A-Z]{1,2}[0-9][A-Z0-9]? [0-9][A-Z]{2}")

_FORBIDDEN_INWARD_LETTERS = frozenset("CIKMOV")
_FORBIDDEN_FIRST_OUTWARD_LETTERS = frozenset("QVX")
_FORBIDDEN_SECOND_OUTWARD_LETTERS = frozenset("IJZ")
_AA9A_ALLOWED_FINAL_LETTERS = frozenset("ABEHMNPRVWXY")

# Token alphabet: L = letter, D = digit, N = nonzero digit
OUTWARD_PATTERN_TOKENS = MappingProxyType({
    "A9": ("L", "N"),
    "A9A": ("L", "N", "L"),
    "A99": ("L", "N", "D"),
    "AA9": ("L", "L", "N"),
    "AA9A": ("L", "L", "N", "L"),
    "AA99": ("L", "L", "N", "D"),
})

OUTWARD_PATTERNS_BY_LENGTH = MappingProxyType({
    2: ("A9",),
    3: ("A9A", "A99", "AA9"),
    4: ("AA9A", "AA99"),
})

AREAS = frozenset({
    "AB", "AL", "B", "BA", "BB", "BD", "BF", "BH", "BL", "BN", "BR", "BS",
    "BT", "BX", "CA", "CB", "CF", "CH", "CM", "CO", "CR", "CT", "CV", "CW",
    "DA", "DD", "DE", "DG", "DH", "DL", "DN", "DT", "DY", "E", "EC", "EH",
    "EN", "EX", "FK", "FY", "G", "GL", "GU", "GY", "HA", "HD", "HG", "HP",
    "HR", "HS", "HU", "HX", "IG", "IM", "IP", "IV", "JE", "KA", "KT", "KW",
    "KY", "L", "LA", "LD", "LE", "LL", "LN", "LS", "LU", "M", "ME", "MK",
    "ML", "N", "NE", "NG", "NN", "NP", "NR", "NW", "OL", "OX", "PA", "PE",
    "PH", "PL", "PO", "PR", "RG", "RH", "RM", "S", "SA", "SE", "SG", "SK",
    "SL", "SM", "SN", "SO", "SP", "SR", "SS", "ST", "SW", "SY", "TA", "TD",
    "TF", "TN", "TQ", "TR", "TS", "TW", "UB", "W", "WA", "WC", "WD", "WF",
    "WN", "WR", "WS", "WV", "YO", "ZE",
})

# Areas allowed to use the AA9A outward shape, with their district digits.
# A value in the second slot locks the final district letter.
_AA9A_AREAS = MappingProxyType({
    "EC": (frozenset("1234"), None),
    "SW": (frozenset("1"), None),
    "WC": (frozenset("12"), None),
    "NW": (frozenset("1"), "W"),
    "SE": (frozenset("1"), "P"),
})


# ── Normalisation ─────────────────────────────────────────────


def compact_from_input(raw: str) -> str:
    """Strip everything outside ASCII letters and digits, then upper-case."""
    return _NON_ALNUM_RE.sub("", raw).upper()


def display_from_compact(compact: str) -> str:
    """
    Best-effort spaced form of *compact* for echoing back to the user.

    The result is never validated: anything outside the 5-7 character
    shapes is returned unchanged.
    """
    if not compact:
        return ""
    if compact == GIR_COMPACT:
        return GIR_CANONICAL
    if not 5 <= len(compact) <= 7:
        return compact
    return _split(compact)


def format_compact(compact: str) -> str:
    """
    Format a valid compact postcode as 'OUTWARD INWARD', e.g. 'EC1A1AL' -> 'EC1A 1AL'.

    Raises PostcodeInvalid if *compact* is not a valid postcode.
    """
    if not is_valid_compact(compact):
        raise PostcodeInvalid(compact)
    if compact == GIR_COMPACT:
        return GIR_CANONICAL
    return _split(compact)


def is_canonical(postcode: str) -> bool:
    """Return True if *postcode* has the canonical spaced shape."""
    return postcode == GIR_CANONICAL or bool(_CANONICAL_RE.fullmatch(postcode))


def _split(compact: str) -> str:
    return f"{compact[:-INWARD_LENGTH]} {compact[-INWARD_LENGTH:]}"


# ── Grammar ───────────────────────────────────────────────────


def outward_patterns_for_length(outward_length: int) -> tuple[str, ...]:
    return OUTWARD_PATTERNS_BY_LENGTH.get(outward_length, ())


def outward_tokens(pattern: str) -> tuple[str, ...]:
    return OUTWARD_PATTERN_TOKENS.get(pattern, ())


def char_matches_token(char: str, token: str) -> bool:
    """Class check of a single character against an L/D/N token."""
    if token == "L":
        return char.isascii() and char.isalpha()
    if token == "D":
        return char.isascii() and char.isdigit()
    if token == "N":
        return char.isascii() and char.isdigit() and char != "0"
    return False


def is_valid_compact(compact: str) -> bool:
    """Return True if *compact* is a grammatically valid UK postcode."""
    if compact == GIR_COMPACT:
        return True
    if not 5 <= len(compact) <= 7:
        return False

    outward = compact[:-INWARD_LENGTH]
    if not is_valid_inward(compact[-INWARD_LENGTH:]):
        return False
    return any(
        is_valid_outward_for_pattern(outward, pattern)
        for pattern in outward_patterns_for_length(len(outward))
    )


def is_valid_compact_for_pattern(compact: str, pattern: str) -> bool:
    """Validate *compact* against one specific outward pattern (never GIR)."""
    if compact == GIR_COMPACT:
        return False
    tokens = outward_tokens(pattern)
    if not tokens or len(compact) != len(tokens) + INWARD_LENGTH:
        return False
    return is_valid_inward(compact[-INWARD_LENGTH:]) and (
        is_valid_outward_for_pattern(compact[: len(tokens)], pattern)
    )


def is_valid_inward(inward: str) -> bool:
    """Digit followed by two letters, neither of them in CIKMOV."""
    if len(inward) != INWARD_LENGTH:
        return False
    if not all(char_matches_token(c, t) for c, t in zip(inward, INWARD_TOKENS)):
        return False
    return (
        inward[1] not in _FORBIDDEN_INWARD_LETTERS
        and inward[2] not in _FORBIDDEN_INWARD_LETTERS
    )


def is_valid_outward_for_pattern(outward: str, pattern: str) -> bool:
    """
    Check *outward* against the token sequence of *pattern*.

    Beyond the per-position character classes this applies the
    forbidden first/second letter rules, the area allow-list and, for
    the AA9A shape, the restricted central London districts.
    """
    tokens = outward_tokens(pattern)
    if not tokens or len(outward) != len(tokens):
        return False
    if not all(char_matches_token(c, t) for c, t in zip(outward, tokens)):
        return False

    if outward[0] in _FORBIDDEN_FIRST_OUTWARD_LETTERS:
        return False
    if tokens[1] == "L" and outward[1] in _FORBIDDEN_SECOND_OUTWARD_LETTERS:
        return False

    area_length = 2 if pattern.startswith("AA") else 1
    if outward[:area_length] not in AREAS:
        return False

    if pattern == "AA9A" and not is_valid_aa9a_outward(outward):
        return False
    return True


def is_valid_aa9a_outward(outward: str) -> bool:
    """Only EC, SW, WC, NW and SE districts may take a trailing letter."""
    area, district_digit, district_letter = outward[:2], outward[2], outward[3]

    if district_letter not in _AA9A_ALLOWED_FINAL_LETTERS:
        return False

    rule = _AA9A_AREAS.get(area)
    if rule is None:
        return False
    digits, locked_letter = rule
    if district_digit not in digits:
        return False
    return locked_letter is None or district_letter == locked_letter
