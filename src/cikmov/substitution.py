"""Letter/digit confusion model used when searching for corrections."""

from types import MappingProxyType

from cikmov.postcode import char_matches_token

OUTWARD_BASE_PENALTY = 8
INWARD_BASE_PENALTY = 4

# Extra penalty on top of the base penalty, per confusable replacement
_DIGIT_TO_LETTERS = {
    "0": {"O": 0, "D": 2, "Q": 2, "L": 3},
    "1": {"I": 0, "L": 0},
    "2": {"Z": 0},
    "3": {"B": 2},
    "4": {"A": 2},
    "5": {"S": 0},
    "6": {"G": 0},
    "7": {"T": 1},
    "8": {"B": 0},
    "9": {"G": 2},
}

_LETTER_TO_DIGITS = {
    "B": {"8": 0, "3": 2},
    "G": {"6": 0, "9": 2},
    "I": {"1": 0},
    "L": {"1": 0},
    "O": {"0": 0},
    "S": {"5": 0},
    "Z": {"2": 0},
}

DIGIT_TO_LETTERS = MappingProxyType(
    {k: MappingProxyType(v) for k, v in _DIGIT_TO_LETTERS.items()}
)
LETTER_TO_DIGITS = MappingProxyType(
    {k: MappingProxyType(v) for k, v in _LETTER_TO_DIGITS.items()}
)


def options_for_character(
    char: str, token: str, outward: bool
) -> list[tuple[str, int]]:
    """
    List the characters *char* could stand for at a position expecting *token*.

    Returns (replacement, penalty) pairs, cheapest first and then
    alphabetical. Keeping the character as-is is free; a cross-class
    substitution costs the base penalty for the part of the postcode
    plus the table's extra penalty. An empty list means nothing fits.
    """
    base = OUTWARD_BASE_PENALTY if outward else INWARD_BASE_PENALTY
    options: list[tuple[str, int]] = []

    if char_matches_token(char, token):
        options.append((char, 0))

    if token == "L":
        if char_matches_token(char, "D"):
            for letter, extra in DIGIT_TO_LETTERS.get(char, {}).items():
                options.append((letter, base + extra))
    elif char_matches_token(char, "L"):
        for digit, extra in LETTER_TO_DIGITS.get(char, {}).items():
            if token == "N" and digit == "0":
                continue
            options.append((digit, base + extra))

    cheapest: dict[str, int] = {}
    for replacement, penalty in options:
        if replacement not in cheapest or penalty < cheapest[replacement]:
            cheapest[replacement] = penalty

    return sorted(cheapest.items(), key=lambda item: (item[1], item[0]))
