"""Shared test fixtures — analysers and a small corpus of realistic inputs."""

import pytest

# Inputs covering every outcome branch: valid, corrected, ambiguous,
# tied, rejected by grammar and rejected outright.
SAMPLE_INPUTS = [
    "EC1A 1AL",
    "ec1a1al",
    "GIR 0AA",
    "EC1A IAL",
    "EC1A BAL",
    "Y01 7HB",
    "S01 1AA",
    "B01 8TH",
    "W5J 10T",
    "8BG GFT",
    "ZZ99 9ZZ",
    "EC1A 1AI",
    "123456",
    "ABCDE",
    "!!!!",
    "",
    "AA 11",
    "A1A A1A",
]


@pytest.fixture()
def analyser():
    """An Analyser with the default threshold."""
    from cikmov import Analyser

    return Analyser()


@pytest.fixture()
def permissive_analyser():
    """An Analyser that applies any candidate it finds."""
    from cikmov import Analyser

    return Analyser(min_confidence_to_apply=0)


@pytest.fixture(params=SAMPLE_INPUTS)
def sample_input(request) -> str:
    return request.param
