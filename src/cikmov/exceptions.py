"""Custom exception hierarchy for cikmov."""


class CikmovError(Exception):
    """Base exception for all cikmov errors."""


class InvalidThreshold(CikmovError, ValueError):
    """The minimum confidence to apply a correction is out of range."""

    def __init__(self, threshold: object):
        self.threshold = threshold
        super().__init__(
            f"min_confidence_to_apply must be between 0 and 100, got {threshold!r}"
        )


class PostcodeInvalid(CikmovError, ValueError):
    """The provided compact string is not a valid UK postcode."""

    def __init__(self, postcode: str):
        self.postcode = postcode
        super().__init__(f"Cannot format an invalid compact postcode: '{postcode}'")


class InvalidResult(CikmovError, ValueError):
    """A Result was constructed in a state that breaks its invariants."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid result: {detail}")
