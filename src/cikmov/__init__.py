"""cikmov — Classify and repair mistyped or misread UK postcodes."""

from cikmov.analyser import Analyser, analyse
from cikmov.exceptions import (
    CikmovError,
    InvalidResult,
    InvalidThreshold,
    PostcodeInvalid,
)
from cikmov.models import Result

__all__ = [
    "analyse",
    "Analyser",
    "Result",
    "CikmovError",
    "InvalidThreshold",
    "InvalidResult",
    "PostcodeInvalid",
]
