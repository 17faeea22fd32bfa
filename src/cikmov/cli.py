"""
UK Postcode Repair — Interactive CLI
====================================
Thin wrapper around the cikmov library.

Usage:
    cikmov                 # interactive mode
    cikmov "EC1A IAL"      # single analysis

Settings are read from environment variables:
    CIKMOV_MIN_CONFIDENCE   Confidence needed to apply a correction (0-100,
                            default 85)
    CIKMOV_LOG_LEVEL        Logging level name (default WARNING)
"""

import logging
import os
import sys

from cikmov import Analyser, Result
from cikmov.analyser import DEFAULT_MIN_CONFIDENCE
from cikmov.exceptions import InvalidThreshold

_BANNER = """\
╔══════════════════════════════════════╗
║         UK Postcode Repair           ║
║   Typos and OCR slips → Postcodes    ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _threshold_from_env() -> int:
    """Read CIKMOV_MIN_CONFIDENCE; raise InvalidThreshold if unusable."""
    raw = os.environ.get("CIKMOV_MIN_CONFIDENCE")
    if raw is None or not raw.strip():
        return DEFAULT_MIN_CONFIDENCE
    try:
        return int(raw)
    except ValueError:
        raise InvalidThreshold(raw) from None


def _configure_logging() -> None:
    level = os.environ.get("CIKMOV_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_summary(result: Result) -> None:
    if result.best_candidate is None:
        print(f"  ✗ Not a recognisable UK postcode: '{result.input}'")
        return

    if result.input_was_valid:
        print("  ✓ Valid postcode")
    elif result.applied_postcode is not None:
        print(f"  ✓ Corrected ({result.confidence}% confidence)")
    else:
        print(f"  ? Possible correction ({result.confidence}% confidence)")

    alternatives = ", ".join(result.alternatives) or "-"
    applied = result.applied_postcode or "-"
    print()
    print(f"  ┌──────────────────────────────────────────────────────┐")
    print(f"  │  Normalised Input  {result.normalized_input:<35}│")
    print(f"  │  Best Candidate    {result.best_candidate:<35}│")
    print(f"  │  Confidence        {result.confidence:<35}│")
    print(f"  │  Applied Postcode  {applied:<35}│")
    print(f"  │  Alternatives      {alternatives:<35}│")
    print(f"  └──────────────────────────────────────────────────────┘")


def _run_interactive(analyser: Analyser) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nPostcode:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ Postcode is required.")
            continue

        _print_summary(analyser.analyse(raw))


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    _configure_logging()

    try:
        analyser = Analyser(_threshold_from_env())
    except InvalidThreshold as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Set CIKMOV_MIN_CONFIDENCE to a whole number between 0 and 100.",
            file=sys.stderr,
        )
        sys.exit(2)

    if len(sys.argv) == 2:
        # Single-shot mode
        result = analyser.analyse(sys.argv[1])
        for key, val in result.to_dict().items():
            if isinstance(val, list):
                val = ", ".join(val)
            print(f"{key:>20}: {val}")
        sys.exit(0 if result.applied_postcode is not None else 1)

    _run_interactive(analyser)


if __name__ == "__main__":
    main()
