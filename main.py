"""Command-line entrypoint for the pyspelling review add-on."""

from __future__ import annotations

from pyspelling_review.spell_check.spell_check import main

if __name__ == "__main__":
    raise SystemExit(main())
