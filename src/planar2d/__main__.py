"""Module entry point allowing ``python -m planar2d``."""

from __future__ import annotations

from . import main

if __name__ == "__main__":  # pragma: no cover
    main()
