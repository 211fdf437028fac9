"""Launch the gem crossing game window."""

from __future__ import annotations

from gem_crossing.ui.main import main


if __name__ == "__main__":
    raise SystemExit(main())
