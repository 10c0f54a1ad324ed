"""
`python -m roster` support.

Runs the registry command line. With no arguments that opens the desktop
window on `data.json` in the working directory.
"""

from __future__ import annotations

from roster.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
