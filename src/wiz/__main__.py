"""wiz CLI bootstrap."""

from __future__ import annotations

from wiz.cli.app import main

if __name__ == "__main__":
    main()
