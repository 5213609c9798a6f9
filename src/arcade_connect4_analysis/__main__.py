from __future__ import annotations

from .cli.report import main

if __name__ == "__main__":
    raise SystemExit(main())
