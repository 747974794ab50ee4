from __future__ import annotations

from infix_tree.cli import main

raise SystemExit(main())
