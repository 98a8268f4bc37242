from __future__ import annotations

from wsdecode.cli import main

raise SystemExit(main())
