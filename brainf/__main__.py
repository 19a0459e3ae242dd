from __future__ import annotations

from brainf.main import main

raise SystemExit(main())
