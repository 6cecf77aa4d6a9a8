"""Lanza plan-import desde un checkout sin instalar.

Añade `src/` al path y delega en `cli.main.run`, así
`python -m main inspect clipboard.txt` funciona igual que `plan-import`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
