#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/webp2png"


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = path.read_text(encoding="utf-8")
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # Pillow stays behind the codec adapters.
    for path in PACKAGE.rglob("*.py"):
        if path.parent.name == "adapters":
            continue
        _assert_no_imports(path, ["from PIL", "import PIL"])

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer"])

    for path in (PACKAGE / "infrastructure").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from webp2png.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
