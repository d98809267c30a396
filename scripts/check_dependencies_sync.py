#!/usr/bin/env python3
"""Ensure requirements.txt and pyproject.toml cover what webp2png imports.

Two checks run:

- requirements.txt must equal the base dependencies plus the ``cli`` extra,
  as written by ``scripts/generate_requirements.py``;
- every third-party module imported under ``src/webp2png`` must map to a
  distribution declared in pyproject.toml.
"""

from __future__ import annotations

import ast
import re
import sys
import tomllib
from pathlib import Path

from generate_requirements import ROOT, SYNC_EXTRAS, collect_requirements

PACKAGE = ROOT / "src/webp2png"

# Import names that differ from their distribution names on the index.
DISTRIBUTION_FOR_IMPORT = {"PIL": "pillow"}


def _normalize(req: str) -> str:
    return req.split("#", 1)[0].strip()


def _distribution_name(req: str) -> str:
    return re.split(r"[<>=!~\[; ]", req, maxsplit=1)[0].strip().lower()


def _actual_requirements() -> set[str]:
    reqs: set[str] = set()
    for line in (ROOT / "requirements.txt").read_text(encoding="utf-8").splitlines():
        norm = _normalize(line)
        if norm:
            reqs.add(norm)
    return reqs


def _declared_distributions() -> set[str]:
    pyproject = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    declared = list(pyproject["project"].get("dependencies", []))
    for extra in pyproject["project"].get("optional-dependencies", {}).values():
        declared.extend(extra)
    return {_distribution_name(dep) for dep in declared if dep.strip()}


def _imported_top_level_modules() -> dict[str, Path]:
    found: dict[str, Path] = {}
    for path in sorted(PACKAGE.rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                names = [alias.name for alias in node.names]
            elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                names = [node.module]
            else:
                continue
            for name in names:
                found.setdefault(name.split(".", 1)[0], path)
    return found


def _undeclared_imports() -> list[str]:
    declared = _declared_distributions()
    problems: list[str] = []
    for module, path in _imported_top_level_modules().items():
        if module == "webp2png" or module in sys.stdlib_module_names:
            continue
        distribution = DISTRIBUTION_FOR_IMPORT.get(module, module).lower()
        if distribution not in declared:
            problems.append(f"- {module} (imported in {path.relative_to(ROOT)})")
    return problems


def main() -> None:
    """Compare generated requirements and imports against declarations."""
    expected = set(collect_requirements())
    actual = _actual_requirements()

    parts: list[str] = []
    missing_from_requirements = sorted(expected - actual)
    unknown_in_requirements = sorted(actual - expected)
    if missing_from_requirements or unknown_in_requirements:
        parts.append(
            f"requirements.txt is out of sync with pyproject.toml "
            f"(base + extras: {','.join(SYNC_EXTRAS)})."
        )
        parts.append("Run: uv run python scripts/generate_requirements.py")
        if missing_from_requirements:
            parts.append("Missing from requirements.txt:")
            parts.extend(f"- {entry}" for entry in missing_from_requirements)
        if unknown_in_requirements:
            parts.append("Unexpected in requirements.txt:")
            parts.extend(f"- {entry}" for entry in unknown_in_requirements)

    undeclared = _undeclared_imports()
    if undeclared:
        parts.append("Imported by src/webp2png but not declared in pyproject.toml:")
        parts.extend(undeclared)

    if parts:
        raise SystemExit("\n".join(parts))
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
