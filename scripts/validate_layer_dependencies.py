#!/usr/bin/env python3
"""
Validate architectural layering via import rules.

Checks that modules under src/parkinglottery only import in the intended
direction:
- infrastructure -> domain -> shared
- lower layers must not import higher layers
"""

from __future__ import annotations

import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


PROJECT_ROOT = Path(__file__).resolve().parents[1]
PACKAGE = "parkinglottery"
PACKAGE_ROOT = PROJECT_ROOT / "src" / PACKAGE


LAYER_FORBIDDEN: dict[str, set[str]] = {
    # Shared helpers must not depend on any business layer.
    "shared": {"domain", "infrastructure"},
    # Domain models/services stay pure: no file/YAML access.
    "domain": {"infrastructure"},
    "infrastructure": set(),
}


@dataclass(frozen=True)
class Violation:
    path: Path
    lineno: int
    layer: str
    imported: str
    message: str

    def format(self) -> str:
        return f"{self.path}:{self.lineno}: [{self.layer}] {self.message} ({self.imported!r})"


def _detect_layer(path: Path, package_root: Path) -> Optional[str]:
    try:
        rel = path.relative_to(package_root)
    except ValueError:
        return None

    if len(rel.parts) < 2:
        return None

    layer = rel.parts[0]
    return layer if layer in LAYER_FORBIDDEN else None


def _extract_imports(tree: ast.AST) -> list[tuple[int, str]]:
    """
    Return a list of (lineno, module) for absolute imports.
    - `import x.y` -> "x.y"
    - `from x.y import z` -> "x.y"
    """
    found: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                found.append((int(node.lineno), alias.name))
        elif isinstance(node, ast.ImportFrom):
            # Relative imports stay inside one package.
            if node.level:
                continue
            if node.module:
                found.append((int(node.lineno), node.module))
    return found


def _imported_layer(module: str) -> Optional[str]:
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE:
        return None
    return parts[1]


def check_file(path: Path, package_root: Path = PACKAGE_ROOT) -> list[Violation]:
    layer = _detect_layer(path, package_root)
    if not layer:
        return []

    forbidden = LAYER_FORBIDDEN[layer]
    if not forbidden:
        return []

    try:
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    except SyntaxError as e:
        return [
            Violation(
                path=path,
                lineno=int(e.lineno or 0),
                layer=layer,
                imported="",
                message=f"语法错误：{e}",
            )
        ]

    violations: list[Violation] = []
    for lineno, module in _extract_imports(tree):
        target = _imported_layer(module)
        if target in forbidden:
            violations.append(
                Violation(
                    path=path,
                    lineno=lineno,
                    layer=layer,
                    imported=module,
                    message=f"禁止依赖内部层：{target}",
                )
            )
    return violations


def check_package(package_root: Path = PACKAGE_ROOT) -> list[Violation]:
    violations: list[Violation] = []
    for path in sorted(package_root.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        violations.extend(check_file(path, package_root))
    return violations


def main() -> int:
    violations = check_package()

    if violations:
        print("ERROR: 分层依赖校验失败：检测到不允许的跨层 import。", file=sys.stderr)
        for v in violations:
            print(f"- {v.format()}", file=sys.stderr)
        print("建议：调整依赖方向（infrastructure -> domain -> shared）。", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
