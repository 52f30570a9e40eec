#!/usr/bin/env python3
"""
Pre-commit hook: validate lottery config YAML files.

Usage:
    validate_lottery_config.py [FILE ...]

Without arguments the active config (PARKINGLOTTERY_CONFIG_FILE or the
built-in default) is checked. With arguments every file is checked and all
failures are reported, not just the first one.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from parkinglottery.infrastructure.config.lottery_config import (  # noqa: E402
    LotteryConfigError,
    get_lottery_config,
    load_lottery_config,
)


def validate_files(paths: Sequence[Path]) -> list[str]:
    errors: list[str] = []
    for path in paths:
        if not path.is_file():
            errors.append(f"{path}: 文件不存在")
            continue
        try:
            load_lottery_config(path)
        except LotteryConfigError as e:
            errors.append(f"{path}: {e}")
    return errors


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        try:
            get_lottery_config()
        except LotteryConfigError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        return 0

    errors = validate_files([Path(arg) for arg in args])
    for error in errors:
        print(f"ERROR: {error}", file=sys.stderr)
    return 1 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
