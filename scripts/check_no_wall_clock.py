#!/usr/bin/env python3
"""Pre-commit hook to prevent direct wall-clock reads in production code.

Age limits and candidacy cutoffs are calendar rules evaluated against an
injected TimeAuthorityProtocol, so tests can pin "today" to a boundary.
This script scans src/ for datetime.now(), datetime.utcnow(),
datetime.today() and date.today() calls and fails if any are found
outside the system clock adapter.

Calls are found on the syntax tree, so mentions in docstrings and
comments are ignored.

Usage:
    python scripts/check_no_wall_clock.py [src_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""

import ast
import sys
from pathlib import Path

CLOCK_CALLS: dict[str, frozenset[str]] = {
    "datetime": frozenset({"now", "utcnow", "today"}),
    "date": frozenset({"today"}),
}

# The system clock adapter is THE source of truth for time
ALLOWED_FILES = {
    "infrastructure/adapters/system_time_authority.py",
}


def _clock_call_name(node: ast.Call) -> str | None:
    """Return "datetime.now"-style name if node reads the wall clock."""
    func = node.func
    if not isinstance(func, ast.Attribute):
        return None

    owner = func.value
    # Accept both `datetime.now()` and `datetime.datetime.now()`
    if isinstance(owner, ast.Attribute):
        owner_name = owner.attr
    elif isinstance(owner, ast.Name):
        owner_name = owner.id
    else:
        return None

    if func.attr in CLOCK_CALLS.get(owner_name, frozenset()):
        return f"{owner_name}.{func.attr}"
    return None


def check_source(source: str, filename: str = "<string>") -> list[tuple[int, str]]:
    """Check Python source for wall-clock calls.

    Returns:
        List of (line_number, call_name) tuples for violations.
    """
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError:
        return []

    violations: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call):
            name = _clock_call_name(node)
            if name is not None:
                violations.append((node.lineno, name))
    return sorted(violations)


def check_file(file_path: Path) -> list[tuple[int, str]]:
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    return check_source(content, filename=str(file_path))


def check_tree(src_dir: Path) -> dict[str, list[tuple[int, str]]]:
    """Scan every module under src_dir except the allowed adapter.

    Returns:
        Mapping of relative file path to its violations.
    """
    all_violations: dict[str, list[tuple[int, str]]] = {}
    for py_file in sorted(src_dir.rglob("*.py")):
        relative_path = py_file.relative_to(src_dir).as_posix()
        if relative_path in ALLOWED_FILES:
            continue
        violations = check_file(py_file)
        if violations:
            all_violations[relative_path] = violations
    return all_violations


def main() -> int:
    src_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("src")

    if not src_dir.exists():
        print(f"Warning: {src_dir}/ directory not found, skipping check")
        return 0

    all_violations = check_tree(src_dir)
    if not all_violations:
        print(f"No wall-clock reads found in {src_dir}/")
        return 0

    print("Direct wall-clock reads detected:")
    print()
    for file_path, violations in all_violations.items():
        print(f"  {file_path}:")
        for line_num, call_name in violations:
            print(f"    Line {line_num}: {call_name}()")
        print()

    print("How to fix:")
    print("  1. Inject TimeAuthorityProtocol in your service constructor")
    print("  2. Use self._time.today() instead of date.today()")
    return 1


if __name__ == "__main__":
    sys.exit(main())
