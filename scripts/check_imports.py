#!/usr/bin/env python3
"""Check layered architecture import boundaries.

This script enforces the layering rules of the src package:
- domain/: Models, errors and pure rules, NO imports from other src layers
- config/: Business-rule parameters, NO imports from other src layers
- application/: Ports, DTOs and services, may import from domain/ and config/
- infrastructure/: Adapters and stubs, may import from domain/ and application/
- bootstrap/: Wiring, may import from every other layer

Usage:
    python scripts/check_imports.py [src_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

# Layer hierarchy: lower number = more inner layer (more protected)
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "config": 0,
    "application": 1,
    "infrastructure": 2,
    "bootstrap": 3,
}

# Explicit import rules: what each layer CAN import from
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": set(),
    "application": {"domain", "config"},
    "infrastructure": {"domain", "application"},
    "bootstrap": {"domain", "config", "application", "infrastructure"},
}

# Single modules a layer may import outside its allowed layers
ALLOWED_MODULES: dict[str, set[str]] = {
    # LoggingMixin binds the correlation id of the current context
    "application": {"src.infrastructure.observability.correlation"},
}


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """Extract the module name from an import statement."""
    if isinstance(node, ast.ImportFrom):
        return node.module
    if isinstance(node, ast.Import) and node.names:
        return node.names[0].name
    return None


def _get_file_layer(py_file: Path, src_dir: Path) -> str | None:
    """Determine the architectural layer of a file, None if outside any layer."""
    try:
        relative = py_file.relative_to(src_dir)
    except ValueError:
        return None

    parts = relative.parts
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in LAYER_HIERARCHY else None


def _parse_file(py_file: Path) -> ast.Module | None:
    try:
        source = py_file.read_text(encoding="utf-8")
        return ast.parse(source, filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return None


def _check_import_violation(module: str, file_layer: str) -> str | None:
    """Check if an import violates layer boundaries.

    Args:
        module: The import module string (e.g., "src.domain.models")
        file_layer: The layer the importing file belongs to

    Returns:
        Error message if violation detected, None otherwise
    """
    if not module.startswith("src."):
        return None

    target_layer = module.split(".")[1]
    if target_layer not in LAYER_HIERARCHY or target_layer == file_layer:
        return None

    if target_layer in ALLOWED_IMPORTS.get(file_layer, set()):
        return None
    if module in ALLOWED_MODULES.get(file_layer, set()):
        return None
    return f"{file_layer} layer cannot import from {target_layer}"


def check_file_imports(py_file: Path, src_dir: Path) -> list[tuple[str, int, str]]:
    """Check a single file for import boundary violations.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    file_layer = _get_file_layer(py_file, src_dir)
    if file_layer is None:
        return []

    tree = _parse_file(py_file)
    if tree is None:
        return []

    violations: list[tuple[str, int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            module = get_import_module(node)
            if module:
                error_msg = _check_import_violation(module, file_layer)
                if error_msg:
                    violations.append((str(py_file), node.lineno, error_msg))
    return violations


def check_import_boundaries(src_dir: Path) -> list[tuple[str, int, str]]:
    """Check all Python files in src directory for import boundary violations."""
    violations: list[tuple[str, int, str]] = []

    if not src_dir.exists():
        print(f"Error: Source directory '{src_dir}' does not exist", file=sys.stderr)
        return violations

    for py_file in sorted(src_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, src_dir))
    return violations


def format_violations(violations: list[tuple[str, int, str]]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    """Main entry point.

    Returns:
        0 if no violations, 1 if violations found
    """
    if len(sys.argv) > 1:
        src_dir = Path(sys.argv[1])
    else:
        src_dir = Path(__file__).parent.parent / "src"

    violations = check_import_boundaries(src_dir)

    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
