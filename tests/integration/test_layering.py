"""Layering: inner layers never import outer ones."""

import ast
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).parent.parent.parent / "src" / "demofilter"

FORBIDDEN = {
    "domain": ("demofilter.application", "demofilter.infrastructure", "demofilter.presentation"),
    "infrastructure": ("demofilter.application", "demofilter.presentation"),
    "application": ("demofilter.presentation",),
}


def imported_modules(path: Path) -> set[str]:
    """Absolute module names imported by a source file."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            names.add(node.module)
    return names


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_layer_imports(layer: str) -> None:
    violations = [
        f"{path.relative_to(PACKAGE_ROOT)} imports {name}"
        for path in sorted((PACKAGE_ROOT / layer).rglob("*.py"))
        for name in imported_modules(path)
        if name.startswith(FORBIDDEN[layer])
    ]
    assert violations == []
