"""Source-level rules for every module under src/moeadpy."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src" / "moeadpy"
LOGGING_SETUP = SRC_ROOT / "foundation" / "logging.py"
FORBIDDEN_CALLS = {"print", "pprint", "pprint.pprint", "logging.basicConfig", "basicConfig"}


def _modules() -> list[Path]:
    return sorted(SRC_ROOT.rglob("*.py"))


def _call_name(node: ast.Call) -> str | None:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        return f"{func.value.id}.{func.attr}"
    return None


def _calls(path: Path) -> list[tuple[int, str, ast.Call]]:
    tree = ast.parse(path.read_text(encoding="utf-8-sig"), filename=str(path))
    found = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call):
            name = _call_name(node)
            if name is not None:
                found.append((node.lineno, name, node))
    return found


@pytest.fixture(params=_modules(), ids=lambda p: p.relative_to(SRC_ROOT).as_posix())
def module_path(request) -> Path:
    return request.param


def test_no_console_output_or_root_configuration(module_path: Path) -> None:
    violations = [f"{lineno}: {name}()" for lineno, name, _ in _calls(module_path) if name in FORBIDDEN_CALLS]
    assert not violations, f"{module_path.name} writes to the console or configures root logging: {violations}"


def test_loggers_are_named_after_their_module(module_path: Path) -> None:
    if module_path == LOGGING_SETUP:
        pytest.skip("the logging setup addresses the package and root loggers")
    for lineno, name, node in _calls(module_path):
        if name != "logging.getLogger":
            continue
        args = node.args
        assert len(args) == 1 and isinstance(args[0], ast.Name) and args[0].id == "__name__", (
            f"{module_path.name}:{lineno} must use logging.getLogger(__name__)"
        )


def test_package_tree_is_scanned() -> None:
    names = {p.relative_to(SRC_ROOT).as_posix() for p in _modules()}
    assert "engine/algorithm/moead/moead.py" in names
    assert "foundation/logging.py" in names
