"""Layering guard: backend reaches the engine only through engine.api/contracts,
and the engine never imports the backend or web frameworks."""

import ast
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def _imports(py_file: Path):
    tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield node.lineno, alias.name
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            yield node.lineno, node.module


def _py_files(*parts):
    base = REPO_ROOT.joinpath(*parts)
    return sorted(p for p in base.rglob("*.py") if "__pycache__" not in p.parts)


def _top(mod: str) -> str:
    return mod.split(".", 1)[0]


@pytest.mark.parametrize("py_file", _py_files("backend"), ids=lambda p: p.name)
def test_backend_uses_public_engine_surface(py_file):
    bad = [
        f"{lineno}: {mod}"
        for lineno, mod in _imports(py_file)
        if _top(mod) == "engine" and not (mod == "engine.api" or mod.startswith("engine.contracts"))
    ]
    assert not bad, f"{py_file.relative_to(REPO_ROOT)} imports engine internals: {bad}"


@pytest.mark.parametrize("py_file", _py_files("engine"), ids=lambda p: p.name)
def test_engine_stays_framework_free(py_file):
    bad = [
        f"{lineno}: {mod}"
        for lineno, mod in _imports(py_file)
        if _top(mod) in {"backend", "fastapi", "starlette"}
    ]
    assert not bad, f"{py_file.relative_to(REPO_ROOT)} imports boundary code: {bad}"


@pytest.mark.parametrize("py_file", _py_files("shared_schemas"), ids=lambda p: p.name)
def test_shared_schemas_are_leaf_modules(py_file):
    bad = [f"{lineno}: {mod}" for lineno, mod in _imports(py_file) if _top(mod) in {"engine", "backend"}]
    assert not bad, f"{py_file.relative_to(REPO_ROOT)} must not depend on engine/backend: {bad}"
