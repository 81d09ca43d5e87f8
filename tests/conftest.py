import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Make `src/` importable in tests without requiring installation."""
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root / "src"))


@pytest.fixture
def add_op():
    from tensorgraph.ir import BinaryOp, float32

    return BinaryOp("add", float32, float32, float32)


@pytest.fixture
def relu_op():
    from tensorgraph.ir import UnaryOp, float32

    return UnaryOp("relu", float32, float32)
