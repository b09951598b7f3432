import sys
from pathlib import Path
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bitvector import BitVector  # noqa: E402


@pytest.fixture()
def bv64():
    """A fresh 64-bit vector (8 bytes of storage)."""
    return BitVector(64)


def assert_only_set(vector: BitVector, *indices: int):
    """Assert that exactly ``indices`` are set and every other bit is clear."""
    expected = set(indices)
    for bit in range(vector.get_bit_count()):
        assert vector.get(bit) is (bit in expected), f"bit {bit}"


@pytest.fixture()
def assert_only_set_fn():
    """
    Fixture that provides the assert_only_set helper without importing conftest.
    """
    return assert_only_set
