import logging
import operator

from typing import Tuple

BITS_PER_BYTE = 8  #: Logical bits packed into each storage byte
BYTE_MASK = 0xFF  #: Keeps inverted masks within one unsigned byte

logger = logging.getLogger(__name__)


class BitVectorError(Exception):
    """Base class for all bit vector errors."""


class InvalidArgument(BitVectorError, ValueError):
    """Raised when a bit vector is requested with a non-positive size."""


class IndexOutOfRange(BitVectorError, IndexError):
    """Raised when a bit index falls outside ``[0, bit_count)``.

    :ivar index: The rejected bit index.
    :type index: int
    :ivar bit_count: Number of bits of the vector that rejected it.
    :type bit_count: int
    """

    def __init__(self, index: int, bit_count: int):
        super().__init__(f"Bit index {index} out of range [0, {bit_count})")
        self.index = index
        self.bit_count = bit_count


class BitVector:
    """Fixed-size vector of boolean flags packed into bytes.

    Bit ``i`` is stored in byte ``i // 8`` at position ``i % 8``, least
    significant bit first. All bits start unset.

    :ivar _bit_count: Number of addressable bits.
    :type _bit_count: int
    :ivar _byte_capacity: Number of bytes backing the bits.
    :type _byte_capacity: int
    :ivar _storage: Zero-initialized byte buffer owned by the vector.
    :type _storage: bytearray
    """

    def __init__(self, bit_count: int):
        """Allocate a vector of ``bit_count`` unset bits.

        :param bit_count: Number of logical bits, must be greater than zero.
        :type bit_count: int
        :returns: None
        :rtype: None
        :raises InvalidArgument: If ``bit_count`` is zero or negative.
        :raises TypeError: If ``bit_count`` is not an integer.
        """
        bit_count = operator.index(bit_count)
        if bit_count <= 0:
            logger.debug("Rejected bit vector size %d", bit_count)
            raise InvalidArgument(
                f"bit_count must be positive, got {bit_count}"
            )
        self._bit_count = bit_count
        self._byte_capacity = (bit_count + BITS_PER_BYTE - 1) // BITS_PER_BYTE
        self._storage = bytearray(self._byte_capacity)
        logger.debug(
            "Allocated bit vector: %d bits in %d bytes",
            self._bit_count,
            self._byte_capacity,
        )

    def _locate(self, bit_index: int) -> Tuple[int, int]:
        """Map a bit index to its byte index and single-bit mask.

        :param bit_index: Zero-based bit index.
        :type bit_index: int
        :returns: ``(byte_index, mask)`` for the addressed bit.
        :rtype: Tuple[int, int]
        :raises IndexOutOfRange: If ``bit_index`` is not in ``[0, bit_count)``.
        """
        bit_index = operator.index(bit_index)
        if not 0 <= bit_index < self._bit_count:
            logger.debug(
                "Rejected bit index %d for %d-bit vector",
                bit_index,
                self._bit_count,
            )
            raise IndexOutOfRange(bit_index, self._bit_count)
        return bit_index // BITS_PER_BYTE, 1 << (bit_index % BITS_PER_BYTE)

    def set(self, bit_index: int) -> None:
        """Set the bit at ``bit_index`` to 1.

        :param bit_index: Zero-based bit index.
        :type bit_index: int
        :returns: None
        :rtype: None
        :raises IndexOutOfRange: If ``bit_index`` is not in ``[0, bit_count)``.
        """
        byte_index, mask = self._locate(bit_index)
        self._storage[byte_index] |= mask

    def unset(self, bit_index: int) -> None:
        """Clear the bit at ``bit_index`` to 0.

        :param bit_index: Zero-based bit index.
        :type bit_index: int
        :returns: None
        :rtype: None
        :raises IndexOutOfRange: If ``bit_index`` is not in ``[0, bit_count)``.
        """
        byte_index, mask = self._locate(bit_index)
        self._storage[byte_index] &= ~mask & BYTE_MASK

    def get(self, bit_index: int) -> bool:
        """Return whether the bit at ``bit_index`` is set.

        :param bit_index: Zero-based bit index.
        :type bit_index: int
        :returns: ``True`` if the bit is 1, ``False`` if it is 0.
        :rtype: bool
        :raises IndexOutOfRange: If ``bit_index`` is not in ``[0, bit_count)``.
        """
        byte_index, mask = self._locate(bit_index)
        return (self._storage[byte_index] & mask) != 0

    def get_bit_count(self) -> int:
        """Return the number of addressable bits."""
        return self._bit_count

    def get_byte_capacity(self) -> int:
        """Return the number of bytes backing the vector."""
        return self._byte_capacity

    @property
    def bit_count(self) -> int:
        return self._bit_count

    @property
    def byte_capacity(self) -> int:
        return self._byte_capacity

    def __len__(self) -> int:
        return self._bit_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bit_count={self._bit_count}, "
            f"byte_capacity={self._byte_capacity})"
        )
