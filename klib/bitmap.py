"""A fixed-size array of bits with range queries and searches."""

from typing import Optional, Union

from klib.arithmetic import CHAR_BIT
from klib.printf import hex_dump
from klib.rounding import div_round_up

# Bits are stored in 32-bit little-endian words in the serialized form.
ELEM_BITS = 32
ELEM_BYTES = ELEM_BITS // CHAR_BIT


class Bitmap:
    """An array of BIT_CNT bits, all initially false."""

    def __init__(self, bit_cnt: int) -> None:
        if bit_cnt < 0:
            raise ValueError(f"bit_cnt must be non-negative, got {bit_cnt}")
        self._bit_cnt = bit_cnt
        self._bits = 0

    def __len__(self) -> int:
        return self._bit_cnt

    def __repr__(self) -> str:
        text = "".join("1" if self.test(i) else "0" for i in range(self._bit_cnt))
        return f"Bitmap({self._bit_cnt}, {text!r})"

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < self._bit_cnt:
            raise IndexError(f"bit index {idx} out of range for {self._bit_cnt} bits")

    def _check_range(self, start: int, cnt: int) -> None:
        if cnt < 0:
            raise ValueError(f"cnt must be non-negative, got {cnt}")
        if not 0 <= start <= self._bit_cnt or start + cnt > self._bit_cnt:
            raise IndexError(
                f"range [{start}, {start + cnt}) out of bounds for {self._bit_cnt} bits"
            )

    @staticmethod
    def _mask(start: int, cnt: int) -> int:
        return ((1 << cnt) - 1) << start

    def set(self, idx: int, value: bool) -> None:
        """Set bit IDX to VALUE."""
        if value:
            self.mark(idx)
        else:
            self.reset(idx)

    def mark(self, idx: int) -> None:
        """Set bit IDX to true."""
        self._check_index(idx)
        self._bits |= 1 << idx

    def reset(self, idx: int) -> None:
        """Set bit IDX to false."""
        self._check_index(idx)
        self._bits &= ~(1 << idx)

    def flip(self, idx: int) -> None:
        """Toggle bit IDX."""
        self._check_index(idx)
        self._bits ^= 1 << idx

    def test(self, idx: int) -> bool:
        """Return the value of bit IDX."""
        self._check_index(idx)
        return bool(self._bits >> idx & 1)

    def set_all(self, value: bool) -> None:
        """Set every bit to VALUE."""
        self.set_multiple(0, self._bit_cnt, value)

    def set_multiple(self, start: int, cnt: int, value: bool) -> None:
        """Set the CNT bits starting at START to VALUE."""
        self._check_range(start, cnt)
        mask = self._mask(start, cnt)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask

    def count(self, start: int, cnt: int, value: bool) -> int:
        """Return how many of the CNT bits starting at START equal VALUE."""
        self._check_range(start, cnt)
        ones = bin(self._bits & self._mask(start, cnt)).count("1")
        return ones if value else cnt - ones

    def contains(self, start: int, cnt: int, value: bool) -> bool:
        """Return True if any of the CNT bits starting at START equal VALUE."""
        self._check_range(start, cnt)
        mask = self._mask(start, cnt)
        selected = self._bits & mask
        return selected != 0 if value else selected != mask

    def any(self, start: int, cnt: int) -> bool:
        """Return True if any bit in the range is true."""
        return self.contains(start, cnt, True)

    def none(self, start: int, cnt: int) -> bool:
        """Return True if no bit in the range is true."""
        return not self.contains(start, cnt, True)

    def all(self, start: int, cnt: int) -> bool:
        """Return True if every bit in the range is true."""
        return not self.contains(start, cnt, False)

    def scan(self, start: int, cnt: int, value: bool) -> Optional[int]:
        """Find the first run of CNT bits at or after START that all equal VALUE.

        Returns the index of the run's first bit, or None if there is none.
        A CNT of zero matches at START.
        """
        if not 0 <= start <= self._bit_cnt:
            raise IndexError(f"start {start} out of range for {self._bit_cnt} bits")
        if cnt < 0:
            raise ValueError(f"cnt must be non-negative, got {cnt}")
        if cnt > self._bit_cnt:
            return None
        return next(
            (i for i in range(start, self._bit_cnt - cnt + 1) if not self.contains(i, cnt, not value)),
            None,
        )

    def scan_and_flip(self, start: int, cnt: int, value: bool) -> Optional[int]:
        """Like scan(), then set the bits of the run found to the opposite of VALUE."""
        idx = self.scan(start, cnt, value)
        if idx is not None:
            self.set_multiple(idx, cnt, not value)
        return idx

    def file_size(self) -> int:
        """Number of bytes needed to store the bitmap: whole 32-bit words."""
        return div_round_up(self._bit_cnt, ELEM_BITS) * ELEM_BYTES

    def to_bytes(self) -> bytes:
        """Serialize the bits as little-endian 32-bit words."""
        return self._bits.to_bytes(self.file_size(), "little")

    @classmethod
    def from_bytes(cls, bit_cnt: int, data: Union[bytes, bytearray, memoryview]) -> "Bitmap":
        """Build a BIT_CNT-bit bitmap from its serialized form.

        Bytes beyond file_size() are ignored, as are bits past BIT_CNT.
        Raises ValueError if DATA is too short.
        """
        bitmap = cls(bit_cnt)
        size = bitmap.file_size()
        raw = bytes(data)
        if len(raw) < size:
            raise ValueError(f"need {size} bytes for {bit_cnt} bits, got {len(raw)}")
        bitmap._bits = int.from_bytes(raw[:size], "little") & bitmap._mask(0, bit_cnt)
        return bitmap

    def dump(self) -> str:
        """Return a hexadecimal dump of the serialized bits."""
        return hex_dump(0, self.to_bytes(), False)