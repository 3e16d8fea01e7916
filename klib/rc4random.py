"""RC4-based pseudo-random number generator (not for cryptographic use)."""

from typing import Optional

SEED_SIZE = 4
ULONG_SIZE = 4


class Rc4Random:
    """RC4 keystream generator keyed by a 32-bit unsigned seed."""

    def __init__(self, seed: int = 0) -> None:
        self._s: list[int] = []
        self._i = 0
        self._j = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reinitialize the generator from SEED, taken as a 32-bit unsigned value."""
        key = (seed & 0xFFFFFFFF).to_bytes(SEED_SIZE, "little")
        s = list(range(256))
        j = 0
        for i in range(256):
            j = (j + s[i] + key[i % SEED_SIZE]) & 0xFF
            s[i], s[j] = s[j], s[i]
        self._s = s
        self._i = self._j = 0

    def random_bytes(self, size: int) -> bytes:
        """Return SIZE pseudo-random bytes."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        s = self._s
        i, j = self._i, self._j
        out = bytearray(size)
        for pos in range(size):
            i = (i + 1) & 0xFF
            j = (j + s[i]) & 0xFF
            s[i], s[j] = s[j], s[i]
            out[pos] = s[(s[i] + s[j]) & 0xFF]
        self._i, self._j = i, j
        return bytes(out)

    def random_ulong(self) -> int:
        """Return a pseudo-random 32-bit unsigned integer."""
        return int.from_bytes(self.random_bytes(ULONG_SIZE), "little")


_default: Optional[Rc4Random] = None


def _generator() -> Rc4Random:
    global _default
    if _default is None:
        _default = Rc4Random(0)
    return _default


def random_init(seed: int) -> None:
    """Initialize or reinitialize the shared generator with SEED."""
    global _default
    _default = Rc4Random(seed)


def random_bytes(size: int) -> bytes:
    """Return SIZE bytes from the shared generator, seeding it with 0 if needed."""
    return _generator().random_bytes(size)


def random_ulong() -> int:
    """Return a 32-bit unsigned integer from the shared generator."""
    return _generator().random_ulong()