"""Decimal-digit genetic encoding of normalized phenotypes."""

from __future__ import annotations

import numpy as np

# Relative nudge applied before flooring so that a decoded value, whose product
# with 10**d can land one ulp below the integer, re-encodes to the same digits.
_ROUNDING_GUARD = 1e-12


class GenotypeCodec:
    """Maps a phenotype in [0, 1]^n to ``n * digits`` decimal digits and back.

    Each variable owns a contiguous group of ``digits`` genes, most significant
    digit first, holding ``floor(value * 10**digits)``.
    """

    def __init__(self, n: int, digits: int):
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")
        if not 1 <= digits <= 9:
            raise ValueError(f"digits must be in [1, 9], got {digits}")
        self.n = n
        self.digits = digits
        self.scale = 10**digits
        self._powers = 10 ** np.arange(digits - 1, -1, -1, dtype=np.int64)

    @property
    def length(self) -> int:
        return self.n * self.digits

    def encode(self, phenotype: np.ndarray) -> np.ndarray:
        values = np.asarray(phenotype, dtype=float)
        integers = np.floor(values * self.scale * (1.0 + _ROUNDING_GUARD)).astype(np.int64)
        # 1.0 would need digits + 1 places; saturate at all nines instead of wrapping to zero
        integers = np.clip(integers, 0, self.scale - 1)
        return ((integers[:, None] // self._powers) % 10).reshape(-1)

    def decode(self, genotype: np.ndarray) -> np.ndarray:
        groups = np.asarray(genotype, dtype=np.int64).reshape(self.n, self.digits)
        return (groups @ self._powers) / self.scale

    def group(self, variable: int) -> slice:
        """Gene slice owned by *variable*."""
        start = variable * self.digits
        return slice(start, start + self.digits)

    def __repr__(self) -> str:
        return f"GenotypeCodec(n={self.n}, digits={self.digits})"
