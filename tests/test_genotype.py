"""Tests for the decimal-digit genotype codec."""

import numpy as np
import pytest

from pikaia.evolution.genotype import GenotypeCodec


class TestEncode:
    def test_digits_most_significant_first(self):
        """Should emit floor(x * 10^d) digit by digit, one group per variable."""
        codec = GenotypeCodec(n=2, digits=5)
        genes = codec.encode(np.array([0.12345, 0.6789]))
        assert genes.tolist() == [1, 2, 3, 4, 5, 6, 7, 8, 9, 0]

    def test_one_saturates_to_nines(self):
        """Should encode exactly 1.0 as all nines instead of wrapping to zero."""
        codec = GenotypeCodec(n=1, digits=4)
        assert codec.encode(np.array([1.0])).tolist() == [9, 9, 9, 9]

    def test_zero_encodes_to_zeros(self):
        codec = GenotypeCodec(n=1, digits=3)
        assert codec.encode(np.array([0.0])).tolist() == [0, 0, 0]

    def test_genes_are_decimal_digits(self):
        codec = GenotypeCodec(n=4, digits=6)
        phenotypes = np.random.default_rng(3).random((100, 4))
        for x in phenotypes:
            genes = codec.encode(x)
            assert len(genes) == codec.length
            assert genes.min() >= 0
            assert genes.max() <= 9


class TestRoundTrip:
    @pytest.mark.parametrize("digits", [1, 3, 5, 9])
    def test_decode_encode_within_resolution(self, digits):
        """Decoded phenotype should be within 10^-d of the input."""
        codec = GenotypeCodec(n=3, digits=digits)
        for x in np.random.default_rng(digits).random((50, 3)):
            assert np.all(np.abs(codec.decode(codec.encode(x)) - x) < 10.0**-digits)

    @pytest.mark.parametrize("digits", [2, 5, 9])
    def test_encode_decode_reproduces_digits(self, digits):
        """Re-encoding a decoded genotype should give back the same digits."""
        codec = GenotypeCodec(n=3, digits=digits)
        rng = np.random.default_rng(7)
        for _ in range(50):
            genes = rng.integers(0, 10, size=codec.length)
            assert np.array_equal(codec.encode(codec.decode(genes)), genes)


class TestCodecShape:
    def test_group_slices(self):
        codec = GenotypeCodec(n=3, digits=4)
        assert codec.group(0) == slice(0, 4)
        assert codec.group(2) == slice(8, 12)

    @pytest.mark.parametrize("digits", [0, 10])
    def test_rejects_bad_digit_count(self, digits):
        with pytest.raises(ValueError):
            GenotypeCodec(n=2, digits=digits)

    def test_rejects_empty_phenotype(self):
        with pytest.raises(ValueError):
            GenotypeCodec(n=0, digits=5)
