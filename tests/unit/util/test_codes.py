"""Unit tests for invite and claim code utilities."""

import hashlib

import pytest

from trip.util.codes import ALPHABET, generate_code, hash_code, normalize_code


class TestNormalizeCode:
    """Tests for normalize_code."""

    def test_strips_uppercases_and_removes_separators(self):
        assert normalize_code("  ab-3d 4 ") == "AB3D4"

    @pytest.mark.parametrize(
        "typed",
        ["AB3D4", "ab3d4", "AB-3D4", "ab 3d 4", " a-b-3-d-4 ", "Ab3-D4\n"],
    )
    def test_variants_of_the_same_code_match(self, typed):
        """Stray casing, spaces and hyphens never change the code."""
        assert normalize_code(typed) == normalize_code("AB3D4")

    def test_different_codes_stay_different(self):
        assert normalize_code("AB-3D4") != normalize_code("AB3D5")

    def test_blank_normalizes_to_empty(self):
        assert normalize_code(" - - ") == ""


class TestGenerateCode:
    """Tests for generate_code."""

    @pytest.mark.parametrize("length", [1, 4, 7, 8, 10, 13, 32])
    def test_exact_length(self, length):
        assert len(generate_code(length)) == length

    def test_uses_only_the_unambiguous_alphabet(self):
        code = generate_code(200)
        assert set(code) <= set(ALPHABET)
        assert not set(code) & set("ILOU")

    def test_generated_code_survives_normalization(self):
        code = generate_code()
        assert normalize_code(code) == code

    def test_codes_are_not_repeated(self):
        codes = {generate_code() for _ in range(200)}
        assert len(codes) == 200

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            generate_code(0)


class TestHashCode:
    """Tests for hash_code."""

    def test_is_sha256_hex(self):
        assert hash_code("AB3D4") == hashlib.sha256(b"AB3D4").hexdigest()

    def test_deterministic_and_distinct(self):
        assert hash_code("AB3D4") == hash_code("AB3D4")
        assert hash_code("AB3D4") != hash_code("AB3D5")
