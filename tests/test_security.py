"""
Unit and security tests for the Security module.

Tests:
- Random strings (length, alphabets, invalid options)
- Plain digests (known vectors, unsupported algorithms)
- Salted hashes (round trip, wrong secret, malformed input)
- Primitive failures surface as CryptoError
"""

import asyncio
import hashlib
import re
from unittest.mock import patch

import pytest

from stringkit.errors import CryptoError, ErrorKind, ValidationError
from stringkit.types import HashType, RandomStringOptions
from stringkit.security.random_strings import (
    SYMBOLS, build_alphabet, random_string
)
from stringkit.security.hashing import (
    KEY_LENGTH, SALT_SIZE, derive_key, hash_string, hash_with_salt,
    hash_with_salt_async, split_salted_hash, verify_hash, verify_hash_async
)


class TestRandomString:
    """Tests for random_string."""

    def test_default_length(self):
        """Default length should be 10."""
        assert len(random_string()) == 10

    @pytest.mark.parametrize("length", [1, 5, 10, 64, 300])
    def test_exact_length(self, length):
        """Output should have exactly the requested length."""
        assert len(random_string(length)) == length

    def test_default_alphabet(self):
        """Defaults should draw from letters and digits only."""
        assert re.fullmatch(r'[A-Za-z0-9]+', random_string(200))

    def test_numbers_only(self):
        """Only digits when only numbers are enabled."""
        options = RandomStringOptions(numbers=True, symbols=False,
                                      uppercase=False, lowercase=False)
        assert re.fullmatch(r'[0-9]+', random_string(50, options))

    def test_uppercase_only(self):
        """Only capitals when only uppercase is enabled."""
        options = {"numbers": False, "symbols": False,
                   "uppercase": True, "lowercase": False}
        assert re.fullmatch(r'[A-Z]+', random_string(50, options))

    def test_symbols_only(self):
        """Only symbol characters when only symbols are enabled."""
        options = RandomStringOptions(numbers=False, symbols=True,
                                      uppercase=False, lowercase=False)
        assert set(random_string(100, options)) <= set(SYMBOLS)

    def test_symbol_set(self):
        """The symbol class has 26 characters."""
        assert len(SYMBOLS) == 26

    def test_alphabet_order(self):
        """Classes should be concatenated upper, lower, digits, symbols."""
        alphabet = build_alphabet(RandomStringOptions(symbols=True))
        assert alphabet.startswith("ABC")
        assert alphabet.index("z") < alphabet.index("0") < alphabet.index("!")

    def test_bytes_mapped_modulo_alphabet(self):
        """Each random byte should pick alphabet[byte % len(alphabet)]."""
        options = RandomStringOptions(numbers=True, uppercase=False, lowercase=False)
        with patch("stringkit.security.random_strings.secrets.token_bytes",
                   return_value=bytes([0, 9, 10, 255])):
            assert random_string(4, options) == "0905"

    def test_empty_alphabet_rejected(self):
        """No enabled class should raise ValidationError."""
        options = RandomStringOptions(numbers=False, symbols=False,
                                      uppercase=False, lowercase=False)
        with pytest.raises(ValidationError):
            random_string(10, options)

    @pytest.mark.parametrize("length", [0, -1, 2.5, "10", True, None])
    def test_invalid_length_rejected(self, length):
        """Non-positive or non-int length should raise ValidationError."""
        with pytest.raises(ValidationError):
            random_string(length)

    def test_random_source_failure(self):
        """A failing random source should raise CryptoError."""
        with patch("stringkit.security.random_strings.secrets.token_bytes",
                   side_effect=OSError("no entropy")):
            with pytest.raises(CryptoError):
                random_string(10)

    def test_strings_differ(self):
        """Two long random strings should not collide."""
        assert random_string(32) != random_string(32)


class TestHashString:
    """Tests for hash_string."""

    def test_digest_lengths(self):
        """Hex digest lengths should match the algorithm."""
        assert len(hash_string("hello", HashType.MD5)) == 32
        assert len(hash_string("hello", HashType.SHA256)) == 64
        assert len(hash_string("hello", HashType.SHA512)) == 128

    def test_known_vectors(self):
        """Digests should match well-known values."""
        assert hash_string("hello", HashType.MD5) == "5d41402abc4b2a76b9719d911017c592"
        assert hash_string("hello", HashType.SHA256) == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_string_algorithm_accepted(self):
        """The enum value string should work like the member."""
        assert hash_string("hello", "sha512") == hash_string("hello", HashType.SHA512)

    def test_algorithm_name_case_insensitive(self):
        """Upper- or mixed-case algorithm names should be accepted."""
        assert hash_string("hello", "SHA256") == hash_string("hello", HashType.SHA256)
        assert hash_string("hello", "Md5") == hash_string("hello", HashType.MD5)

    def test_deterministic(self):
        """Same input and algorithm should give the same digest."""
        assert hash_string("abc", HashType.SHA256) == hash_string("abc", HashType.SHA256)

    def test_utf8_input(self):
        """Non-ASCII input should be hashed as UTF-8."""
        expected = hashlib.sha256("héllo".encode("utf-8")).hexdigest()
        assert hash_string("héllo", HashType.SHA256) == expected

    def test_unsupported_algorithm(self):
        """Unknown algorithm should raise CryptoError naming it."""
        with pytest.raises(CryptoError, match="sha1"):
            hash_string("hello", "sha1")

    def test_digest_failure(self):
        """A failing digest primitive should raise CryptoError."""
        with patch("stringkit.security.hashing.hashlib.new",
                   side_effect=ValueError("disabled for FIPS")):
            with pytest.raises(CryptoError, match="md5"):
                hash_string("hello", HashType.MD5)

    def test_invalid_input(self):
        """Non-string input should raise ValidationError, not CryptoError."""
        with pytest.raises(ValidationError):
            hash_string(None, HashType.MD5)


class TestSaltedHash:
    """Tests for hash_with_salt and verify_hash."""

    def test_format(self):
        """Output should be <32 hex>:<128 hex>."""
        stored = hash_with_salt("myPassword123")
        salt_hex, digest_hex = stored.split(":")
        assert re.fullmatch(r'[0-9a-f]{%d}' % (SALT_SIZE * 2), salt_hex)
        assert re.fullmatch(r'[0-9a-f]{%d}' % (KEY_LENGTH * 2), digest_hex)

    def test_verify_correct(self):
        """Correct secret should verify."""
        stored = hash_with_salt("myPassword123")
        assert verify_hash("myPassword123", stored) is True

    def test_verify_wrong(self):
        """Wrong secret should not verify."""
        stored = hash_with_salt("myPassword123")
        assert verify_hash("wrongPassword", stored) is False

    def test_unique_salts(self):
        """Same secret should hash differently each time."""
        assert hash_with_salt("same") != hash_with_salt("same")

    def test_salt_text_is_kdf_salt(self):
        """The KDF salt should be the UTF-8 text of the salt hex."""
        stored = hash_with_salt("secret")
        salt_hex, digest_hex = stored.split(":")
        expected = hashlib.pbkdf2_hmac("sha512", b"secret", salt_hex.encode(), 10, 64)
        assert digest_hex == expected.hex()

    def test_derive_key_length(self):
        """derive_key should return KEY_LENGTH bytes."""
        assert len(derive_key("pw", "00ff", 10)) == KEY_LENGTH

    def test_non_default_rounds_do_not_verify(self):
        """verify_hash always uses 10 iterations, so other counts never match."""
        stored = hash_with_salt("myPassword123", rounds=20)
        assert verify_hash("myPassword123", stored) is False

    def test_explicit_default_rounds_verify(self):
        """Hashes made with 10 rounds should verify."""
        stored = hash_with_salt("myPassword123", rounds=10)
        assert verify_hash("myPassword123", stored) is True

    @pytest.mark.parametrize("rounds", [0, -5, 1.5, "10", False])
    def test_invalid_rounds_rejected(self, rounds):
        """Non-positive or non-int rounds should raise ValidationError."""
        with pytest.raises(ValidationError):
            hash_with_salt("secret", rounds)

    @pytest.mark.parametrize("encoded", [
        "",
        "nocolonhere",
        ":abcdef",
        "abcdef:",
        "zz11:abcdef",
        "abcdef:not-hex",
        "ab cd:abcdef",
        "abcd:ef:01",
    ])
    def test_malformed_encoded_raises(self, encoded):
        """Structurally malformed hashes should raise CryptoError, not return False."""
        with pytest.raises(CryptoError):
            verify_hash("secret", encoded)

    def test_split_salted_hash(self):
        """Splitting should recover salt and digest."""
        assert split_salted_hash("abcd:ef01") == ("abcd", "ef01")

    def test_verify_arguments_validated(self):
        """Both verify_hash arguments should be validated."""
        with pytest.raises(ValidationError):
            verify_hash(None, "abcd:ef01")
        with pytest.raises(ValidationError):
            verify_hash("secret", 123)

    def test_kdf_failure(self):
        """A failing KDF should raise CryptoError."""
        with patch("stringkit.security.hashing.derive_key",
                   side_effect=ValueError("kdf broken")):
            with pytest.raises(CryptoError) as exc_info:
                hash_with_salt("secret")
        assert exc_info.value.kind is ErrorKind.CRYPTO
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_random_source_failure(self):
        """A failing salt source should raise CryptoError."""
        with patch("stringkit.security.hashing.secrets.token_bytes",
                   side_effect=OSError("no entropy")):
            with pytest.raises(CryptoError):
                hash_with_salt("secret")


class TestAsyncSaltedHash:
    """Tests for the awaitable salted-hash variants."""

    def test_round_trip(self):
        """Async hash should verify with async verify."""
        async def scenario():
            stored = await hash_with_salt_async("myPassword123")
            ok = await verify_hash_async("myPassword123", stored)
            bad = await verify_hash_async("wrongPassword", stored)
            return ok, bad

        assert asyncio.run(scenario()) == (True, False)

    def test_errors_propagate(self):
        """Errors should surface from the awaited call."""
        with pytest.raises(CryptoError):
            asyncio.run(verify_hash_async("secret", "malformed"))
        with pytest.raises(ValidationError):
            asyncio.run(hash_with_salt_async(None))

    def test_concurrent_calls(self):
        """Concurrent calls should not interfere with each other."""
        async def scenario():
            secrets_ = [f"pw{i}" for i in range(5)]
            hashes = await asyncio.gather(*(hash_with_salt_async(s) for s in secrets_))
            return await asyncio.gather(*(verify_hash_async(s, h)
                                          for s, h in zip(secrets_, hashes)))

        assert asyncio.run(scenario()) == [True] * 5
