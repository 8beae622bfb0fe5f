# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for password hashing value objects."""

import pytest

from pw_hash.core.value_objects import (
    HashRequest,
    HashType,
    Password,
    ProcessResult,
    Salt,
)


class TestHashType:
    """Tests for HashType."""

    @pytest.mark.parametrize("value", ["md5", "sha-256", "sha-512"])
    def test_parse_accepts_supported_values(self, value):
        """Each supported name parses to the matching member."""
        assert HashType.parse(value).value == value

    def test_parse_returns_member_unchanged(self):
        """Parsing a member returns the same member."""
        assert HashType.parse(HashType.SHA256) is HashType.SHA256

    @pytest.mark.parametrize("value", ["sha512", "SHA-512", "bcrypt", ""])
    def test_parse_rejects_unknown_values(self, value):
        """Unknown names raise ValueError listing the supported types."""
        with pytest.raises(ValueError, match="Supported: md5, sha-256, sha-512"):
            HashType.parse(value)

    def test_str(self):
        """String form is the selector name."""
        assert str(HashType.SHA512) == "sha-512"


class TestPassword:
    """Tests for Password."""

    def test_empty_password_rejected(self):
        """An empty password violates the contract."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Password("")

    def test_non_string_rejected(self):
        """Only str and bytes are accepted."""
        with pytest.raises(ValueError, match="must be a string"):
            Password(12345)

    def test_to_bytes_encodes_utf8(self):
        """Text passwords are UTF-8 encoded verbatim."""
        assert Password("pässwörd\nline2").to_bytes() == "pässwörd\nline2".encode("utf-8")

    def test_to_bytes_keeps_bytes(self):
        """Byte passwords pass through untouched."""
        assert Password(b"\x00\xffraw").to_bytes() == b"\x00\xffraw"

    def test_repr_hides_value(self):
        """The plaintext never appears in repr."""
        assert "Secret123!" not in repr(Password("Secret123!"))


class TestSalt:
    """Tests for Salt."""

    @pytest.mark.parametrize("value", ["abcXYZ012", "./", "a", "Zz9./Zz9"])
    def test_valid_salts(self, value):
        """Salts from the crypt alphabet are accepted."""
        assert str(Salt(value)) == value

    @pytest.mark.parametrize(
        "value", ["", "bad salt", "semi;colon", "dollar$", "new\nline", "abc\n"]
    )
    def test_invalid_salts(self, value):
        """Anything outside [A-Za-z0-9./]+ is rejected."""
        with pytest.raises(ValueError):
            Salt(value)

    def test_non_string_salt_rejected(self):
        """A non-string salt is reported by type, not as empty."""
        with pytest.raises(ValueError, match="Salt must be a string, got int"):
            Salt(12345)


class TestHashRequest:
    """Tests for HashRequest."""

    def test_create_builds_value_objects(self):
        """create() validates and wraps raw arguments."""
        request = HashRequest.create("Secret123!", "sha-512", "abcXYZ012")

        assert request.hash_type is HashType.SHA512
        assert request.salt.value == "abcXYZ012"
        assert request.password.to_bytes() == b"Secret123!"

    def test_create_propagates_validation_errors(self):
        """Invalid arguments surface as ValueError."""
        with pytest.raises(ValueError):
            HashRequest.create("Secret123!", "sha-1", "abc")


class TestProcessResult:
    """Tests for ProcessResult."""

    def test_succeeded(self):
        """Only exit code 0 counts as success."""
        assert ProcessResult(b"", b"", 0).succeeded
        assert not ProcessResult(b"", b"", 1).succeeded
