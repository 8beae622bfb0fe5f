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

"""Value objects for the password hashing domain.

All value objects are immutable and defined by their values, not identity.
Their validation mirrors the parameter contract of the ``pw_hash`` function:
a non-empty password, one of three hash types, and a salt drawn from the
crypt alphabet ``[A-Za-z0-9./]``.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class HashType(str, Enum):
    """Crypt hash algorithm understood by ``openssl passwd``.

    MD5: ``$1$`` (``openssl passwd -1``).
    SHA256: ``$5$`` (``openssl passwd -5``).
    SHA512: ``$6$`` (``openssl passwd -6``).
    """

    MD5 = "md5"
    SHA256 = "sha-256"
    SHA512 = "sha-512"

    @classmethod
    def parse(cls, value: Union[str, "HashType"]) -> "HashType":
        """Return the HashType for *value*.

        Raises:
            ValueError: If value is not a supported hash type.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unsupported hash type: {value}. "
                f"Supported: {', '.join(member.value for member in cls)}"
            ) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Password:
    """Plaintext password to be hashed.

    The value is excluded from ``repr`` so it never ends up in logs or
    tracebacks.

    Raises:
        ValueError: If the password is empty.
    """

    value: Union[str, bytes] = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, bytes)):
            raise ValueError(
                f"Password must be a string, got {type(self.value).__name__}"
            )
        if len(self.value) < 1:
            raise ValueError("Password cannot be empty")

    def to_bytes(self) -> bytes:
        """Return the password as bytes for the tool's standard input."""
        if isinstance(self.value, bytes):
            return self.value
        return self.value.encode("utf-8")


@dataclass(frozen=True)
class Salt:
    """Salt string passed on the command line.

    Attributes:
        value: Salt restricted to the crypt alphabet, so it never needs
            shell escaping.

    Raises:
        ValueError: If the salt is empty or contains other characters.
    """

    value: str

    SALT_PATTERN: ClassVar[str] = r"\A[a-zA-Z0-9./]+\Z"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(
                f"Salt must be a string, got {type(self.value).__name__}"
            )
        if not self.value:
            raise ValueError("Salt cannot be empty")
        if not re.match(self.SALT_PATTERN, self.value):
            raise ValueError(
                f"Invalid salt format: {self.value}. "
                "Must contain only alphanumeric characters, '.' and '/'."
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HashRequest:
    """A single password hashing request. Built per call, never stored."""

    password: Password
    hash_type: HashType
    salt: Salt

    @classmethod
    def create(
        cls,
        password: Union[str, bytes],
        hash_type: Union[str, HashType],
        salt: str,
    ) -> "HashRequest":
        """Build a validated request from raw call arguments.

        Raises:
            ValueError: If any argument violates the call contract.
        """
        return cls(
            password=Password(password),
            hash_type=HashType.parse(hash_type),
            salt=Salt(salt),
        )


@dataclass(frozen=True)
class ProcessResult:
    """Captured outcome of a finished subprocess."""

    stdout: bytes
    stderr: bytes
    exit_code: int

    @property
    def succeeded(self) -> bool:
        """Check if the process exited with status 0."""
        return self.exit_code == 0
