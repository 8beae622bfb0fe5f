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

"""Password hashing domain exceptions."""

from typing import Optional


class PwHashError(Exception):
    """Base exception for password hashing errors."""

    def __init__(self, message: str):
        """Initialize hashing error.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class InvalidHashRequestError(PwHashError):
    """Raised when password, hash type or salt violate the call contract."""


class ExecutableNotFoundError(PwHashError):
    """Raised when no executable hashing binary can be located."""

    def __init__(self, binary: str, bin_dir: str):
        super().__init__(f"No {binary} executable in {bin_dir} or PATH")
        self.binary = binary
        self.bin_dir = bin_dir


class HashingToolFailedError(PwHashError):
    """Raised when the hashing tool exits non-zero or produces no hash."""

    def __init__(
        self, command: str, exit_code: int, stderr: str, message: Optional[str] = None
    ):
        super().__init__(message or f"{command} exited with code {exit_code}: {stderr}")
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
