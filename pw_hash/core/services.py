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

"""Domain services for password hashing through ``openssl passwd``."""

import logging
import os
from typing import Dict, Optional, Union

from pw_hash.common.config import OpensslConfig, load_config
from pw_hash.core.exceptions import (
    ExecutableNotFoundError,
    HashingToolFailedError,
    InvalidHashRequestError,
)
from pw_hash.core.interfaces import EnvironmentProbe, ProcessRunner
from pw_hash.core.value_objects import HashRequest, HashType
from pw_hash.infra.environment import HostEnvironmentProbe
from pw_hash.infra.process_runner import SubprocessRunner

logger = logging.getLogger(__name__)

HASH_FLAGS: Dict[HashType, str] = {
    HashType.MD5: "-1",
    HashType.SHA256: "-5",
    HashType.SHA512: "-6",
}


def resolve_flag(hash_type: HashType) -> str:
    """Return the ``openssl passwd`` flag selecting *hash_type*.

    Raises:
        KeyError: If *hash_type* is not a HashType member.
    """
    return HASH_FLAGS[hash_type]


def _chomp(text: str) -> str:
    """Remove exactly one trailing line terminator."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\n", "\r")):
        return text[:-1]
    return text


class OpensslPasswdHasher:
    """Hash passwords for /etc/shadow with the ``openssl passwd`` CLI.

    The executable is looked up on every call: first in the runtime's own
    install ``bin`` directory, then on ``PATH``. The password travels only
    over the tool's standard input, never in its argument vector.
    """

    def __init__(
        self,
        environment: Optional[EnvironmentProbe] = None,
        runner: Optional[ProcessRunner] = None,
        config: Optional[OpensslConfig] = None,
    ):
        """Initialize hasher.

        Args:
            environment: Executable-search state, defaults to the host.
            runner: Subprocess runner, defaults to ``subprocess.run``.
            config: openssl lookup configuration, defaults to built-ins.
        """
        self._environment = environment or HostEnvironmentProbe()
        self._runner = runner or SubprocessRunner()
        self._config = config or OpensslConfig()

    def binary_name(self) -> str:
        """Return the binary name with the platform executable suffix."""
        return self._config.binary + self._environment.executable_suffix()

    def bin_dir(self) -> str:
        """Return the directory searched before ``PATH``."""
        return self._config.bin_dir or self._environment.install_bin_dir()

    def locate_executable(self) -> str:
        """Return a path to the openssl executable.

        Raises:
            ExecutableNotFoundError: If no executable is found in the bin
                directory or on ``PATH``.
        """
        binary = self.binary_name()
        bin_dir = self.bin_dir()

        candidate = os.path.join(bin_dir, binary)
        if self._environment.is_executable(candidate):
            return candidate

        for directory in self._environment.search_path():
            candidate = os.path.join(directory, binary)
            if self._environment.is_executable(candidate):
                return candidate

        raise ExecutableNotFoundError(binary, bin_dir)

    def hash(
        self,
        password: Union[str, bytes],
        hash_type: Union[str, HashType],
        salt: str,
    ) -> str:
        """Hash *password* with *hash_type* and *salt*.

        Args:
            password: Plaintext password, at least one character.
            hash_type: ``md5``, ``sha-256`` or ``sha-512``.
            salt: Salt matching ``[A-Za-z0-9./]+``.

        Returns:
            The crypt-style hash, e.g. ``$6$salt$digest``.

        Raises:
            InvalidHashRequestError: If an argument violates the call contract.
            ExecutableNotFoundError: If openssl cannot be located.
            HashingToolFailedError: If openssl exits with a non-zero status.
        """
        try:
            request = HashRequest.create(password, hash_type, salt)
        except ValueError as exc:
            raise InvalidHashRequestError(str(exc)) from exc
        return self.hash_request(request)

    def hash_request(self, request: HashRequest) -> str:
        """Hash a validated HashRequest.

        Raises:
            ExecutableNotFoundError: If openssl cannot be located.
            HashingToolFailedError: If openssl exits with a non-zero status.
        """
        flag = resolve_flag(request.hash_type)
        executable = self.locate_executable()
        logger.debug(
            "Hashing password with %s (%s %s)", executable, request.hash_type, flag
        )

        result = self._runner.run(
            executable,
            ["passwd", flag, "-salt", request.salt.value, "-stdin"],
            request.password.to_bytes(),
            timeout=self._config.timeout_seconds,
        )

        if not result.succeeded:
            stderr = result.stderr.decode("utf-8", errors="replace")
            logger.error("%s exited with code %d", executable, result.exit_code)
            raise HashingToolFailedError(executable, result.exit_code, stderr)

        hashed = _chomp(result.stdout.decode("utf-8", errors="replace"))
        if not hashed:
            raise HashingToolFailedError(
                executable,
                result.exit_code,
                "",
                message=f"{executable} produced no hash on stdout",
            )
        return hashed


def pw_hash(
    password: Union[str, bytes],
    hash_type: Union[str, HashType],
    salt: str,
) -> str:
    """Hash a password for /etc/shadow using the configured host openssl.

    Raises:
        PwHashError: On invalid arguments or any tool failure.
        FileNotFoundError: If PW_HASH_CONFIG_PATH names a missing file.
        ValueError: If the configuration file is invalid.
    """
    config = load_config()
    return OpensslPasswdHasher(config=config.openssl).hash(password, hash_type, salt)
