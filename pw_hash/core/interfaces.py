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

"""Ports (Protocols) for the password hashing domain.

These define the contracts that infrastructure implementations must satisfy,
so the hasher can be exercised without touching the real host environment
or spawning real binaries.
"""

from typing import List, Optional, Protocol, Sequence

from pw_hash.core.value_objects import ProcessResult


class EnvironmentProbe(Protocol):
    """Port for reading the executable-search state of the host."""

    def install_bin_dir(self) -> str:
        """Return the host runtime's own installation ``bin`` directory."""
        ...

    def executable_suffix(self) -> str:
        """Return the platform executable suffix (``""`` or ``".exe"``)."""
        ...

    def search_path(self) -> List[str]:
        """Return the directories of ``PATH``, in search order."""
        ...

    def is_executable(self, path: str) -> bool:
        """Check if *path* is an existing, executable regular file."""
        ...


class ProcessRunner(Protocol):
    """Port for running a program with captured streams."""

    def run(
        self,
        path: str,
        args: Sequence[str],
        stdin: bytes,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """Run *path* with *args*, write *stdin* and close it.

        Args:
            path: Executable to spawn.
            args: Arguments following the executable.
            stdin: Bytes written to the process's standard input.
            timeout: Optional bound in seconds on the wait.

        Returns:
            ProcessResult with captured stdout, stderr and exit code.

        Raises:
            HashingToolFailedError: If the wait exceeds *timeout*.
        """
        ...
