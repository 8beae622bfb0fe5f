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

"""Infrastructure adapter for running the hashing tool via subprocess."""

import logging
import subprocess
from typing import Optional, Sequence

from pw_hash.core.exceptions import HashingToolFailedError
from pw_hash.core.value_objects import ProcessResult

logger = logging.getLogger(__name__)


class SubprocessRunner:  # pylint: disable=R0903
    """ProcessRunner that spawns the program with ``subprocess.run``.

    ``subprocess.run(input=...)`` writes the input, closes the child's stdin
    and drains stdout and stderr concurrently, so large inputs cannot
    deadlock on a full pipe.
    """

    def run(
        self,
        path: str,
        args: Sequence[str],
        stdin: bytes,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """Run *path* with *args*, feeding *stdin* and capturing output.

        Args:
            path: Executable to spawn.
            args: Arguments following the executable.
            stdin: Bytes written to the process's standard input.
            timeout: Optional bound in seconds; the child is killed on expiry.

        Returns:
            ProcessResult with captured stdout, stderr and exit code.

        Raises:
            HashingToolFailedError: If the process cannot be spawned or
                exceeds *timeout*.
        """
        cmd = [path, *args]
        logger.debug("Executing command: %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                input=stdin,
                capture_output=True,
                timeout=timeout,
                check=False,
                shell=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise HashingToolFailedError(
                path, -1, f"timed out after {timeout} seconds"
            ) from exc
        except OSError as exc:
            raise HashingToolFailedError(path, -1, str(exc)) from exc

        return ProcessResult(
            stdout=result.stdout,
            stderr=result.stderr,
            exit_code=result.returncode,
        )
