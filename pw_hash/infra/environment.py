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

"""Infrastructure adapter exposing the host's executable-search state."""

import os
import sysconfig
from typing import List


class HostEnvironmentProbe:
    """EnvironmentProbe backed by the running interpreter and ``PATH``.

    The interpreter's ``scripts`` install path plays the role of the runtime's
    own ``bin`` directory: an ``openssl`` shipped alongside the Python that
    runs Ansible is preferred over whatever the system provides.
    """

    def install_bin_dir(self) -> str:
        """Return the interpreter's installation ``bin`` (``Scripts``) directory."""
        return sysconfig.get_path("scripts")

    def executable_suffix(self) -> str:
        """Return ``.exe`` on Windows and an empty string elsewhere."""
        return sysconfig.get_config_var("EXE") or ""

    def search_path(self) -> List[str]:
        """Return the non-empty ``PATH`` entries, in order."""
        path = os.environ.get("PATH", os.defpath)
        return [entry for entry in path.split(os.pathsep) if entry]

    def is_executable(self, path: str) -> bool:
        """Check if *path* is a regular file the current user may execute."""
        return os.path.isfile(path) and os.access(path, os.X_OK)
