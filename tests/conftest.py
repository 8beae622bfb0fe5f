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

"""Shared pytest fixtures for pw_hash tests."""

# pylint: disable=redefined-outer-name

import pytest

from pw_hash.common.config import OpensslConfig
from pw_hash.core.services import OpensslPasswdHasher
from tests.mocks.mock_environment_probe import MockEnvironmentProbe
from tests.mocks.mock_process_runner import MockProcessRunner

BUNDLED_OPENSSL = "/opt/runtime/bin/openssl"
SYSTEM_OPENSSL = "/usr/bin/openssl"
SHA512_HASH = "$6$abcXYZ012$Zq3mB1n0aM7L8pQ2r5sT9uV1wX3yZ5aB7cD9eF1gH3iJ5kL7mN9oP1qR3sT5uV7wX9yZ1aB3cD5eF7gH9iJ1k"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point configuration lookups away from the host's /etc."""
    monkeypatch.delenv("PW_HASH_CONFIG_PATH", raising=False)
    monkeypatch.setattr(
        "pw_hash.common.config.DEFAULT_CONFIG_PATH", str(tmp_path / "missing.ini")
    )


@pytest.fixture
def environment() -> MockEnvironmentProbe:
    """Environment where only the bundled openssl exists."""
    return MockEnvironmentProbe(executables=[BUNDLED_OPENSSL])


@pytest.fixture
def runner() -> MockProcessRunner:
    """Runner emulating a successful sha-512 hash."""
    return MockProcessRunner(stdout=(SHA512_HASH + "\n").encode())


@pytest.fixture
def hasher(environment, runner) -> OpensslPasswdHasher:
    """Hasher wired to mocked environment and runner."""
    return OpensslPasswdHasher(
        environment=environment, runner=runner, config=OpensslConfig()
    )
