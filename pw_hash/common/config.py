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

"""Configuration loader for pw_hash."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import configparser

DEFAULT_CONFIG_PATH = "/etc/pw_hash/pw_hash.ini"


@dataclass
class OpensslConfig:
    """openssl lookup and invocation configuration."""
    binary: str = "openssl"
    bin_dir: Optional[str] = None
    timeout_seconds: Optional[float] = None


@dataclass
class PwHashConfig:
    """pw_hash configuration."""
    openssl: OpensslConfig


def default_config() -> PwHashConfig:
    """Return the configuration used when no file is present."""
    return PwHashConfig(openssl=OpensslConfig())


def load_config(config_path: Optional[str] = None) -> PwHashConfig:
    """Load pw_hash configuration from INI file.

    Args:
        config_path: Path to configuration file. If None, uses PW_HASH_CONFIG_PATH
                    environment variable or default path.

    Returns:
        PwHashConfig instance. Defaults apply when the default path is absent.

    Raises:
        FileNotFoundError: If an explicitly requested config file is not found.
        ValueError: If config is invalid.
    """
    explicit = config_path is not None or "PW_HASH_CONFIG_PATH" in os.environ
    if config_path is None:
        config_path = os.getenv("PW_HASH_CONFIG_PATH", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return default_config()

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(config_file)
    except configparser.Error as exc:
        raise ValueError(f"Invalid configuration file {config_file}: {exc}") from exc

    section = "openssl"
    if not parser.has_section(section):
        return default_config()

    try:
        binary = parser.get(section, "binary", fallback="openssl").strip()
        bin_dir = parser.get(section, "bin_dir", fallback="").strip() or None
        has_timeout = parser.has_option(section, "timeout_seconds")
    except configparser.Error as exc:
        raise ValueError(f"Invalid configuration file {config_file}: {exc}") from exc

    if not binary or os.sep in binary or (os.altsep and os.altsep in binary):
        raise ValueError(f"Invalid openssl binary name: {binary!r}")

    timeout_seconds = None
    if has_timeout:
        try:
            timeout_seconds = parser.getfloat(section, "timeout_seconds")
        except ValueError as exc:
            raise ValueError(f"Invalid timeout_seconds in {config_file}: {exc}") from exc
        if timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be greater than 0, got {timeout_seconds}"
            )

    return PwHashConfig(
        openssl=OpensslConfig(
            binary=binary,
            bin_dir=bin_dir,
            timeout_seconds=timeout_seconds,
        )
    )
