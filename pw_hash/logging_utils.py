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

"""Secure logging utilities for pw_hash.

Every log entry is passed through a redaction filter so that passwords,
secrets and produced crypt hashes never reach a log handler, even when a
caller formats them into a message by mistake.
"""

import logging
import re
import traceback
from typing import Optional

# ---------------------------------------------------------------------------
# Sensitive-data redaction patterns
# ---------------------------------------------------------------------------
_SENSITIVE_PATTERNS = [
    # Crypt-style hashes  (e.g. $6$salt$digest)
    (re.compile(r"\$(?:1|5|6|apr1)\$[A-Za-z0-9./]+\$[A-Za-z0-9./]+"), "<REDACTED_HASH>"),
    # password= or passwd= or secret= or token= values
    (re.compile(
        r"(?i)((?:password|passwd|secret|api_key|apikey|token|auth_token)"
        r"\s*[=:]\s*)[^\s,;\"']+"
    ), r"\1<REDACTED>"),
]


def _sanitize_message(message: str) -> str:
    """Redact sensitive data from a log message."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def log_secure_info(
    level: str,
    message: str,
    identifier: Optional[str] = None,
    exc_info: bool = False,
) -> None:
    """Log a message after redacting sensitive data.

    * *identifier* is truncated to its first 8 characters.
    * Passwords, secrets, tokens and crypt hashes are replaced with
      ``<REDACTED*>`` placeholders.

    Args:
        level: ``'info'``, ``'warning'``, ``'error'``, ``'debug'``, or ``'critical'``.
        message: Human-readable log message.
        identifier: Optional opaque id, only the first 8 chars are kept.
        exc_info: Append the current exception traceback.
    """
    logger = logging.getLogger(__name__)

    if identifier:
        log_message = f"{message}: {identifier[:8]}..."
    else:
        log_message = message

    if exc_info:
        log_message = f"{log_message}\n{traceback.format_exc().rstrip()}"

    log_message = _sanitize_message(log_message)

    log_func = getattr(logger, level, logger.info)
    log_func(log_message)
