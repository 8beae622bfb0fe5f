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

"""
Ansible filter plugin to generate password hashes for /etc/shadow.

Works like the ``password_hash`` filter shipped with Ansible but delegates
to the ``openssl passwd`` CLI instead of ``crypt(3)``, so a controller whose
libc lacks SHA-crypt (macOS, for instance) can still produce hashes for
Linux hosts::

    {{ user_password | pw_hash('sha-512', 'abcXYZ012') }}
"""

from ansible.errors import AnsibleFilterError

from pw_hash.core.exceptions import PwHashError
from pw_hash.core.services import pw_hash as _pw_hash
from pw_hash.logging_utils import log_secure_info


def pw_hash(password, hash_type, salt):
    """
    Generate a crypt-style password hash using openssl.

    Parameters:
        password (str): The plaintext password, at least one character.
        hash_type (str): One of ``md5``, ``sha-256`` or ``sha-512``.
        salt (str): Salt matching ``[A-Za-z0-9./]+``.

    Returns:
        str: The password hash, e.g. ``$6$salt$digest``.
    """
    try:
        return _pw_hash(password, hash_type, salt)
    except (PwHashError, FileNotFoundError, ValueError) as e:
        log_secure_info("error", f"pw_hash filter failed: {e}")
        raise AnsibleFilterError(f"pw_hash: {e}") from e


class FilterModule:  # pylint: disable=R0903
    """Password hashing filters."""

    def filters(self):
        """Return the filters provided by this plugin."""
        return {
            "pw_hash": pw_hash,
        }
