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

#!/usr/bin/python

"""
Ansible custom module to generate /etc/shadow password hashes.
This module hashes on the managed host with its own ``openssl passwd``.

Requirements on the managed host: the ``pw-hash`` Python package
(``pip install pw-hash``) and an ``openssl`` executable.
"""

import traceback

from ansible.module_utils.basic import AnsibleModule, missing_required_lib

try:
    from pw_hash.core.exceptions import PwHashError
    from pw_hash.core.services import pw_hash
    from pw_hash.logging_utils import log_secure_info
except ImportError:
    PW_HASH_IMPORT_ERROR = traceback.format_exc()
else:
    PW_HASH_IMPORT_ERROR = None

HASH_TYPES = ["md5", "sha-256", "sha-512"]


def main():
    """
    This function is the main entry point of the Ansible module.
    It takes a password, a hash type and a salt and returns the crypt-style
    hash produced by openssl. Hashing has no side effect on the host, so the
    module never reports a change and runs unchanged in check mode.
    """
    module_args = dict(
        password=dict(type="str", required=True, no_log=True),
        hash_type=dict(type="str", default="sha-512", choices=HASH_TYPES),
        salt=dict(type="str", required=True),
    )
    module = AnsibleModule(argument_spec=module_args, supports_check_mode=True)

    if PW_HASH_IMPORT_ERROR is not None:
        module.fail_json(
            msg=missing_required_lib("pw-hash"), exception=PW_HASH_IMPORT_ERROR
        )

    try:
        password_hash = pw_hash(
            module.params["password"],
            module.params["hash_type"],
            module.params["salt"],
        )
    except (PwHashError, FileNotFoundError, ValueError) as e:
        log_secure_info("error", f"openssl_pw_hash failed: {e}")
        module.fail_json(msg=str(e).replace('\n', ' '))

    module.exit_json(changed=False, hash=password_hash)


if __name__ == "__main__":
    main()
