"""
Copyright 2024 Nomios UK&I

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import os
import typing as t
from dataclasses import dataclass


def _getenv_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Settings:
    """
    junos-netconf settings.
    """

    host: str = os.getenv("JUNOS_NETCONF_HOST", "localhost")
    port: int = int(os.getenv("JUNOS_NETCONF_PORT", "830"))
    username: t.Optional[str] = os.getenv("JUNOS_NETCONF_USERNAME")
    password: t.Optional[str] = os.getenv("JUNOS_NETCONF_PASSWORD")
    key_filename: t.Optional[str] = os.getenv("JUNOS_NETCONF_KEY_FILENAME")
    hostkey_verify: bool = _getenv_bool("JUNOS_NETCONF_HOSTKEY_VERIFY", "true")
    timeout: int = int(os.getenv("JUNOS_NETCONF_TIMEOUT", "30"))
    device: str = os.getenv("JUNOS_NETCONF_DEVICE", "junos")
