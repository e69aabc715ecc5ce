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

from .client import JunosNetconf
from .session import NcclientSession, Session
from .settings import Settings
from .params import Params
from .request import Family, OperationRequest
from .operations import OPERATIONS, prepare
from .constants import Database, Format, LoadAction
from .exceptions import (
    JunosNetconfError,
    ParameterError,
    DuplicateParameterError,
    OperationRequestError,
    UnknownOperationError,
)

__all__ = [
    "JunosNetconf",
    "NcclientSession",
    "Session",
    "Settings",
    "Params",
    "Family",
    "OperationRequest",
    "OPERATIONS",
    "prepare",
    "Database",
    "Format",
    "LoadAction",
    "JunosNetconfError",
    "ParameterError",
    "DuplicateParameterError",
    "OperationRequestError",
    "UnknownOperationError",
]
