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

from dataclasses import dataclass, field
from enum import Enum

from .params import Params
from .exceptions import OperationRequestError


class Family(Enum):
    """
    RPC families, valued by their outer element name.
    """

    COMMAND = "command"
    LOAD_CONFIGURATION = "load-configuration"
    COMMIT_CONFIGURATION = "commit-configuration"
    GET_CONFIGURATION = "get-configuration"
    GET_ROLLBACK_INFORMATION = "get-rollback-information"
    ABORT = "abort"
    OPEN_CONFIGURATION = "open-configuration"
    CLOSE_CONFIGURATION = "close-configuration"
    LOCK_CONFIGURATION = "lock-configuration"
    UNLOCK_CONFIGURATION = "unlock-configuration"
    REQUEST_END_SESSION = "request-end-session"
    GET_CHECKSUM_INFORMATION = "get-checksum-information"


# content sits directly inside the outer element
UNWRAPPED_FAMILIES = frozenset(
    {Family.COMMAND, Family.GET_CONFIGURATION, Family.GET_CHECKSUM_INFORMATION}
)


@dataclass(frozen=True)
class OperationRequest:
    """
    The unit of work for one RPC.

    Attributes:
        family (Family): The RPC family, which names the outer element.
        params (Params): Attributes or child elements, depending on family.
        body_element (str): Name of the element wrapping body_content.
        body_content (str): Free-form content placed inside body_element.
        synchronize (bool): Commit family only, emit the synchronize flag.
    """

    family: Family
    params: Params = field(default_factory=Params)
    body_element: str = ""
    body_content: str = ""
    synchronize: bool = True

    def __post_init__(self):
        if self.family in UNWRAPPED_FAMILIES:
            if self.body_element:
                raise OperationRequestError(
                    f"{self.family.value} does not take a body element"
                )
        elif bool(self.body_element) != bool(self.body_content):
            raise OperationRequestError(
                "body content and body element must be given together: "
                f"element={self.body_element!r} content={self.body_content!r}"
            )

    @property
    def outer_element(self) -> str:
        return self.family.value
