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


class JunosNetconfError(Exception):
    """Base error for junos-netconf."""


class ParameterError(JunosNetconfError, ValueError):
    """Parameter set is invalid."""


class DuplicateParameterError(ParameterError):
    """
    A parameter key was supplied more than once.

    Attributes:
        key (str): The repeated key.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"duplicate parameter key: {key}")


class OperationRequestError(JunosNetconfError, ValueError):
    """Operation request breaks the body element/content pairing."""


class UnknownOperationError(JunosNetconfError, KeyError):
    """
    Requested operation is not in the operation table.

    Attributes:
        name (str): The unknown operation name.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown operation: {self.name}"
