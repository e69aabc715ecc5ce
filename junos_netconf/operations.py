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

import logging
import typing as t
from dataclasses import dataclass

from .constants import (
    ATTR_ACTION,
    ATTR_COMPARE,
    ATTR_DATABASE,
    ATTR_FORMAT,
    ATTR_RESCUE,
    ATTR_ROLLBACK,
    ATTR_URL,
    COMMIT_AT_TIME,
    COMMIT_CHECK,
    COMMIT_CONFIRM_TIMEOUT,
    COMMIT_CONFIRMED,
    COMMIT_LOG,
    DEFAULT_COMPARE_FORMAT,
    DEFAULT_COMPARE_ROLLBACK,
    DEFAULT_CONFIRM_TIMEOUT,
    DEFAULT_DATABASE,
    DEFAULT_LOAD_ACTION,
    DEFAULT_LOAD_FORMAT,
    NODE_CONFIGURATION,
    NODE_CONFIGURATION_SET,
    NODE_CONFIGURATION_TEXT,
    ROLLBACK_COMPARE,
    ROLLBACK_ROLLBACK,
    SET_COMMAND_SEPARATOR,
    SHOW_CONFIGURATION_SET,
    Format,
    LoadAction,
)
from .exceptions import UnknownOperationError
from .params import Params
from .request import Family, OperationRequest


logger = logging.getLogger(__name__)

_REQUIRED = object()


@dataclass(frozen=True)
class Fixed:
    """A constant parameter."""

    key: str
    value: t.Any


@dataclass(frozen=True)
class Argument:
    """
    A parameter taken from a caller keyword argument.

    Attributes:
        name (str): The keyword argument name.
        key (str): The wire key, unused for body arguments.
        default (t.Any): Value used when the argument is omitted.
        optional (bool): Leave the parameter out when its value is None.
        convert (t.Optional[t.Callable]): Applied to the value before use.
    """

    name: str
    key: str = ""
    default: t.Any = _REQUIRED
    optional: bool = False
    convert: t.Optional[t.Callable[[t.Any], t.Any]] = None

    def resolve(self, operation: str, kwargs: t.Mapping[str, t.Any]) -> t.Any:
        if self.name in kwargs:
            value = kwargs[self.name]
        elif self.default is _REQUIRED:
            raise TypeError(f"{operation}() missing required argument: '{self.name}'")
        else:
            value = self.default

        if self.convert is not None and value is not None:
            value = self.convert(value)
        return value


@dataclass(frozen=True)
class Operation:
    """
    A named device operation.

    Attributes:
        name (str): The operation name.
        family (Family): The raw builder family it delegates to.
        params (t.Tuple): Fixed and argument parameters, in wire order.
        body_element (str): Element wrapping the body content.
        body (t.Optional[Argument]): Argument supplying the body content.
        content (str): Constant body content, when body is not set.
        synchronized (bool): Accepts the commit synchronize flag.
    """

    name: str
    family: Family
    params: t.Tuple[t.Union[Fixed, Argument], ...] = ()
    body_element: str = ""
    body: t.Optional[Argument] = None
    content: str = ""
    synchronized: bool = False

    @property
    def argument_names(self) -> t.List[str]:
        names = [entry.name for entry in self.params if isinstance(entry, Argument)]
        if self.body is not None:
            names.append(self.body.name)
        if self.synchronized:
            names.append("synchronize")
        return names

    def prepare(self, **kwargs: t.Any) -> OperationRequest:
        """
        Compute the operation request from caller arguments.

        Returns:
            OperationRequest: The request for the raw builder.

        Raises:
            TypeError: when an argument is unknown or a required one missing.
        """
        unexpected = [name for name in kwargs if name not in self.argument_names]
        if unexpected:
            raise TypeError(
                f"{self.name}() got unexpected keyword arguments: "
                f"{', '.join(unexpected)}"
            )

        pairs = []
        for entry in self.params:
            if isinstance(entry, Fixed):
                pairs.append((entry.key, entry.value))
                continue
            value = entry.resolve(self.name, kwargs)
            if value is None and entry.optional:
                continue
            pairs.append((entry.key, value))

        content = self.content
        if self.body is not None:
            content = self.body.resolve(self.name, kwargs)

        return OperationRequest(
            family=self.family,
            params=Params(pairs),
            body_element=self.body_element if content else "",
            body_content=content,
            synchronize=bool(kwargs.get("synchronize", True)),
        )


def _join_set_commands(commands: t.Iterable[str]) -> str:
    if isinstance(commands, str):
        return commands
    return SET_COMMAND_SEPARATOR.join(commands)


_COMMIT = dict(family=Family.COMMIT_CONFIGURATION, synchronized=True)

OPERATIONS: t.Dict[str, Operation] = {
    operation.name: operation
    for operation in (
        # operational commands
        Operation(
            "operational_command_text",
            Family.COMMAND,
            params=(Fixed(ATTR_FORMAT, Format.TEXT),),
            body=Argument("command"),
        ),
        Operation(
            "operational_command_xml",
            Family.COMMAND,
            params=(Fixed(ATTR_FORMAT, Format.XML),),
            body=Argument("command"),
        ),
        # configuration load
        Operation(
            "load_configuration_rescue",
            Family.LOAD_CONFIGURATION,
            params=(Fixed(ATTR_RESCUE, "rescue"),),
        ),
        Operation(
            "load_configuration_rollback",
            Family.LOAD_CONFIGURATION,
            params=(Argument("rollback_id", ATTR_ROLLBACK),),
        ),
        Operation(
            "load_configuration_url",
            Family.LOAD_CONFIGURATION,
            params=(
                Argument("url", ATTR_URL),
                Argument("action", ATTR_ACTION, DEFAULT_LOAD_ACTION),
                Argument("format", ATTR_FORMAT, DEFAULT_LOAD_FORMAT),
            ),
        ),
        Operation(
            "load_configuration_set_url",
            Family.LOAD_CONFIGURATION,
            params=(
                Argument("url", ATTR_URL),
                Fixed(ATTR_ACTION, LoadAction.SET),
                Fixed(ATTR_FORMAT, Format.TEXT),
            ),
        ),
        Operation(
            "load_configuration_xml",
            Family.LOAD_CONFIGURATION,
            params=(Argument("action", ATTR_ACTION), Fixed(ATTR_FORMAT, Format.XML)),
            body_element=NODE_CONFIGURATION,
            body=Argument("config_data"),
        ),
        Operation(
            "load_configuration_curly",
            Family.LOAD_CONFIGURATION,
            params=(Argument("action", ATTR_ACTION),),
            body_element=NODE_CONFIGURATION_TEXT,
            body=Argument("config_data"),
        ),
        Operation(
            "load_configuration_set",
            Family.LOAD_CONFIGURATION,
            params=(Fixed(ATTR_ACTION, LoadAction.SET),),
            body_element=NODE_CONFIGURATION_SET,
            body=Argument("commands", convert=_join_set_commands),
        ),
        # configuration commit
        Operation("commit_configuration", **_COMMIT),
        Operation(
            "commit_configuration_check",
            params=(Fixed(COMMIT_CHECK, ""),),
            **_COMMIT,
        ),
        Operation(
            "commit_configuration_with_comment",
            params=(Argument("comment", COMMIT_LOG),),
            **_COMMIT,
        ),
        Operation(
            "commit_configuration_at_time_with_comment",
            params=(
                Argument("at_time", COMMIT_AT_TIME),
                Argument("comment", COMMIT_LOG),
            ),
            **_COMMIT,
        ),
        Operation(
            "commit_configuration_confirmed",
            params=(
                Fixed(COMMIT_CONFIRMED, ""),
                Argument(
                    "confirm_timeout", COMMIT_CONFIRM_TIMEOUT, DEFAULT_CONFIRM_TIMEOUT
                ),
                Argument("comment", COMMIT_LOG, ""),
            ),
            **_COMMIT,
        ),
        # configuration retrieval
        Operation(
            "get_configuration_curly",
            Family.GET_CONFIGURATION,
            params=(
                Fixed(ATTR_FORMAT, Format.TEXT),
                Argument("database", ATTR_DATABASE, DEFAULT_DATABASE),
            ),
            body=Argument("config_data", default=""),
        ),
        Operation(
            "get_configuration_xml",
            Family.GET_CONFIGURATION,
            params=(
                Fixed(ATTR_FORMAT, Format.XML),
                Argument("database", ATTR_DATABASE, DEFAULT_DATABASE),
            ),
            body=Argument("config_data", default=""),
        ),
        # no structured RPC renders set commands, so ask the CLI
        Operation(
            "get_configuration_set",
            Family.COMMAND,
            params=(Fixed(ATTR_FORMAT, Format.TEXT),),
            content=SHOW_CONFIGURATION_SET,
        ),
        Operation(
            "get_configuration_compare",
            Family.GET_CONFIGURATION,
            params=(
                Fixed(ATTR_COMPARE, "rollback"),
                Argument("rollback_id", ATTR_ROLLBACK, DEFAULT_COMPARE_ROLLBACK),
                Argument("format", ATTR_FORMAT, DEFAULT_COMPARE_FORMAT),
                Argument("database", ATTR_DATABASE, DEFAULT_DATABASE),
            ),
        ),
        Operation(
            "get_configuration_rollback_comparison",
            Family.GET_ROLLBACK_INFORMATION,
            params=(
                Argument("rollback_id", ROLLBACK_ROLLBACK),
                Argument("compare_id", ROLLBACK_COMPARE, None, optional=True),
            ),
        ),
        # session control
        Operation("abort", Family.ABORT),
        Operation("open_configuration", Family.OPEN_CONFIGURATION),
        Operation("close_configuration", Family.CLOSE_CONFIGURATION),
        Operation("lock_configuration", Family.LOCK_CONFIGURATION),
        Operation("unlock_configuration", Family.UNLOCK_CONFIGURATION),
        Operation("request_end_session", Family.REQUEST_END_SESSION),
        Operation(
            "get_checksum_information",
            Family.GET_CHECKSUM_INFORMATION,
            body=Argument("path"),
        ),
    )
}


def prepare(name: str, **kwargs: t.Any) -> OperationRequest:
    """
    Compute the operation request for a named operation.

    Args:
        name (str): The operation name.
        **kwargs: The operation arguments.

    Returns:
        OperationRequest: The request for the raw builder.

    Raises:
        UnknownOperationError: when the operation is not defined.
        TypeError: when the arguments do not match the operation.
    """
    try:
        operation = OPERATIONS[name]
    except KeyError as e:
        raise UnknownOperationError(name) from e

    request = operation.prepare(**kwargs)
    logger.debug("prepared operation %s: %s", name, request)
    return request
