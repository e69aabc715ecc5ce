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

import typing as t

from .constants import (
    ATTR_FORMAT,
    COMMIT_SYNCHRONIZE,
    ELEMENT_PATH,
    ELEMENT_PRIVATE,
    NODE_CONFIGURATION,
    ROLLBACK_COMPARE,
    ROLLBACK_ROLLBACK,
)
from .element import RpcElement
from .params import Params, ParamSource, ParamValue
from .request import Family, OperationRequest


# load body elements whose content is XML rather than character data
MARKUP_NODES = frozenset({NODE_CONFIGURATION})


def build_command(command: str, format: str = "text") -> str:
    """
    Build an operational command RPC.

    Args:
        command (str): The command in CLI syntax.
        format (str): Reply rendering, 'text' or 'xml'.

    Returns:
        str: The RPC body.
    """
    element = RpcElement(
        Family.COMMAND.value, attributes=Params({ATTR_FORMAT: format}), text=command
    )
    return element.render()


def build_load_configuration(
    config_data: str = "",
    config_node: str = "",
    attributes: t.Optional[ParamSource] = None,
) -> str:
    """
    Build a load-configuration RPC.

    The configuration is only wrapped when both config_data and config_node
    are given, otherwise the element is self-closed and carries attributes
    only.

    Args:
        config_data (str): The configuration to load.
        config_node (str): The element wrapping the configuration.
        attributes (t.Optional[ParamSource]): Load attributes, in order.

    Returns:
        str: The RPC body.
    """
    element = RpcElement(Family.LOAD_CONFIGURATION.value, attributes=Params(attributes))

    if config_data and config_node:
        if config_node in MARKUP_NODES:
            element.append(RpcElement(config_node, markup=config_data))
        else:
            element.append(RpcElement(config_node, text=config_data))

    return element.render()


def build_commit_configuration(
    params: t.Optional[ParamSource] = None, synchronize: bool = True
) -> str:
    """
    Build a commit-configuration RPC.

    Every parameter becomes a child element named after its key, flags
    included. When synchronize is set, the synchronize child is emptied, or
    emitted first when params do not hold it.

    Args:
        params (t.Optional[ParamSource]): Commit parameters, in order.
        synchronize (bool): Commit on both routing engines.

    Returns:
        str: The RPC body.
    """
    params = Params(params)
    if synchronize:
        if COMMIT_SYNCHRONIZE in params:
            params = Params(
                (name, "" if name == COMMIT_SYNCHRONIZE else value)
                for name, value in params
            )
        else:
            params = Params({COMMIT_SYNCHRONIZE: ""}).merged(params)

    element = RpcElement(Family.COMMIT_CONFIGURATION.value)
    for name, value in params:
        element.append(RpcElement(name, text=value))

    return element.render()


def build_get_configuration(
    config_data: str = "", attributes: t.Optional[ParamSource] = None
) -> str:
    """
    Build a get-configuration RPC.

    Args:
        config_data (str): XML stanza selecting the configuration.
        attributes (t.Optional[ParamSource]): Retrieval attributes, in order.

    Returns:
        str: The RPC body.
    """
    element = RpcElement(
        Family.GET_CONFIGURATION.value,
        attributes=Params(attributes),
        markup=config_data,
    )
    return element.render()


def build_get_rollback_information(
    rollback_id: ParamValue,
    compare_id: t.Optional[ParamValue] = None,
) -> str:
    """
    Build a get-rollback-information RPC.

    Args:
        rollback_id (ParamValue): The rollback to show.
        compare_id (t.Optional[ParamValue]): The rollback to compare against.

    Returns:
        str: The RPC body.
    """
    params = Params({ROLLBACK_ROLLBACK: rollback_id})
    if compare_id is not None:
        params = params.with_param(ROLLBACK_COMPARE, compare_id)

    return _build_rollback_information(params)


def _build_rollback_information(params: Params) -> str:
    element = RpcElement(Family.GET_ROLLBACK_INFORMATION.value)
    for name, value in params:
        element.append(RpcElement(name, text=value))
    return element.render()


def build_abort() -> str:
    return RpcElement(Family.ABORT.value).render()


def build_open_configuration() -> str:
    element = RpcElement(Family.OPEN_CONFIGURATION.value)
    element.append(RpcElement(ELEMENT_PRIVATE))
    return element.render()


def build_close_configuration() -> str:
    return RpcElement(Family.CLOSE_CONFIGURATION.value).render()


def build_lock_configuration() -> str:
    return RpcElement(Family.LOCK_CONFIGURATION.value).render()


def build_unlock_configuration() -> str:
    return RpcElement(Family.UNLOCK_CONFIGURATION.value).render()


def build_request_end_session() -> str:
    return RpcElement(Family.REQUEST_END_SESSION.value).render()


def build_get_checksum_information(path: str) -> str:
    """Build a get-checksum-information RPC for the file at path."""
    element = RpcElement(Family.GET_CHECKSUM_INFORMATION.value)
    element.append(RpcElement(ELEMENT_PATH, text=path))
    return element.render()


_FIXED_BUILDERS: t.Dict[Family, t.Callable[[], str]] = {
    Family.ABORT: build_abort,
    Family.OPEN_CONFIGURATION: build_open_configuration,
    Family.CLOSE_CONFIGURATION: build_close_configuration,
    Family.LOCK_CONFIGURATION: build_lock_configuration,
    Family.UNLOCK_CONFIGURATION: build_unlock_configuration,
    Family.REQUEST_END_SESSION: build_request_end_session,
}


def build(request: OperationRequest) -> str:
    """
    Build the RPC body for an operation request.

    Args:
        request (OperationRequest): The request to render.

    Returns:
        str: The RPC body.
    """
    family = request.family

    if family is Family.COMMAND:
        return build_command(
            request.body_content, request.params.get(ATTR_FORMAT, "text")
        )
    if family is Family.LOAD_CONFIGURATION:
        return build_load_configuration(
            request.body_content, request.body_element, request.params
        )
    if family is Family.COMMIT_CONFIGURATION:
        return build_commit_configuration(request.params, request.synchronize)
    if family is Family.GET_CONFIGURATION:
        return build_get_configuration(request.body_content, request.params)
    if family is Family.GET_ROLLBACK_INFORMATION:
        return _build_rollback_information(request.params)
    if family is Family.GET_CHECKSUM_INFORMATION:
        return build_get_checksum_information(request.body_content)

    return _FIXED_BUILDERS[family]()
