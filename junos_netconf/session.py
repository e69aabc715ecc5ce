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

from ncclient import manager
from ncclient.xml_ import to_ele

from .settings import Settings


logger = logging.getLogger(__name__)


class Session(t.Protocol):
    """
    An established NETCONF session able to send one RPC body at a time.
    """

    def send_rpc(self, body: str) -> t.Any:
        """
        Send an RPC body and return the device reply.

        Args:
            body (str): A complete RPC element without the rpc envelope.

        Returns:
            t.Any: The reply, opaque to the caller of this layer.
        """


class NcclientSession:
    """A session backed by an ncclient manager."""

    def __init__(self, nc_manager: manager.Manager):
        """
        Initialise the session.

        Args:
            nc_manager (manager.Manager): A connected ncclient manager.
        """
        self._manager = nc_manager

    @classmethod
    def connect(
        cls, settings: t.Optional[Settings] = None, **kwargs: t.Any
    ) -> "NcclientSession":
        """
        Open a NETCONF over SSH session.

        Args:
            settings (t.Optional[Settings]): Connection settings.
            **kwargs: Extra arguments for ncclient.manager.connect.

        Returns:
            NcclientSession: The connected session.

        Raises:
            ncclient.transport.errors.SSHError: when the connection fails.
            ncclient.transport.errors.AuthenticationError: when authentication fails.
        """
        settings = settings or Settings()
        params: t.Dict[str, t.Any] = dict(
            host=settings.host,
            port=settings.port,
            username=settings.username,
            password=settings.password,
            hostkey_verify=settings.hostkey_verify,
            device_params={"name": settings.device},
            manager_params={"timeout": settings.timeout},
        )
        if settings.key_filename:
            params["key_filename"] = settings.key_filename
        params.update(kwargs)

        logger.info(
            "connecting to %s:%d as %s",
            params["host"],
            params["port"],
            params["username"],
        )
        return cls(manager.connect(**params))

    @property
    def manager(self) -> manager.Manager:
        """
        Get the underlying ncclient manager.

        Returns:
            manager.Manager: The manager.
        """
        return self._manager

    @property
    def connected(self) -> bool:
        return self._manager.connected

    def send_rpc(self, body: str) -> t.Any:
        """
        Dispatch an RPC body on the session.

        Args:
            body (str): A complete RPC element without the rpc envelope.

        Returns:
            ncclient.operations.rpc.RPCReply: The device reply.

        Raises:
            ncclient.operations.rpc.RPCError: when the device returns an error.
        """
        logger.debug("sending rpc: %s", body)
        return self._manager.dispatch(to_ele(body))

    def close(self) -> None:
        """Close the NETCONF session."""
        if self._manager.connected:
            logger.info("closing session %s", self._manager.session_id)
            self._manager.close_session()

    def __enter__(self) -> "NcclientSession":
        return self

    def __exit__(self, *_) -> None:
        self.close()
