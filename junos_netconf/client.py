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
from dataclasses import replace

from .builders import (
    build,
    build_command,
    build_commit_configuration,
    build_get_configuration,
    build_load_configuration,
)
from .constants import (
    DEFAULT_COMPARE_FORMAT,
    DEFAULT_COMPARE_ROLLBACK,
    DEFAULT_CONFIRM_TIMEOUT,
    DEFAULT_DATABASE,
    DEFAULT_LOAD_ACTION,
    DEFAULT_LOAD_FORMAT,
)
from .operations import prepare
from .params import ParamSource, ParamValue
from .session import NcclientSession, Session
from .settings import Settings


logger = logging.getLogger(__name__)


class JunosNetconf:
    """
    Junos device operations over an established NETCONF session.

    Every operation builds one RPC body, sends it with the session's
    send_rpc and returns the reply unchanged. Errors raised by the session
    are not caught.
    """

    def __init__(self, session: Session, settings: t.Optional[Settings] = None):
        """
        Initialise the client.

        Args:
            session (Session): The session used to send RPCs, not owned.
            settings (t.Optional[Settings]): Client settings.
        """
        self._session = session
        self.settings: Settings = settings or Settings()
        self._owns_session: bool = False

    @classmethod
    def connect(
        cls,
        host: t.Optional[str] = None,
        settings: t.Optional[Settings] = None,
        **kwargs,
    ) -> "JunosNetconf":
        """
        Connect to a device and return a client owning the session.

        Args:
            host (t.Optional[str]): The device hostname, overrides settings.
            settings (t.Optional[Settings]): Connection and client settings.
            **kwargs: Extra arguments for ncclient.manager.connect.

        Returns:
            JunosNetconf: The connected client.
        """
        settings = settings or Settings()
        if host is not None:
            settings = replace(settings, host=host)

        client = cls(NcclientSession.connect(settings, **kwargs), settings)
        client._owns_session = True
        return client

    @property
    def session(self) -> Session:
        """
        Get the session used to send RPCs.

        Returns:
            Session: The session.
        """
        return self._session

    @property
    def hostname(self) -> str:
        return self.settings.host

    def close(self) -> None:
        """Close the session if this client opened it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "JunosNetconf":
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def _send(self, body: str) -> t.Any:
        logger.debug("sending rpc to %s: %s", self.hostname, body)
        return self._session.send_rpc(body)

    def execute(self, name: str, **kwargs: t.Any) -> t.Any:
        """
        Run a named operation.

        Args:
            name (str): The operation name, e.g. 'commit_configuration'.
            **kwargs: The operation arguments.

        Returns:
            t.Any: The session reply.

        Raises:
            UnknownOperationError: when the operation is not defined.
            TypeError: when the arguments do not match the operation.
        """
        request = prepare(name, **kwargs)
        return self._send(build(request))

    # raw builders

    def operational_command_raw(self, command: str, format: str) -> t.Any:
        """
        Send a command in CLI syntax.

        Args:
            command (str): The CLI command.
            format (str): Reply format, 'text' or 'xml'.
        """
        return self._send(build_command(command, format))

    def load_configuration_raw(
        self,
        config_data: str = "",
        config_node: str = "",
        attributes: t.Optional[ParamSource] = None,
    ) -> t.Any:
        """
        Load configuration into the candidate configuration.

        Args:
            config_data (str): The configuration.
            config_node (str): Element wrapping the configuration.
            attributes (t.Optional[ParamSource]): load-configuration attributes.
        """
        body = build_load_configuration(config_data, config_node, attributes)
        return self._send(body)

    def commit_configuration_raw(
        self, params: t.Optional[ParamSource] = None, synchronize: bool = True
    ) -> t.Any:
        """
        Commit the candidate configuration.

        Args:
            params (t.Optional[ParamSource]): Commit options, sent as child elements.
            synchronize (bool): Also commit on the other routing engine.
        """
        return self._send(build_commit_configuration(params, synchronize))

    def get_configuration_raw(
        self, config_data: str = "", attributes: t.Optional[ParamSource] = None
    ) -> t.Any:
        """
        Get the device configuration.

        Args:
            config_data (str): XML stanza selecting the configuration.
            attributes (t.Optional[ParamSource]): get-configuration attributes.
        """
        return self._send(build_get_configuration(config_data, attributes))

    # operational commands

    def operational_command_text(self, command: str) -> t.Any:
        """Send a CLI command and request text output."""
        return self.execute("operational_command_text", command=command)

    def operational_command_xml(self, command: str) -> t.Any:
        """Send a CLI command and request XML output."""
        return self.execute("operational_command_xml", command=command)

    # configuration load

    def load_configuration_rescue(self) -> t.Any:
        """Load the rescue configuration, like 'rollback rescue'."""
        return self.execute("load_configuration_rescue")

    def load_configuration_rollback(self, rollback_id: ParamValue) -> t.Any:
        """Load a rollback configuration, like 'rollback <id>'."""
        return self.execute("load_configuration_rollback", rollback_id=rollback_id)

    def load_configuration_url(
        self,
        url: str,
        action: ParamValue = DEFAULT_LOAD_ACTION,
        format: ParamValue = DEFAULT_LOAD_FORMAT,
    ) -> t.Any:
        """
        Load the configuration file found at url.

        Args:
            url (str): HTTP, FTP, SCP or device local file location.
            action (ParamValue): The load action.
            format (ParamValue): The file format.
        """
        return self.execute(
            "load_configuration_url", url=url, action=action, format=format
        )

    def load_configuration_set_url(self, url: str) -> t.Any:
        """Load the set commands in the file found at url."""
        return self.execute("load_configuration_set_url", url=url)

    def load_configuration_xml(self, config_data: str, action: ParamValue) -> t.Any:
        """Load XML configuration."""
        return self.execute(
            "load_configuration_xml", config_data=config_data, action=action
        )

    def load_configuration_curly(self, config_data: str, action: ParamValue) -> t.Any:
        """Load curly brace configuration."""
        return self.execute(
            "load_configuration_curly", config_data=config_data, action=action
        )

    def load_configuration_set(self, commands: t.Iterable[str]) -> t.Any:
        """Load set commands, one per item."""
        return self.execute("load_configuration_set", commands=commands)

    # configuration commit

    def commit_configuration(self, synchronize: bool = True) -> t.Any:
        """Commit, like 'commit' or 'commit synchronize'."""
        return self.execute("commit_configuration", synchronize=synchronize)

    def commit_configuration_check(self, synchronize: bool = True) -> t.Any:
        """Validate the candidate configuration, like 'commit check'."""
        return self.execute("commit_configuration_check", synchronize=synchronize)

    def commit_configuration_with_comment(
        self, comment: str, synchronize: bool = True
    ) -> t.Any:
        """Commit with a log comment, like 'commit comment <comment>'."""
        return self.execute(
            "commit_configuration_with_comment",
            comment=comment,
            synchronize=synchronize,
        )

    def commit_configuration_at_time_with_comment(
        self, at_time: str, comment: str, synchronize: bool = True
    ) -> t.Any:
        """
        Schedule a commit with a log comment.

        Equivalent to 'commit at <at_time> comment <comment>'.

        Args:
            at_time (str): When to commit, e.g. '04:00:00'.
            comment (str): The commit log comment.
            synchronize (bool): Also commit on the other routing engine.
        """
        return self.execute(
            "commit_configuration_at_time_with_comment",
            at_time=at_time,
            comment=comment,
            synchronize=synchronize,
        )

    def commit_configuration_confirmed(
        self,
        confirm_timeout: int = DEFAULT_CONFIRM_TIMEOUT,
        comment: str = "",
        synchronize: bool = True,
    ) -> t.Any:
        """
        Commit and roll back unless a follow-up commit arrives in time.

        Equivalent to 'commit confirmed'.

        Args:
            confirm_timeout (int): Seconds before the automatic rollback.
            comment (str): The commit log comment.
            synchronize (bool): Also commit on the other routing engine.
        """
        return self.execute(
            "commit_configuration_confirmed",
            confirm_timeout=confirm_timeout,
            comment=comment,
            synchronize=synchronize,
        )

    # configuration retrieval

    def get_configuration_curly(
        self, config_data: str = "", database: ParamValue = DEFAULT_DATABASE
    ) -> t.Any:
        """Get configuration as curly brace text, like 'show configuration'."""
        return self.execute(
            "get_configuration_curly", config_data=config_data, database=database
        )

    def get_configuration_xml(
        self, config_data: str = "", database: ParamValue = DEFAULT_DATABASE
    ) -> t.Any:
        return self.execute(
            "get_configuration_xml", config_data=config_data, database=database
        )

    def get_configuration_set(self) -> t.Any:
        """Get configuration as set commands."""
        return self.execute("get_configuration_set")

    def get_configuration_compare(
        self,
        rollback_id: ParamValue = DEFAULT_COMPARE_ROLLBACK,
        format: ParamValue = DEFAULT_COMPARE_FORMAT,
        database: ParamValue = DEFAULT_DATABASE,
    ) -> t.Any:
        """
        Compare the candidate configuration with a rollback.

        Equivalent to 'show | compare rollback <rollback_id>'.

        Args:
            rollback_id (ParamValue): The rollback to compare against.
            format (ParamValue): Reply format.
            database (ParamValue): The configuration database.
        """
        return self.execute(
            "get_configuration_compare",
            rollback_id=rollback_id,
            format=format,
            database=database,
        )

    def get_configuration_rollback_comparison(
        self, rollback_id: ParamValue, compare_id: t.Optional[ParamValue] = None
    ) -> t.Any:
        """
        Compare two rollbacks.

        Equivalent to 'show system rollback <rollback_id> compare <compare_id>'.
        """
        return self.execute(
            "get_configuration_rollback_comparison",
            rollback_id=rollback_id,
            compare_id=compare_id,
        )

    # session control

    def abort(self) -> t.Any:
        """Abort the operation in progress."""
        return self.execute("abort")

    def get_checksum_information(self, path: str) -> t.Any:
        """Get the MD5 checksum of the file at path."""
        return self.execute("get_checksum_information", path=path)

    def open_configuration(self) -> t.Any:
        """Open a private candidate, like 'configure private'."""
        return self.execute("open_configuration")

    def close_configuration(self) -> t.Any:
        return self.execute("close_configuration")

    def lock_configuration(self) -> t.Any:
        """Lock the candidate, like 'configure exclusive'."""
        return self.execute("lock_configuration")

    def unlock_configuration(self) -> t.Any:
        return self.execute("unlock_configuration")

    def request_end_session(self) -> t.Any:
        """Ask the device to end the NETCONF session."""
        return self.execute("request_end_session")
