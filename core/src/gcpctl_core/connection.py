"""Remote session management for gcpctl"""

import os
import shlex
import logging
from typing import List, Optional

from .transports import TransportDefinition, TransportRegistry

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Open remote sessions through registered transports"""

    def __init__(self, transports: TransportRegistry):
        self.transports = transports

    def _definition(self, method: str) -> TransportDefinition:
        definition = self.transports.get(method)
        if definition is None:
            known = ", ".join(self.transports.names()) or "none"
            raise KeyError(f"Unknown transport '{method}' (registered: {known})")
        return definition

    def login_command(self, method: str, host: Optional[str] = None,
                      user: Optional[str] = None) -> List[str]:
        """Build the login argv for a transport"""
        return self._definition(method).login_command(host=host, user=user)

    def remote_command(self, method: str, command: str, host: Optional[str] = None,
                       user: Optional[str] = None) -> List[str]:
        """Build an argv that runs one command through the transport's remote shell.

        gcloud's ssh commands take the remote command via --command.
        """
        definition = self._definition(method)
        login = definition.login_command(host=host, user=user)
        return login + ["--command", shlex.join(definition.shell_command(command))]

    def connect(self, method: str, host: Optional[str] = None, user: Optional[str] = None,
                command: Optional[str] = None):
        """Replace the current process with an interactive session.

        Args:
            method: Registered transport name
            host: Target host for transports that need one
            user: Optional remote user
            command: Optional command to run instead of an interactive shell
        """
        if command:
            cmd = self.remote_command(method, command, host=host, user=user)
        else:
            cmd = self.login_command(method, host=host, user=user)

        logger.info(f"Opening {method} session: {' '.join(cmd)}")
        os.execvp(cmd[0], cmd)
