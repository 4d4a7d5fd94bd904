"""Remote-access transport definitions for gcpctl.

A transport definition is a named recipe for opening a remote session
through gcloud: the login program and its arguments, and the shell used
to run commands once logged in. Login arguments may contain "%h", which
is replaced by the target host (or user@host).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

HOST_PLACEHOLDER = "%h"

CLOUD_SHELL_METHOD = "gcloud-shell"
COMPUTE_SSH_METHOD = "gcloud-ssh"


@dataclass(frozen=True)
class TransportDefinition:
    """Named recipe for opening a remote session"""

    method_name: str
    login_program: str
    login_args: Tuple[str, ...] = ()
    remote_shell: str = "/bin/sh"
    remote_shell_args: Tuple[str, ...] = ("-c",)

    @property
    def needs_host(self) -> bool:
        return any(HOST_PLACEHOLDER in arg for arg in self.login_args)

    def login_command(self, host: Optional[str] = None, user: Optional[str] = None) -> List[str]:
        """Expand the login program and arguments into an argv.

        Raises:
            ValueError: If the definition needs a host and none is given, or
                takes no host but a host or user is given
        """
        if self.needs_host and not host:
            raise ValueError(f"Transport '{self.method_name}' requires a host")
        if not self.needs_host and (host or user):
            raise ValueError(f"Transport '{self.method_name}' does not take a host or user")

        target = f"{user}@{host}" if user and host else host
        args = [arg.replace(HOST_PLACEHOLDER, target) if target else arg for arg in self.login_args]
        return [self.login_program, *args]

    def shell_command(self, command: str) -> List[str]:
        """Argv for running a command through the remote shell"""
        return [self.remote_shell, *self.remote_shell_args, command]


def default_transports(gcloud_binary: str = "gcloud") -> List[TransportDefinition]:
    """The two fixed transports: Cloud Shell and Compute Engine SSH"""
    return [
        TransportDefinition(
            method_name=CLOUD_SHELL_METHOD,
            login_program=gcloud_binary,
            login_args=("cloud-shell", "ssh", "--authorize-session"),
            remote_shell="/bin/bash",
            remote_shell_args=("-c",),
        ),
        TransportDefinition(
            method_name=COMPUTE_SSH_METHOD,
            login_program=gcloud_binary,
            login_args=("compute", "ssh", HOST_PLACEHOLDER),
            remote_shell="/bin/sh",
            remote_shell_args=("-c",),
        ),
    ]


class TransportRegistry:
    """Method name -> TransportDefinition, insert-if-absent only"""

    def __init__(self) -> None:
        self._methods: Dict[str, TransportDefinition] = {}

    def __contains__(self, method_name: str) -> bool:
        return method_name in self._methods

    def __len__(self) -> int:
        return len(self._methods)

    def __iter__(self) -> Iterator[TransportDefinition]:
        return iter(self._methods.values())

    def get(self, method_name: str) -> Optional[TransportDefinition]:
        return self._methods.get(method_name)

    def names(self) -> List[str]:
        return list(self._methods)

    def add_if_absent(self, definition: TransportDefinition) -> bool:
        """Add a definition unless its method name is already registered.

        Returns:
            True if the definition was added
        """
        if definition.method_name in self._methods:
            return False
        self._methods[definition.method_name] = definition
        return True


def register_transports(registry: TransportRegistry,
                        definitions: Optional[Iterable[TransportDefinition]] = None) -> List[str]:
    """Register transport definitions, skipping names already present.

    Returns:
        Method names that were newly added
    """
    if definitions is None:
        definitions = default_transports()

    added = []
    for definition in definitions:
        if registry.add_if_absent(definition):
            added.append(definition.method_name)
            logger.info(f"Registered transport: {definition.method_name}")
        else:
            logger.debug(f"Transport already registered: {definition.method_name}")
    return added
