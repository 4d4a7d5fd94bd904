"""Command modules for gcpctl CLI."""

from .gcloud import status, current, list_cmd, projects, activate, switch
from .transports import transports, connect
from .session import session
from .config import config_group

__all__ = [
    # Configuration commands
    "status",
    "current",
    "list_cmd",
    "projects",
    "activate",
    "switch",
    # Transport commands
    "transports",
    "connect",
    # Session
    "session",
    # Config commands
    "config_group",
]
