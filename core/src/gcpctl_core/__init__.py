"""gcpctl Core - track and switch the active gcloud configuration

This is the core library package. It contains no CLI dependencies (click, rich)
and can be embedded in any host that provides a status line and a
transport registry.
"""

__version__ = "0.1.0"

from .config import Config
from .gcloud import (
    GcloudRunner,
    ExternalCommandError,
    CommandNotFoundError,
    CommandExitError,
    CommandOutputError,
)
from .state import ActiveConfigurationState
from .configurations import ConfigurationReader, Project
from .selection import SelectionParseError, build_selection_list, parse_selection
from .activator import Activator
from .status import StatusLine, StatusRenderer, render_status
from .transports import TransportDefinition, TransportRegistry, register_transports
from .connection import ConnectionManager
from .mode import GcloudMode

__all__ = [
    # Core classes
    "Config",
    "GcloudRunner",
    "ActiveConfigurationState",
    "ConfigurationReader",
    "Project",
    "Activator",
    "StatusLine",
    "StatusRenderer",
    "TransportDefinition",
    "TransportRegistry",
    "ConnectionManager",
    "GcloudMode",
    # Functions
    "build_selection_list",
    "parse_selection",
    "render_status",
    "register_transports",
    # Errors
    "ExternalCommandError",
    "CommandNotFoundError",
    "CommandExitError",
    "CommandOutputError",
    "SelectionParseError",
    # Version
    "__version__",
]
