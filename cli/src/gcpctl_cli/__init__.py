"""gcpctl CLI - Command-line interface for gcpctl

This package provides the CLI commands for gcpctl.
It depends on gcpctl-core for all business logic.
"""

from gcpctl_core import __version__

__all__ = ["__version__"]
