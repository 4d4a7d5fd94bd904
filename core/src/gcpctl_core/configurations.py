"""gcloud configuration and project queries for gcpctl"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging

from .gcloud import CommandOutputError, GcloudRunner
from .state import ActiveConfigurationState

logger = logging.getLogger(__name__)


ACTIVE_CONFIGURATION_ARGS = [
    "config", "configurations", "list",
    "--filter=is_active=True",
    "--format=json(name,properties.core.account,properties.core.project,properties.compute.region)",
]
CONFIGURATION_NAMES_ARGS = ["config", "configurations", "list", "--format=value(name)"]
PROJECTS_ARGS = ["projects", "list", "--format=json(name,projectId)"]


@dataclass(frozen=True)
class Project:
    """One row of `gcloud projects list`"""

    name: str
    project_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        return cls(name=str(data.get('name') or ""), project_id=str(data.get('projectId') or ""))


class ConfigurationReader:
    """Reads configuration state from gcloud.

    The reader owns an ActiveConfigurationState and overwrites it on
    every successful read.
    """

    def __init__(self, runner: GcloudRunner, state: Optional[ActiveConfigurationState] = None):
        self.runner = runner
        self.state = state if state is not None else ActiveConfigurationState()

    def read_active_configuration(self) -> ActiveConfigurationState:
        """Resolve the active configuration.

        Returns:
            The owned state, updated in place. All fields are "None" when
            gcloud reports no active configuration.

        Raises:
            ExternalCommandError: If gcloud fails or prints malformed output
        """
        data = self.runner.run_json(ACTIVE_CONFIGURATION_ARGS, stage="read")

        if not isinstance(data, list):
            raise CommandOutputError("read", f"expected a JSON array, got {type(data).__name__}")

        if not data:
            logger.info("No active gcloud configuration")
            self.state.reset()
            return self.state

        first = data[0]
        if not isinstance(first, dict):
            raise CommandOutputError("read", f"expected a JSON object, got {type(first).__name__}")

        self.state.update(ActiveConfigurationState.from_gcloud(first))
        logger.debug(f"Active configuration: {self.state.to_dict()}")
        return self.state

    def list_configuration_names(self) -> List[str]:
        """List configuration names in the order gcloud returns them"""
        return self.runner.run_lines(CONFIGURATION_NAMES_ARGS, stage="list-configurations")

    def list_projects(self, limit: Optional[int] = None) -> List[Project]:
        """List projects visible to the active account.

        Args:
            limit: Passed to gcloud's --limit flag; no flag when None

        Raises:
            ValueError: If limit is not a positive integer
        """
        args = list(PROJECTS_ARGS)
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
                raise ValueError(f"limit must be a positive integer, got {limit!r}")
            args += ["--limit", str(limit)]

        data = self.runner.run_json(args, stage="list-projects")
        if not isinstance(data, list):
            raise CommandOutputError("list-projects", f"expected a JSON array, got {type(data).__name__}")

        return [Project.from_dict(item) for item in data if isinstance(item, dict)]
