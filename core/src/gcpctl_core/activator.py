"""Switch the active gcloud configuration or project"""

import logging
from typing import Callable, Optional

from .gcloud import ExternalCommandError, GcloudRunner
from .selection import ConfigurationEntry, ProjectEntry, SelectableEntry, parse_selection

logger = logging.getLogger(__name__)


class Activator:
    """Dispatches a selection to gcloud, then refreshes.

    The refresh callback runs after every dispatch, including a failed one,
    so the displayed state always reflects what gcloud reports afterwards.
    Setting a project may also change which configuration is active; that
    is gcloud's behaviour and is left as is.
    """

    def __init__(self, runner: GcloudRunner, refresh: Callable[[], object]):
        self.runner = runner
        self.refresh = refresh

    def activate_configuration(self, name: str) -> None:
        self.runner.run(["config", "configurations", "activate", name], stage="activate")
        logger.info(f"Activated configuration: {name}")

    def set_project(self, project_id: str) -> None:
        self.runner.run(["config", "set", "core/project", project_id], stage="set-project")
        logger.info(f"Set project: {project_id}")

    def dispatch(self, entry: SelectableEntry) -> None:
        if isinstance(entry, ConfigurationEntry):
            self.activate_configuration(entry.name)
        elif isinstance(entry, ProjectEntry):
            self.set_project(entry.project_id)
        else:
            raise TypeError(f"Unsupported selection entry: {entry!r}")

    def activate(self, selection: str) -> SelectableEntry:
        """Activate a selection string such as "config:default".

        Raises:
            SelectionParseError: Before any gcloud call, if the string is malformed
            ExternalCommandError: If the dispatch or the refresh fails. When
                both fail the dispatch error is raised, chained from the
                refresh error.
        """
        entry = parse_selection(selection)

        error: Optional[ExternalCommandError] = None
        try:
            self.dispatch(entry)
        except ExternalCommandError as e:
            logger.info(f"Activation of {selection!r} failed: {e}")
            error = e

        try:
            self.refresh()
        except ExternalCommandError as refresh_error:
            if error is None:
                raise
            logger.info(f"Refresh after failed activation also failed: {refresh_error}")
            raise error from refresh_error

        if error is not None:
            raise error
        return entry
