"""gcloud mode: the lifecycle-scoped owner of gcpctl state.

One GcloudMode holds the active configuration state, the on/off flag,
and the collaborators that read, render and switch it. Hosts create one
per session and pass it to their command handlers.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from .activator import Activator
from .configurations import ConfigurationReader
from .gcloud import GcloudRunner
from .selection import SelectableEntry, build_selection_list
from .state import ActiveConfigurationState
from .status import StatusLine, StatusRenderer
from .transports import TransportDefinition, TransportRegistry, default_transports, register_transports

logger = logging.getLogger(__name__)

DEFAULT_KEYBINDING = "C-c g"
SWITCH_COMMAND = "switch"


class GcloudMode:
    """Tracks and switches the active gcloud configuration"""

    def __init__(
        self,
        runner: GcloudRunner,
        status_line: Optional[StatusLine] = None,
        transports: Optional[TransportRegistry] = None,
        *,
        keybinding: str = DEFAULT_KEYBINDING,
        transport_definitions: Optional[List[TransportDefinition]] = None,
    ) -> None:
        self.runner = runner
        self.status_line = status_line if status_line is not None else StatusLine()
        self.transports = transports if transports is not None else TransportRegistry()
        self.keybinding = keybinding
        self.transport_definitions = (
            transport_definitions
            if transport_definitions is not None
            else default_transports(runner.binary)
        )

        self.state = ActiveConfigurationState()
        self.reader = ConfigurationReader(runner, self.state)
        self.renderer = StatusRenderer(self.state, self.status_line)
        self.activator = Activator(runner, self.refresh)

        self._enabled = False
        self._lock = threading.RLock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def keymap(self) -> Dict[str, str]:
        return {self.keybinding: SWITCH_COMMAND}

    @property
    def status_text(self) -> str:
        return self.renderer.text

    def enable(self) -> None:
        """Turn the mode on: register transports, attach status, read state.

        Errors from reading the state propagate after the mode is on; the
        status then shows the "None" sentinels.
        """
        with self._lock:
            if self._enabled:
                return
            self._enabled = True
            self.register_transports()
            self.renderer.attach()
            logger.info("gcloud mode enabled")
            self.refresh()

    def register_transports(self) -> List[str]:
        """Register the transport definitions, skipping names already present"""
        with self._lock:
            return register_transports(self.transports, self.transport_definitions)

    def disable(self) -> None:
        """Turn the mode off and detach the status segment"""
        with self._lock:
            if not self._enabled:
                return
            self._enabled = False
            self.renderer.clear_status()
            logger.info("gcloud mode disabled")

    def toggle(self) -> bool:
        with self._lock:
            if self.enabled:
                self.disable()
            else:
                self.enable()
            return self.enabled

    def refresh(self) -> ActiveConfigurationState:
        """Re-read the active configuration and update the status"""
        with self._lock:
            try:
                self.reader.read_active_configuration()
            finally:
                self.renderer.update_status()
            return self.state

    def selection_list(self, limit: Optional[int] = None) -> List[str]:
        return build_selection_list(self.reader, limit)

    def activate(self, selection: str) -> SelectableEntry:
        with self._lock:
            return self.activator.activate(selection)
