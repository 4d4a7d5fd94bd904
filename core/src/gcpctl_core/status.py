"""Status line rendering for gcpctl"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .state import ActiveConfigurationState

logger = logging.getLogger(__name__)

STATUS_TEMPLATE = " [GCP:{project_id}({account},{config_name})]"
SEGMENT_NAME = "gcloud"


class StatusLine:
    """Shared status line made of named segments.

    Each contributor owns the segment it inserted and removes it by name,
    so one contributor never edits text that belongs to another.
    """

    def __init__(self) -> None:
        self._segments: List[Tuple[str, str]] = []

    def __contains__(self, name: str) -> bool:
        return any(n == name for n, _ in self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def get(self, name: str) -> Optional[str]:
        for n, text in self._segments:
            if n == name:
                return text
        return None

    def set(self, name: str, text: str) -> None:
        """Insert a segment at the end, or replace it in place if present"""
        for i, (n, _) in enumerate(self._segments):
            if n == name:
                self._segments[i] = (name, text)
                return
        self._segments.append((name, text))

    def remove(self, name: str) -> bool:
        """Remove a segment, returning True if it existed"""
        before = len(self._segments)
        self._segments = [(n, t) for n, t in self._segments if n != name]
        return len(self._segments) != before

    def names(self) -> List[str]:
        return [n for n, _ in self._segments]

    def render(self) -> str:
        return "".join(text for _, text in self._segments)


def render_status(state: ActiveConfigurationState) -> str:
    """Format the state as a status segment"""
    return STATUS_TEMPLATE.format(
        project_id=state.project_id,
        account=state.account,
        config_name=state.config_name,
    )


class StatusRenderer:
    """Keeps the gcloud segment of a StatusLine in step with the state"""

    def __init__(self, state: ActiveConfigurationState, status_line: StatusLine,
                 segment_name: str = SEGMENT_NAME):
        self.state = state
        self.status_line = status_line
        self.segment_name = segment_name
        self.text = render_status(state)

    @property
    def attached(self) -> bool:
        return self.segment_name in self.status_line

    def update_status(self) -> str:
        """Recompute the text; replace the segment if it is attached"""
        self.text = render_status(self.state)
        if self.attached:
            self.status_line.set(self.segment_name, self.text)
        logger.debug(f"Status updated: {self.text!r}")
        return self.text

    def attach(self) -> None:
        self.text = render_status(self.state)
        self.status_line.set(self.segment_name, self.text)

    def clear_status(self) -> bool:
        """Remove the owned segment from the status line"""
        return self.status_line.remove(self.segment_name)
