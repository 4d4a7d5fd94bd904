"""Selection entries for switching configurations and projects.

A selection is a single string carrying a type prefix:

    config:<name>
    project:<display name>|<project id>

Project display names are not unique, so the project id travels with the
label and is extracted again after the user picks an entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .configurations import ConfigurationReader, Project

CONFIG_PREFIX = "config"
PROJECT_PREFIX = "project"


class SelectionParseError(ValueError):
    """Raised when a selection string is not a recognised entry."""

    def __init__(self, selection: str, reason: str):
        super().__init__(f"invalid selection {selection!r}: {reason}")
        self.selection = selection
        self.reason = reason


@dataclass(frozen=True)
class ConfigurationEntry:
    name: str

    @property
    def key(self) -> str:
        return f"{CONFIG_PREFIX}:{self.name}"


@dataclass(frozen=True)
class ProjectEntry:
    display_name: str
    project_id: str

    @property
    def key(self) -> str:
        return f"{PROJECT_PREFIX}:{self.display_name}|{self.project_id}"


SelectableEntry = Union[ConfigurationEntry, ProjectEntry]


def build_entries(configurations: Iterable[str], projects: Iterable[Project]) -> List[SelectableEntry]:
    """All configuration entries first, then all project entries."""
    entries: List[SelectableEntry] = [ConfigurationEntry(name) for name in configurations]
    entries.extend(ProjectEntry(p.name, p.project_id) for p in projects)
    return entries


def build_selection_list(reader: ConfigurationReader, limit: Optional[int] = None) -> List[str]:
    """Query gcloud and return selection keys in display order.

    Args:
        reader: Reader used for both gcloud queries
        limit: Optional project limit passed through to gcloud
    """
    entries = build_entries(reader.list_configuration_names(), reader.list_projects(limit))
    return [entry.key for entry in entries]


def parse_selection(selection: str) -> SelectableEntry:
    """Parse a selection key back into its entry.

    Raises:
        SelectionParseError: On a missing or unknown prefix, or an empty name/id
    """
    kind, sep, remainder = selection.partition(":")
    if not sep:
        raise SelectionParseError(selection, "missing type prefix")

    if kind == CONFIG_PREFIX:
        if not remainder:
            raise SelectionParseError(selection, "empty configuration name")
        return ConfigurationEntry(remainder)

    if kind == PROJECT_PREFIX:
        # Project ids never contain "|"; display names might
        display_name, sep, project_id = remainder.rpartition("|")
        if not sep:
            raise SelectionParseError(selection, "missing project id")
        if not project_id:
            raise SelectionParseError(selection, "empty project id")
        return ProjectEntry(display_name, project_id)

    raise SelectionParseError(selection, f"unknown type {kind!r}")
