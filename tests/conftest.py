"""Pytest configuration and shared fixtures."""

import json

import pytest
import sys
from pathlib import Path

# Add core and cli packages to path for testing
root = Path(__file__).parent.parent
sys.path.insert(0, str(root / "core" / "src"))
sys.path.insert(0, str(root / "cli" / "src"))

from gcpctl_core.gcloud import GcloudRunner
from gcpctl_core.configurations import (
    ACTIVE_CONFIGURATION_ARGS,
    CONFIGURATION_NAMES_ARGS,
    PROJECTS_ARGS,
)


class FakeGcloud(GcloudRunner):
    """GcloudRunner that answers from canned output and records every call."""

    def __init__(self):
        super().__init__(binary="gcloud")
        self.responses = {}
        self.errors = {}
        self.calls = []

    def respond(self, args, output):
        if not isinstance(output, str):
            output = json.dumps(output)
        self.responses[tuple(args)] = output

    def fail(self, args, error):
        self.errors[tuple(args)] = error

    def run(self, args, stage="run"):
        key = tuple(args)
        self.calls.append(list(args))
        if key in self.errors:
            raise self.errors[key]
        return self.responses.get(key, "")

    def set_active(self, name, project=None, account=None, region=None):
        """Canned answer for the active-configuration query."""
        core = {}
        if project is not None:
            core["project"] = project
        if account is not None:
            core["account"] = account
        item = {"name": name, "properties": {"core": core}}
        if region is not None:
            item["properties"]["compute"] = {"region": region}
        self.respond(ACTIVE_CONFIGURATION_ARGS, [item])

    def set_configurations(self, names):
        self.respond(CONFIGURATION_NAMES_ARGS, "".join(f"{n}\n" for n in names))

    def set_projects(self, projects, limit=None):
        args = list(PROJECTS_ARGS)
        if limit is not None:
            args += ["--limit", str(limit)]
        self.respond(args, projects)

    def calls_starting_with(self, *prefix):
        return [c for c in self.calls if c[:len(prefix)] == list(prefix)]


@pytest.fixture
def gcloud():
    return FakeGcloud()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    for var in ("GCPCTL_GCLOUD", "GCPCTL_PROJECT_LIMIT", "GCPCTL_KEYBINDING"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config"
