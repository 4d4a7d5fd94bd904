"""Tests for the gcpctl command line."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from gcpctl_cli.context import CliContext
from gcpctl_cli.main import cli
from gcpctl_core.config import Config
from gcpctl_core.configurations import ACTIVE_CONFIGURATION_ARGS
from gcpctl_core.gcloud import CommandExitError, CommandNotFoundError


@pytest.fixture
def ctx(gcloud, config_dir):
    gcloud.set_active("default", project="p1", account="me@example.com")
    gcloud.set_configurations(["default", "staging"])
    gcloud.set_projects([
        {"name": "My Project", "projectId": "my-proj-123"},
        {"name": "My Project", "projectId": "my-proj-456"},
    ])
    return CliContext.from_config(Config(config_dir=config_dir), runner=gcloud)


def invoke(ctx, args, **kwargs):
    return CliRunner().invoke(cli, args, obj=ctx, **kwargs)


class TestStatusCommands:
    def test_status(self, ctx):
        result = invoke(ctx, ["status"])

        assert result.exit_code == 0
        assert result.output == " [GCP:p1(me@example.com,default)]\n"

    def test_status_gcloud_missing(self, ctx, gcloud):
        """Test a missing gcloud is a one-line error, not a traceback."""
        gcloud.fail(ACTIVE_CONFIGURATION_ARGS, CommandNotFoundError("read", "'gcloud' not found"))

        result = invoke(ctx, ["status"])

        assert result.exit_code == 1
        assert "Error: read: 'gcloud' not found" in result.output
        assert "Traceback" not in result.output

    def test_current(self, ctx):
        result = invoke(ctx, ["current"])

        assert result.exit_code == 0
        assert "me@example.com" in result.output

    def test_current_none(self, ctx, gcloud):
        gcloud.respond(ACTIVE_CONFIGURATION_ARGS, [])

        result = invoke(ctx, ["current"])

        assert result.exit_code == 0
        assert "No active gcloud configuration" in result.output


class TestSwitchingCommands:
    """Test list/activate/switch."""

    def test_list(self, ctx):
        result = invoke(ctx, ["list"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "config:default",
            "config:staging",
            "project:My Project|my-proj-123",
            "project:My Project|my-proj-456",
        ]

    def test_activate_project(self, ctx, gcloud):
        result = invoke(ctx, ["activate", "project:My Project|my-proj-456"])

        assert result.exit_code == 0
        assert ["config", "set", "core/project", "my-proj-456"] in gcloud.calls

    def test_activate_bad_selection(self, ctx, gcloud):
        result = invoke(ctx, ["activate", "zone:us-east1-b"])

        assert result.exit_code == 1
        assert "unknown type" in result.output
        assert gcloud.calls == []

    def test_activate_failure_reports(self, ctx, gcloud):
        gcloud.fail(
            ["config", "configurations", "activate", "ghost"],
            CommandExitError("activate", "ERROR: (gcloud) Cannot activate [ghost]", returncode=1),
        )

        result = invoke(ctx, ["activate", "config:ghost"])

        assert result.exit_code == 1
        assert "Cannot activate [ghost]" in result.output
        assert gcloud.calls[-1] == ACTIVE_CONFIGURATION_ARGS

    def test_switch_interactive(self, ctx, gcloud):
        result = invoke(ctx, ["switch"], input="2\n")

        assert result.exit_code == 0
        assert ["config", "configurations", "activate", "staging"] in gcloud.calls

    def test_switch_out_of_range(self, ctx, gcloud):
        result = invoke(ctx, ["switch"], input="9\n4\n")

        assert result.exit_code == 0
        assert ["config", "set", "core/project", "my-proj-456"] in gcloud.calls

    def test_projects_limit(self, ctx, gcloud):
        gcloud.set_projects([{"name": "Only", "projectId": "only-1"}], limit=1)

        result = invoke(ctx, ["projects", "--limit", "1"])

        assert result.exit_code == 0
        assert "only-1" in result.output

    @pytest.mark.parametrize("args", [["list"], ["projects"], ["switch"]])
    def test_invalid_configured_limit(self, ctx, gcloud, args):
        """Test a zero limit from the config file is a one-line error."""
        ctx.config.set("projects.limit", 0)

        result = invoke(ctx, args, input="1\n")

        assert result.exit_code == 1
        assert "Error: projects.limit must be a positive integer, got 0" in result.output
        assert "Traceback" not in result.output
        assert gcloud.calls_starting_with("projects", "list") == []

    def test_invalid_env_limit(self, gcloud, config_dir, monkeypatch):
        monkeypatch.setenv("GCPCTL_PROJECT_LIMIT", "lots")
        ctx = CliContext.from_config(Config(config_dir=config_dir), runner=gcloud)

        result = invoke(ctx, ["list"])

        assert result.exit_code == 1
        assert "got 'lots'" in result.output


class TestTransportCommands:
    def test_transports(self, ctx):
        result = invoke(ctx, ["transports"])

        assert result.exit_code == 0
        assert "gcloud-shell" in result.output
        assert "gcloud-ssh" in result.output

    def test_connect_dry_run(self, ctx):
        result = invoke(ctx, ["connect", "gcloud-ssh", "my-vm", "--user", "root", "--dry-run"])

        assert result.exit_code == 0
        assert result.output.strip() == "gcloud compute ssh root@my-vm"

    def test_connect_unknown(self, ctx):
        result = invoke(ctx, ["connect", "telnet", "--dry-run"])

        assert result.exit_code == 1
        assert "Unknown transport" in result.output

    def test_connect_missing_host(self, ctx):
        result = invoke(ctx, ["connect", "gcloud-ssh"])

        assert result.exit_code == 1
        assert "requires a host" in result.output

    def test_connect_cloud_shell_rejects_user(self, ctx):
        result = invoke(ctx, ["connect", "gcloud-shell", "--user", "root", "--dry-run"])

        assert result.exit_code == 1
        assert "does not take a host or user" in result.output

    def test_connect_execs(self, ctx):
        with patch("gcpctl_core.connection.os.execvp") as execvp:
            result = invoke(ctx, ["connect", "gcloud-shell"])

        assert result.exit_code == 0
        execvp.assert_called_once()


class TestSession:
    """Test the interactive session loop."""

    def test_session_toggle_and_quit(self, ctx):
        result = invoke(ctx, ["session"], input="off\nstatus\non\nquit\n")

        assert result.exit_code == 0
        assert "gcpctl [GCP:p1(me@example.com,default)]>" in result.output
        assert "(empty)" in result.output
        assert ctx.mode.enabled

    def test_session_keybinding_switches(self, ctx, gcloud):
        result = invoke(ctx, ["session"], input="C-c g\n1\nquit\n")

        assert result.exit_code == 0
        assert ["config", "configurations", "activate", "default"] in gcloud.calls

    def test_session_reports_errors_and_continues(self, ctx, gcloud):
        gcloud.fail(ACTIVE_CONFIGURATION_ARGS, CommandNotFoundError("read", "'gcloud' not found"))

        result = invoke(ctx, ["session", "--enable"], input="refresh\nquit\n")

        assert result.exit_code == 0
        assert result.output.count("'gcloud' not found") == 2

    def test_session_ends_on_eof(self, ctx):
        result = invoke(ctx, ["session", "--no-enable"], input="")

        assert result.exit_code == 0
        assert not ctx.mode.enabled

    def test_session_survives_cancelled_switch(self, ctx, gcloud):
        """Test end of input at the chooser cancels the switch, not the session."""
        result = invoke(ctx, ["session", "--no-enable"], input="switch\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert gcloud.calls_starting_with("config", "configurations", "activate") == []

    def test_session_reports_invalid_limit(self, ctx, gcloud):
        ctx.config.set("projects.limit", 0)

        result = invoke(ctx, ["session", "--no-enable"], input="switch\nstatus\nquit\n")

        assert result.exit_code == 0
        assert "projects.limit must be a positive integer" in result.output
        assert "(empty)" in result.output


class TestConfigCommands:
    def test_set_and_get(self, ctx):
        assert invoke(ctx, ["config", "set", "projects.limit", "30"]).exit_code == 0

        result = invoke(ctx, ["config", "get", "projects.limit"])

        assert result.output.strip() == "30"

    def test_get_missing(self, ctx):
        result = invoke(ctx, ["config", "get", "nope"])

        assert result.exit_code == 1
