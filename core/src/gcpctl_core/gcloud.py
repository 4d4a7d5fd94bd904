"""Subprocess transport layer for the gcloud CLI"""

from __future__ import annotations
from typing import Any, List, Optional, Sequence
import json
import logging
import subprocess

logger = logging.getLogger(__name__)


class ExternalCommandError(RuntimeError):
    """Exception raised when a gcloud invocation cannot be completed."""

    def __init__(self, stage: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.stage = stage
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.stage}: {super().__str__()}"


class CommandNotFoundError(ExternalCommandError):
    """The gcloud executable could not be found."""


class CommandExitError(ExternalCommandError):
    """gcloud exited with a non-zero status."""

    def __init__(self, stage: str, message: str, returncode: int, stderr: str = ""):
        super().__init__(stage, message)
        self.returncode = returncode
        self.stderr = stderr


class CommandOutputError(ExternalCommandError):
    """gcloud output did not match the expected format."""


class GcloudRunner:
    """Low-level runner for gcloud with consistent error handling."""

    DEFAULT_BINARY = "gcloud"

    def __init__(self, binary: str = DEFAULT_BINARY, timeout_s: Optional[float] = None):
        if not binary:
            raise ValueError("gcloud binary is required")

        self.binary = binary
        self.timeout_s = timeout_s

        logger.debug(f"GcloudRunner initialized with binary={self.binary}")

    def command(self, args: Sequence[str]) -> List[str]:
        """Build the full argument vector for a gcloud call."""
        return [self.binary, *args]

    def run(self, args: Sequence[str], stage: str = "run") -> str:
        """
        Run gcloud and return its standard output.

        Args:
            args: Arguments after the binary name
            stage: Label for the operation, carried on errors

        Returns:
            Captured stdout as text

        Raises:
            CommandNotFoundError: If the binary is not installed
            CommandExitError: On a non-zero exit status
            ExternalCommandError: If the call timed out
        """
        cmd = self.command(args)
        logger.debug(f"gcloud call: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
            )
        except FileNotFoundError as e:
            logger.debug(f"gcloud not found: {self.binary}")
            raise CommandNotFoundError(
                stage, f"'{self.binary}' not found; is the Cloud SDK installed?", cause=e
            ) from e
        except subprocess.TimeoutExpired as e:
            logger.debug(f"gcloud timed out after {self.timeout_s}s: {' '.join(cmd)}")
            raise ExternalCommandError(
                stage, f"'{' '.join(cmd)}' timed out after {self.timeout_s}s", cause=e
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.debug(f"gcloud exited {result.returncode}: {stderr}")
            raise CommandExitError(
                stage,
                stderr.splitlines()[-1] if stderr else f"exit status {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )

        return result.stdout or ""

    def run_json(self, args: Sequence[str], stage: str = "run") -> Any:
        """Run gcloud and parse its output as JSON.

        Raises:
            CommandOutputError: If stdout is not valid JSON
        """
        output = self.run(args, stage=stage)
        if not output.strip():
            return []
        try:
            return json.loads(output)
        except ValueError as e:
            raise CommandOutputError(stage, f"could not parse gcloud output: {e}", cause=e) from e

    def run_lines(self, args: Sequence[str], stage: str = "run") -> List[str]:
        """Run gcloud and return its non-blank output lines, stripped, in order."""
        output = self.run(args, stage=stage)
        return [line.strip() for line in output.splitlines() if line.strip()]
