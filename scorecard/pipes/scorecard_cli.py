#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import logging
import os
import subprocess

from scorecard.pipes import run_command_safely
from scorecard.results import Scorecard
from scorecard.results import map_scorecard_result

label = "Scorecard CLI"
logger = logging.getLogger(__name__)


class ScorecardCLI:
    """
    Compute a Scorecard on demand using the OpenSSF `scorecard` command line tool.
    This is a full analysis of the repository, much slower than an API lookup.
    """

    def __init__(self, executable="scorecard", timeout=None, github_token=""):
        self.executable = executable
        self.timeout = timeout
        self.github_token = github_token

    def get_command_args(self, repo_url, commit_sha):
        return [
            self.executable,
            f"--repo={repo_url}",
            f"--commit={commit_sha}",
            "--format",
            "json",
        ]

    def get_env(self):
        """Return the environment of the `scorecard` process."""
        env = dict(os.environ)
        if self.github_token:
            env["GITHUB_TOKEN"] = self.github_token
        return env

    def run(self, repo_url, commit_sha):
        """Run the `scorecard` command and return its JSON output."""
        cmd_args = self.get_command_args(repo_url, commit_sha)
        logger.info(f"{label}: running {cmd_args}")
        return run_command_safely(cmd_args, timeout=self.timeout, env=self.get_env())

    def fetch(self, repo_url, commit_sha):
        """
        Return the `Scorecard` computed by the `scorecard` tool for the
        `repo_url` at `commit_sha`.
        An empty Scorecard is returned when the tool cannot be executed or fails.
        """
        try:
            output = self.run(repo_url, commit_sha)
        except subprocess.TimeoutExpired:
            logger.warning(f"{label}: timeout after {self.timeout} seconds")
            return Scorecard()
        except subprocess.SubprocessError as error:
            logger.warning(f"{label}: {error}")
            return Scorecard()
        except OSError as error:
            logger.warning(f"{label}: cannot execute {self.executable}: {error}")
            return Scorecard()
        except UnicodeDecodeError as error:
            logger.warning(f"{label}: output cannot be decoded: {error}")
            return Scorecard()

        return map_scorecard_result(output, commit_sha)
