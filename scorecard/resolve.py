#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import logging
from collections import namedtuple

import requests

from scorecard.pipes.repo_url import clean_repo_url
from scorecard.pipes.repo_url import is_github_url
from scorecard.results import Scorecard
from scorecard.results import map_scorecard_result

logger = logging.getLogger(__name__)

# Name of the data source that provided the Scorecard.
REMOTE = "remote"
REMOTE_LATEST = "remote-latest"
LOCAL_CLI = "local-cli"
NO_SOURCE = "none"

Resolution = namedtuple("Resolution", ["scorecard", "source"])


class ScorecardResolver:
    """
    Resolve the Scorecard of a repository from the best available source:

    1. The Scorecard API, pinned to the requested commit.
    2. The Scorecard API, latest data regardless of the commit.
    3. The `scorecard` command line tool, when a GitHub token is available and
       the repository is hosted on GitHub.

    Every failure is absorbed into an empty Scorecard.
    """

    def __init__(self, api_client, cli=None, github_token=""):
        self.api_client = api_client
        self.cli = cli
        self.github_token = github_token

    def resolve(self, repo_url, commit_sha=""):
        """Return the `Scorecard` of the `repo_url` at `commit_sha`."""
        return self.resolve_with_source(repo_url, commit_sha).scorecard

    def resolve_with_source(self, repo_url, commit_sha=""):
        """Return a `Resolution` of the Scorecard and the source that provided it."""
        if not repo_url:
            return Resolution(Scorecard(), NO_SOURCE)

        repo = clean_repo_url(repo_url)

        url = self.api_client.get_project_url(repo, commit_sha)
        try:
            response = self.api_client.get(url)
        except requests.RequestException as exception:
            logger.warning(f"Scorecard API request failed for {repo}: {exception}")
            return Resolution(Scorecard(), NO_SOURCE)

        if response.status_code == requests.codes.ok:
            scorecard = map_scorecard_result(response.content, commit_sha)
            logger.info(f"Scorecard for {repo}@{commit_sha} found on the API")
            return Resolution(scorecard, REMOTE)

        logger.info(
            f"Scorecard API returned {response.status_code} for {repo}@{commit_sha}"
        )

        if commit_sha:
            url = self.api_client.get_project_url(repo)
            try:
                response = self.api_client.get(url)
            except requests.RequestException as exception:
                logger.warning(f"Scorecard API request failed for {repo}: {exception}")
                return Resolution(Scorecard(), NO_SOURCE)

            if response.status_code == requests.codes.ok:
                # Pinned only if the latest data happens to be for `commit_sha`
                scorecard = map_scorecard_result(response.content, commit_sha)
                logger.info(f"Latest Scorecard for {repo} found on the API")
                return Resolution(scorecard, REMOTE_LATEST)

            logger.info(f"Scorecard API returned {response.status_code} for {repo}")

        if self.can_use_cli(repo, commit_sha):
            logger.info(f"Computing Scorecard for {repo}@{commit_sha} locally")
            return Resolution(self.cli.fetch(repo, commit_sha), LOCAL_CLI)

        logger.info(f"No Scorecard available for {repo}")
        return Resolution(Scorecard(), NO_SOURCE)

    def can_use_cli(self, repo, commit_sha):
        """Return True if the `scorecard` tool can compute the `repo` Scorecard."""
        return bool(
            self.cli and self.github_token and is_github_url(repo) and commit_sha
        )
