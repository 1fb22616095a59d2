#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import logging
from urllib.parse import urlencode

import requests

label = "Scorecard API"
logger = logging.getLogger(__name__)


def make_session(user_agent=None):
    """Return a `requests.Session` configured for the Scorecard API."""
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    if user_agent:
        session.headers.update({"User-Agent": user_agent})
    return session


class ScorecardAPIClient:
    """
    Client for the OpenSSF Scorecard API.
    A single instance, and its session, is shared by all the requests.
    """

    def __init__(self, api_url, session=None, timeout=None):
        self.api_url = api_url
        self.session = session or make_session()
        self.timeout = timeout

    def get_project_url(self, repo, commit_sha=""):
        """Return the API URL of the `repo` project, pinned to `commit_sha` if any."""
        url = f"{self.api_url.rstrip('/')}/{repo}"
        if commit_sha:
            url += "?" + urlencode({"commit": commit_sha})
        return url

    def get(self, url):
        """
        Return the `requests.Response` for the `url`.
        Raise a `requests.RequestException` on connection errors and timeouts.
        Non-successful status codes are not raised.
        """
        logger.debug(f"{label}: url={url}")
        return self.session.get(url, timeout=self.timeout)

    def is_available(self):
        """Return True if the Scorecard API server is reachable."""
        if not self.api_url:
            return False

        try:
            response = self.session.head(self.api_url, timeout=self.timeout)
        except requests.exceptions.RequestException as request_exception:
            logger.debug(f"{label} is_available() error: {request_exception}")
            return False

        return response.status_code < 500
