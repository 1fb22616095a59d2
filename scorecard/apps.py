#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import gettext_lazy as _

from scorecardio import __version__ as scorecardio_version

logger = logging.getLogger(__name__)


class ScorecardConfig(AppConfig):
    name = "scorecard"
    verbose_name = _("Scorecard")

    def __init__(self, app_name, app_module):
        super().__init__(app_name, app_module)
        # Shared by all the requests, set on `ready()`.
        self.api_client = None

    def ready(self):
        from scorecard.pipes.ossf_scorecard import ScorecardAPIClient
        from scorecard.pipes.ossf_scorecard import make_session

        if not settings.SCORECARD_API_URL:
            raise ImproperlyConfigured("The SCORECARD_API_URL setting is required.")

        # The session is shared across the server threads and only used for GET
        # and HEAD requests. Its headers are never changed after this point.
        session = make_session(user_agent=f"scorecardio/{scorecardio_version}")
        self.api_client = ScorecardAPIClient(
            api_url=settings.SCORECARD_API_URL,
            session=session,
            timeout=settings.SCORECARD_API_TIMEOUT,
        )

        logger.debug(f"Scorecard API: {settings.SCORECARD_API_URL}")
        if not settings.GITHUB_TOKEN:
            logger.debug("GITHUB_TOKEN not set, the local scorecard tool is disabled")

    def get_cli(self):
        from scorecard.pipes.scorecard_cli import ScorecardCLI

        return ScorecardCLI(
            executable=settings.SCORECARD_CLI,
            timeout=settings.SCORECARD_CLI_TIMEOUT,
            github_token=settings.GITHUB_TOKEN,
        )

    def get_resolver(self):
        """Return a `ScorecardResolver` using the application shared API client."""
        from scorecard.resolve import ScorecardResolver

        return ScorecardResolver(
            api_client=self.api_client,
            cli=self.get_cli(),
            github_token=settings.GITHUB_TOKEN,
        )
