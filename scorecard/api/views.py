#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import logging

from django.apps import apps
from django.http import HttpResponse
from django.views.decorators.http import require_GET

from rest_framework.response import Response
from rest_framework.views import APIView

from scorecard.api.serializers import ScorecardSerializer

logger = logging.getLogger(__name__)


class ScorecardView(APIView):
    """
    Return the OpenSSF Scorecard of the repository provided in the URL path,
    for the optional `commit` query parameter.

    The response is always a Scorecard, with all its values left to zero when
    no data is available.
    """

    def get(self, request, repo_url=""):
        commit_sha = request.query_params.get("commit", "")

        scorecard_app = apps.get_app_config("scorecard")
        resolver = scorecard_app.get_resolver()
        scorecard, source = resolver.resolve_with_source(repo_url, commit_sha)
        logger.info(f"Scorecard for repo_url={repo_url} commit={commit_sha}: {source}")

        serializer = ScorecardSerializer(scorecard)
        return Response(serializer.data)


@require_GET
def health_check(request):
    """Health check for the container orchestrator."""
    return HttpResponse("OK", content_type="text/plain")
