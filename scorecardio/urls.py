#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

from django.urls import path

from scorecard.api.views import ScorecardView
from scorecard.api.views import health_check

urlpatterns = [
    path(
        "msapi/scorecard/",
        ScorecardView.as_view(),
        {"repo_url": ""},
        name="scorecard-empty",
    ),
    path(
        "msapi/scorecard/<path:repo_url>",
        ScorecardView.as_view(),
        name="scorecard",
    ),
    path("health", health_check, name="health"),
]
