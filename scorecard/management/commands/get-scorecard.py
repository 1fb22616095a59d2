#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import json

from django.apps import apps
from django.core.management.base import BaseCommand

from scorecard.api.serializers import ScorecardSerializer

scorecard_app = apps.get_app_config("scorecard")


class Command(BaseCommand):
    help = (
        "Resolve the Scorecard of a repository and display it as JSON. "
        "The source of the data is displayed on stderr."
    )

    def add_arguments(self, parser):
        parser.add_argument("repo_url", help="Repository URL.")
        parser.add_argument(
            "--commit",
            default="",
            help="Commit SHA the Scorecard should be pinned to.",
        )

    def handle(self, *args, **options):
        repo_url = options["repo_url"]
        commit_sha = options["commit"]
        verbosity = options["verbosity"]

        if verbosity > 1 and not scorecard_app.api_client.is_available():
            self.stderr.write(self.style.WARNING("The Scorecard API is not available."))

        resolver = scorecard_app.get_resolver()
        scorecard, source = resolver.resolve_with_source(repo_url, commit_sha)

        if verbosity > 0:
            self.stderr.write(f"Source: {source}")

        data = ScorecardSerializer(scorecard).data
        self.stdout.write(json.dumps(data, indent=2))
