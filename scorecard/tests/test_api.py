#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import json
from pathlib import Path
from unittest import mock

from django.apps import apps
from django.test import SimpleTestCase
from django.test import override_settings
from django.urls import reverse

import requests
from rest_framework import status
from rest_framework.test import APIClient

scorecard_app = apps.get_app_config("scorecard")

EMPTY_SCORECARD = {
    "score": 0.0,
    "pinned": False,
    "commitSha": "",
    "maintained": 0.0,
    "codeReview": 0.0,
    "ciiBestPractices": 0.0,
    "license": 0.0,
    "signedReleases": 0.0,
    "dangerousWorkflow": 0.0,
    "packaging": 0.0,
    "tokenPermissions": 0.0,
    "branchProtection": 0.0,
    "binaryArtifacts": 0.0,
    "pinnedDependencies": 0.0,
    "securityPolicy": 0.0,
    "fuzzing": 0.0,
    "sast": 0.0,
    "vulnerabilities": 0.0,
    "ciTests": 0.0,
    "contributors": 0.0,
    "dependencyUpdateTool": 0.0,
    "sbom": 0.0,
    "webhooks": 0.0,
}


def make_response(status_code=200, content=b""):
    return mock.Mock(status_code=status_code, content=content)


class ScorecardAPITest(SimpleTestCase):
    data = Path(__file__).parent / "data"
    scorecard_url = "/msapi/scorecard/"

    def setUp(self):
        self.client = APIClient()

    def test_scorecard_api_urls(self):
        self.assertEqual("/msapi/scorecard/", reverse("scorecard-empty"))
        self.assertEqual(
            "/msapi/scorecard/github.com/foo/bar",
            reverse("scorecard", args=["github.com/foo/bar"]),
        )
        self.assertEqual("/health", reverse("health"))

    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_empty_repo_url(self, mock_get):
        response = self.client.get(self.scorecard_url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(EMPTY_SCORECARD, response.json())
        mock_get.assert_not_called()

    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_remote_pinned(self, mock_get):
        content = json.dumps(
            {
                "AggregateScore": 7.5,
                "Repo": {"Commit": "abc123"},
                "Checks": [{"Name": "Maintained", "Score": 8}],
            }
        )
        mock_get.return_value = make_response(200, content.encode())

        url = self.scorecard_url + "https://github.com/foo/bar.git"
        response = self.client.get(url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)

        expected = dict(EMPTY_SCORECARD)
        expected.update(
            {"score": 7.5, "pinned": True, "commitSha": "abc123", "maintained": 8.0}
        )
        self.assertEqual(expected, response.json())
        mock_get.assert_called_once_with(
            "https://api.securityscorecards.dev/projects/github.com/foo/bar"
            "?commit=abc123"
        )

    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_remote_latest(self, mock_get):
        location = self.data / "scorecard" / "ortelius-scec-scorecard.json"
        mock_get.side_effect = [
            make_response(404, b'{"code":404,"error":"Not Found"}'),
            make_response(200, location.read_bytes()),
        ]

        url = self.scorecard_url + "github.com/ortelius/scec-scorecard"
        response = self.client.get(url, {"commit": "xyz"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)

        data = response.json()
        self.assertFalse(data["pinned"])
        self.assertEqual("", data["commitSha"])
        self.assertEqual(7.4, data["score"])
        self.assertEqual(10.0, data["maintained"])
        self.assertEqual(6.0, data["codeReview"])
        self.assertEqual(8.0, data["branchProtection"])
        self.assertEqual(-1.0, data["webhooks"])
        self.assertEqual(2, mock_get.call_count)

    @mock.patch("scorecard.pipes.scorecard_cli.run_command_safely")
    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_all_sources_failed(self, mock_get, mock_run_command):
        mock_get.return_value = make_response(404)

        url = self.scorecard_url + "https://github.com/foo/bar"
        with override_settings(GITHUB_TOKEN=""):
            response = self.client.get(url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(EMPTY_SCORECARD, response.json())
        self.assertEqual(2, mock_get.call_count)
        self.assertEqual(0, mock_run_command.call_count)

    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_non_finite_numbers(self, mock_get):
        mock_get.return_value = make_response(200, b'{"score": 1e999}')

        url = self.scorecard_url + "github.com/foo/bar"
        response = self.client.get(url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(EMPTY_SCORECARD, response.json())

        mock_get.return_value = make_response(
            200, b'{"score": 5, "checks": [{"name": "SAST", "score": NaN}]}'
        )
        response = self.client.get(url)
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(EMPTY_SCORECARD, response.json())

    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_transport_failure(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")

        url = self.scorecard_url + "github.com/foo/bar"
        response = self.client.get(url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(EMPTY_SCORECARD, response.json())
        mock_get.assert_called_once()

    @override_settings(GITHUB_TOKEN="ghp_token", SCORECARD_CLI_TIMEOUT=30)
    @mock.patch("scorecard.pipes.scorecard_cli.run_command_safely")
    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_local_cli(self, mock_get, mock_run_command):
        mock_get.return_value = make_response(404)
        output = {
            "score": 5.5,
            "repo": {"name": "github.com/foo/bar", "commit": "abc123"},
            "checks": [{"name": "Security-Policy", "score": 10}],
        }
        mock_run_command.return_value = json.dumps(output)

        url = self.scorecard_url + "git+ssh://git@github.com/foo/bar.git"
        response = self.client.get(url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)

        expected = dict(EMPTY_SCORECARD)
        expected.update(
            {
                "score": 5.5,
                "pinned": True,
                "commitSha": "abc123",
                "securityPolicy": 10.0,
            }
        )
        self.assertEqual(expected, response.json())

        mock_run_command.assert_called_once()
        cmd_args = mock_run_command.call_args[0][0]
        expected_args = [
            "scorecard",
            "--repo=github.com/foo/bar",
            "--commit=abc123",
            "--format",
            "json",
        ]
        self.assertEqual(expected_args, cmd_args)
        self.assertEqual(30, mock_run_command.call_args.kwargs["timeout"])

    @override_settings(GITHUB_TOKEN="ghp_token")
    @mock.patch("scorecard.pipes.scorecard_cli.run_command_safely")
    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_api_local_cli_failure(self, mock_get, mock_run_command):
        mock_get.return_value = make_response(503)
        mock_run_command.side_effect = FileNotFoundError("scorecard")

        url = self.scorecard_url + "github.com/foo/bar"
        response = self.client.get(url, {"commit": "abc123"})
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(EMPTY_SCORECARD, response.json())
        mock_run_command.assert_called_once()

    def test_scorecard_api_method_not_allowed(self):
        url = self.scorecard_url + "github.com/foo/bar"
        response = self.client.post(url)
        self.assertEqual(status.HTTP_405_METHOD_NOT_ALLOWED, response.status_code)

    def test_scorecard_api_health(self):
        response = self.client.get("/health")
        self.assertEqual(status.HTTP_200_OK, response.status_code)
        self.assertEqual(b"OK", response.content)
        self.assertEqual("text/plain", response["Content-Type"])

        response = self.client.post("/health")
        self.assertEqual(status.HTTP_405_METHOD_NOT_ALLOWED, response.status_code)
