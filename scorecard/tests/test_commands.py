#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import json
from io import StringIO
from unittest import mock

from django.apps import apps
from django.core.management import CommandError
from django.core.management import call_command
from django.test import SimpleTestCase
from django.test import override_settings

scorecard_app = apps.get_app_config("scorecard")


class ScorecardManagementCommandTest(SimpleTestCase):
    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_management_command_get_scorecard(self, mock_get):
        content = {
            "score": 8.2,
            "repo": {"commit": "abc123"},
            "checks": [{"name": "Fuzzing", "score": 10}],
        }
        mock_get.return_value = mock.Mock(
            status_code=200, content=json.dumps(content).encode()
        )

        out = StringIO()
        err = StringIO()
        options = ["--commit", "abc123"]
        call_command(
            "get-scorecard", "github.com/foo/bar", *options, stdout=out, stderr=err
        )

        data = json.loads(out.getvalue())
        self.assertEqual(8.2, data["score"])
        self.assertTrue(data["pinned"])
        self.assertEqual("abc123", data["commitSha"])
        self.assertEqual(10.0, data["fuzzing"])
        self.assertIn("Source: remote", err.getvalue())

    @mock.patch.object(scorecard_app.api_client, "is_available")
    @mock.patch.object(scorecard_app.api_client, "get")
    def test_scorecard_management_command_get_scorecard_not_available(
        self, mock_get, mock_is_available
    ):
        mock_get.return_value = mock.Mock(status_code=404, content=b"")
        mock_is_available.return_value = False

        out = StringIO()
        err = StringIO()
        call_command(
            "get-scorecard", "github.com/foo/bar", verbosity=2, stdout=out, stderr=err
        )

        self.assertEqual(0.0, json.loads(out.getvalue())["score"])
        self.assertIn("The Scorecard API is not available.", err.getvalue())
        self.assertIn("Source: none", err.getvalue())

        out = StringIO()
        err = StringIO()
        call_command(
            "get-scorecard", "github.com/foo/bar", verbosity=0, stdout=out, stderr=err
        )
        self.assertEqual("", err.getvalue())

    def test_scorecard_management_command_get_scorecard_requires_repo_url(self):
        with self.assertRaises(CommandError):
            call_command("get-scorecard")

    @override_settings(MS_PORT=8123)
    @mock.patch("scorecard.management.commands.serve.run")
    def test_scorecard_management_command_serve(self, mock_run):
        call_command("serve")
        mock_run.assert_called_once()
        host, port = mock_run.call_args[0][:2]
        self.assertEqual("0.0.0.0", host)
        self.assertEqual(8123, port)

        mock_run.reset_mock()
        call_command("serve", "--port", "9000", "--host", "127.0.0.1")
        host, port = mock_run.call_args[0][:2]
        self.assertEqual("127.0.0.1", host)
        self.assertEqual(9000, port)

    @mock.patch("scorecard.management.commands.serve.run")
    def test_scorecard_management_command_serve_bind_failure(self, mock_run):
        mock_run.side_effect = OSError(98, "Address already in use")

        with self.assertRaises(CommandError) as cm:
            call_command("serve")
        self.assertIn("Address already in use", str(cm.exception))
