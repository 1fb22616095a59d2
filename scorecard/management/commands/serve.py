#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandError
from django.core.servers.basehttp import WSGIServer
from django.core.servers.basehttp import get_internal_wsgi_application
from django.core.servers.basehttp import run

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Start the Scorecard HTTP service."

    def add_arguments(self, parser):
        parser.add_argument(
            "--host",
            default="0.0.0.0",  # noqa: S104
            help="Address to listen on.",
        )
        parser.add_argument(
            "--port",
            type=int,
            default=None,
            help="Port to listen on. Defaults to the MS_PORT setting.",
        )

    def handle(self, *args, **options):
        host = options["host"]
        port = options["port"] or settings.MS_PORT

        handler = get_internal_wsgi_application()
        logger.info(f"Scorecard service listening on {host}:{port}")

        try:
            run(host, port, handler, threading=True, server_cls=WSGIServer)
        except OSError as error:
            logger.critical(f"Failed to get the service running: {error}")
            raise CommandError(f"Failed to get the service running: {error}")
