import argparse
import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.core.servers.basehttp import ThreadedWSGIServer, WSGIRequestHandler, get_internal_wsgi_application

logger = logging.getLogger(__name__)


class BenchServer(ThreadedWSGIServer):
    request_queue_size = settings.GRAPHQL_BENCH_BACKLOG


class Command(BaseCommand):
    help = 'Serve the GraphQL benchmark app with a threaded WSGI server.'

    def add_arguments(self, parser):
        parser.add_argument('--host', default=settings.GRAPHQL_BENCH_HOST)
        parser.add_argument('--port', type=int, default=settings.GRAPHQL_BENCH_PORT)
        parser.add_argument(
            '--access-log',
            action=argparse.BooleanOptionalAction,
            default=settings.GRAPHQL_BENCH_ACCESS_LOG,
            help='Log every request (slows the server down). Errors are logged either way.',
        )

    def handle(self, *args, **options):
        host = options['host']
        port = options['port']
        # django.server logs 2xx/3xx at INFO, 4xx at WARNING and 5xx at ERROR.
        logging.getLogger('django.server').setLevel(logging.INFO if options['access_log'] else logging.WARNING)
        application = get_internal_wsgi_application()

        # Without SO_REUSEADDR an occupied port fails here; the socket is
        # closed by the server constructor before the error propagates.
        try:
            httpd = BenchServer((host, port), WSGIRequestHandler, allow_reuse_address=False)
        except OSError as exc:
            logger.error("Could not bind %s:%s: %s", host, port, exc)
            raise CommandError(f"Could not bind {host}:{port}: {exc}") from exc

        httpd.set_app(application)
        self.stdout.write(f"Benchmark app listening on port {httpd.server_address[1]}!")
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")
        finally:
            httpd.server_close()
