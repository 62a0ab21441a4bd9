import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from bench.services.loadtest import LoadTestError, run_load


class Command(BaseCommand):
    help = 'Send concurrent GraphQL requests to a running endpoint and print a JSON summary.'

    def add_arguments(self, parser):
        parser.add_argument('--url', default=f"http://127.0.0.1:{settings.GRAPHQL_BENCH_PORT}/graphql")
        parser.add_argument('--query', default='{ hello }')
        parser.add_argument('--requests', type=int, default=1000)
        parser.add_argument('--concurrency', type=int, default=16)
        parser.add_argument('--timeout', type=float, default=10.0)

    def handle(self, *args, **options):
        try:
            summary = run_load(
                options['url'],
                query=options['query'],
                total=options['requests'],
                concurrency=options['concurrency'],
                timeout=options['timeout'],
            )
        except LoadTestError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(summary, indent=2))
