import json

from django.core.management.base import BaseCommand, CommandError

from bench.services.executor import BENCHMARKS, BenchmarkError, run_benchmark


class Command(BaseCommand):
    help = 'Execute a benchmark query in-process and print timing statistics as JSON.'

    def add_arguments(self, parser):
        parser.add_argument('--name', choices=sorted(BENCHMARKS), default='hello')
        parser.add_argument('--iterations', type=int, default=1000)
        parser.add_argument('--warmup', type=int, default=10)
        parser.add_argument('--size', type=int, help="Value for the data benchmark's $size variable.")
        parser.add_argument('--show-data', action='store_true', help='Include the last result in the output.')

    def handle(self, *args, **options):
        variables = {}
        if options['size'] is not None:
            variables['size'] = options['size']

        try:
            summary = run_benchmark(
                options['name'],
                iterations=options['iterations'],
                variables=variables,
                warmup=options['warmup'],
            )
        except BenchmarkError as exc:
            raise CommandError(str(exc)) from exc

        if not options['show_data']:
            summary.pop('data', None)
        self.stdout.write(json.dumps(summary, indent=2))
