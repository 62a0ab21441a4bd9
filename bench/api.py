from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from bench.services.executor import BENCHMARKS, BenchmarkError, run_benchmark


def _parse_positive_int(value, default):
    if value in (None, ''):
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    return parsed if parsed >= 1 else None


class BenchmarkListView(APIView):
    def get(self, request):
        return Response({
            'benchmarks': [
                {
                    'name': name,
                    'description': benchmark['description'],
                    'query': benchmark['query'].strip(),
                }
                for name, benchmark in BENCHMARKS.items()
            ]
        })

    def post(self, request):
        if not isinstance(request.data, dict):
            return Response({'error': 'Request body must be an object.'}, status=status.HTTP_400_BAD_REQUEST)

        name = str(request.data.get('name') or 'hello').strip()
        if name not in BENCHMARKS:
            return Response({'error': 'Unknown benchmark.'}, status=status.HTTP_400_BAD_REQUEST)

        iterations = _parse_positive_int(request.data.get('iterations'), 100)
        if iterations is None:
            return Response(
                {'error': 'iterations must be a positive integer.'},
                status=status.HTTP_400_BAD_REQUEST,
            )
        max_iterations = settings.GRAPHQL_BENCH_API_MAX_ITERATIONS
        if iterations > max_iterations:
            return Response(
                {'error': f'iterations must not exceed {max_iterations}.'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        variables = request.data.get('variables') or {}
        if not isinstance(variables, dict):
            return Response({'error': 'variables must be an object.'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            summary = run_benchmark(name, iterations=iterations, variables=variables, warmup=0)
        except BenchmarkError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(summary)
