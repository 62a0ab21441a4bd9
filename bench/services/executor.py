import logging
import time

from graphql_bench.schema import schema as hello_schema
from bench.schema import BENCHMARK_QUERY, schema as data_schema
from .stats import summarize

BENCHMARKS = {
    'hello': {
        'schema': hello_schema,
        'query': '{ hello }',
        'description': 'Single constant field on the root query.',
    },
    'data': {
        'schema': data_schema,
        'query': BENCHMARK_QUERY,
        'description': 'Aliases, fragments, arguments and nested lists.',
    },
}


class BenchmarkError(Exception):
    pass


def _execute(schema, query, variables):
    result = schema.execute(query, variable_values=variables)
    if result.errors:
        raise BenchmarkError(f"Query failed: {result.errors[0]}")
    return result


def run_benchmark(name, iterations=1000, variables=None, warmup=10):
    logger = logging.getLogger(__name__)
    benchmark = BENCHMARKS.get(name)
    if benchmark is None:
        raise BenchmarkError(f"Unknown benchmark: {name}")
    if iterations < 1:
        raise BenchmarkError('iterations must be at least 1.')
    if warmup < 0:
        raise BenchmarkError('warmup must not be negative.')

    schema = benchmark['schema']
    query = benchmark['query']
    variables = variables or {}

    for _ in range(warmup):
        _execute(schema, query, variables)

    latencies = []
    result = None
    started = time.perf_counter()
    for _ in range(iterations):
        call_started = time.perf_counter()
        result = _execute(schema, query, variables)
        latencies.append(time.perf_counter() - call_started)
    total_sec = time.perf_counter() - started

    summary = summarize(latencies, total_sec)
    summary['name'] = name
    summary['data'] = result.data
    logger.info(
        "Benchmark %s: %d iterations in %.3fs (%.1f ops/s)",
        name,
        iterations,
        total_sec,
        summary['ops_per_sec'],
    )
    return summary
