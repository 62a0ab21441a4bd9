import logging
import threading
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import requests

from .stats import summarize

MAX_REPORTED_ERRORS = 5


class LoadTestError(Exception):
    pass


class _Worker:
    """Sends one request per call, reusing a session per thread."""

    def __init__(self, url, payload, timeout, session_factory):
        self.url = url
        self.payload = payload
        self.timeout = timeout
        self.session_factory = session_factory
        self._local = threading.local()
        self._lock = threading.Lock()
        self.sessions = []

    def _session(self):
        session = getattr(self._local, 'session', None)
        if session is None:
            session = self.session_factory()
            self._local.session = session
            with self._lock:
                self.sessions.append(session)
        return session

    def close(self):
        with self._lock:
            sessions, self.sessions = self.sessions, []
        for session in sessions:
            session.close()

    def __call__(self, _):
        started = time.perf_counter()
        try:
            response = self._session().post(self.url, json=self.payload, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            return {'error': str(exc), 'latency': time.perf_counter() - started}
        return {
            'status': response.status_code,
            'body': response.content,
            'latency': time.perf_counter() - started,
        }


def run_load(url, query='{ hello }', total=1000, concurrency=16, timeout=10.0,
             session_factory=requests.Session):
    logger = logging.getLogger(__name__)
    if total < 1:
        raise LoadTestError('total must be at least 1.')
    if concurrency < 1:
        raise LoadTestError('concurrency must be at least 1.')

    worker = _Worker(url, {'query': query}, timeout, session_factory)
    started = time.perf_counter()
    try:
        with ThreadPoolExecutor(max_workers=concurrency) as pool:
            outcomes = list(pool.map(worker, range(total)))
    finally:
        worker.close()
    total_sec = time.perf_counter() - started

    status_counts = Counter()
    bodies = set()
    latencies = []
    errors = []
    for outcome in outcomes:
        if 'error' in outcome:
            errors.append(outcome['error'])
            continue
        status_counts[outcome['status']] += 1
        if outcome['status'] == 200:
            latencies.append(outcome['latency'])
            bodies.add(outcome['body'])

    failed = total - len(latencies)
    if errors:
        logger.warning("%d of %d requests to %s failed in transport: %s", len(errors), total, url, errors[0])
    if not latencies:
        detail = errors[0] if errors else f"status codes {dict(status_counts)}"
        raise LoadTestError(f"No request to {url} succeeded ({detail}).")

    summary = summarize(latencies, total_sec)
    summary.update({
        'url': url,
        'requests': total,
        'concurrency': concurrency,
        'succeeded': len(latencies),
        'failed': failed,
        'status_counts': {str(code): count for code, count in sorted(status_counts.items())},
        'distinct_bodies': len(bodies),
        'errors': errors[:MAX_REPORTED_ERRORS],
    })
    logger.info(
        "Load test %s: %d/%d ok in %.3fs (%.1f req/s)",
        url,
        len(latencies),
        total,
        total_sec,
        summary['ops_per_sec'],
    )
    return summary
