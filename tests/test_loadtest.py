import itertools
import threading

import pytest
import requests

from bench.services.loadtest import LoadTestError, run_load

HELLO_BODY = b'{"data":{"hello":"world"}}'


class FakeResponse:
    def __init__(self, status_code, content):
        self.status_code = status_code
        self.content = content


class FakeSession:
    closed = False

    def close(self):
        self.closed = True


class HelloSession(FakeSession):
    calls = 0
    lock = threading.Lock()

    def post(self, url, json=None, timeout=None):
        assert json == {'query': '{ hello }'}
        with self.lock:
            HelloSession.calls += 1
        return FakeResponse(200, HELLO_BODY)


class DownSession(FakeSession):
    def post(self, url, json=None, timeout=None):
        raise requests.exceptions.ConnectionError('connection refused')


def test_identical_responses_have_one_distinct_body():
    HelloSession.calls = 0

    summary = run_load('http://bench/graphql', total=40, concurrency=4, session_factory=HelloSession)

    assert HelloSession.calls == 40
    assert summary['succeeded'] == 40
    assert summary['failed'] == 0
    assert summary['status_counts'] == {'200': 40}
    assert summary['distinct_bodies'] == 1
    assert summary['errors'] == []


def test_transport_errors_are_counted():
    counter = itertools.count()
    lock = threading.Lock()

    class FlakySession(FakeSession):
        def post(self, url, json=None, timeout=None):
            with lock:
                n = next(counter)
            if n % 2:
                raise requests.exceptions.Timeout('timed out')
            return FakeResponse(200, HELLO_BODY)

    summary = run_load('http://bench/graphql', total=10, concurrency=2, session_factory=FlakySession)

    assert summary['succeeded'] == 5
    assert summary['failed'] == 5
    assert summary['errors'] == ['timed out'] * 5


def test_error_statuses_are_not_successes():
    counter = itertools.count()
    lock = threading.Lock()

    class HalfBadSession(FakeSession):
        def post(self, url, json=None, timeout=None):
            with lock:
                n = next(counter)
            if n < 3:
                return FakeResponse(400, b'{"errors":[]}')
            return FakeResponse(200, HELLO_BODY)

    summary = run_load('http://bench/graphql', total=8, concurrency=1, session_factory=HalfBadSession)

    assert summary['status_counts'] == {'200': 5, '400': 3}
    assert summary['failed'] == 3


def test_nothing_succeeds():
    with pytest.raises(LoadTestError, match='connection refused'):
        run_load('http://bench/graphql', total=3, concurrency=2, session_factory=DownSession)


def test_rejects_bad_arguments():
    with pytest.raises(LoadTestError):
        run_load('http://bench/graphql', total=0)
    with pytest.raises(LoadTestError):
        run_load('http://bench/graphql', concurrency=0)


def test_every_worker_session_is_closed():
    created = []
    lock = threading.Lock()

    def factory():
        session = HelloSession()
        with lock:
            created.append(session)
        return session

    run_load('http://bench/graphql', total=20, concurrency=4, session_factory=factory)

    assert 1 <= len(created) <= 4
    assert all(session.closed for session in created)


def test_sessions_are_closed_when_nothing_succeeds():
    created = []

    def factory():
        session = DownSession()
        created.append(session)
        return session

    with pytest.raises(LoadTestError):
        run_load('http://bench/graphql', total=3, concurrency=1, session_factory=factory)

    assert created and all(session.closed for session in created)
