import pytest

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from errgate import ResponseGate, ConfigurationError
from errgate.tools.starlette import ResponseGateMiddleware, identity_from_session


def test_middleware_with_session():
    def main():
        # === Test: anonymous
        res = c.get('/page')
        assert res.status_code == 200
        assert res.text == 'Page'

        res = c.get('/missing')
        assert res.status_code == 401
        assert res.headers['content-type'] == 'text/html'
        assert '404' in res.text
        assert 'x-cascade' not in res.headers

        res = c.get('/broken')
        assert res.status_code == 401
        assert '503' in res.text
        assert 'database' not in res.text

        # === Test: signed in
        res = c.post('/login')
        assert res.json() == {'user_id': 'user123'}

        res = c.get('/missing')
        assert res.status_code == 404
        assert res.headers['x-cascade'] == 'pass'
        assert res.text == 'Not Found'

        res = c.get('/broken')
        assert res.status_code == 503
        assert res.text == 'The database is down'

        # === Test: signed out
        c.post('/logout')
        res = c.get('/missing')
        assert res.status_code == 401

    async def page(request: Request):
        return PlainTextResponse('Page')

    async def missing(request: Request):
        return PlainTextResponse('Not Found', status_code=404, headers={'X-Cascade': 'pass'})

    async def broken(request: Request):
        return PlainTextResponse('The database is down', status_code=503)

    async def login(request: Request):
        request.session['user_id'] = 'user123'
        return JSONResponse(dict(request.session))

    async def logout(request: Request):
        request.session.clear()
        return JSONResponse({})

    app = Starlette(
        routes=[
            Route('/page', page),
            Route('/missing', missing),
            Route('/broken', broken),
            Route('/login', login, methods=['POST']),
            Route('/logout', logout, methods=['POST']),
        ],
        middleware=[
            # The session wraps the gate
            Middleware(SessionMiddleware, secret_key='test'),
            Middleware(ResponseGateMiddleware),
        ],
    )

    with TestClient(app) as c:
        main()


def test_middleware_custom_identity_and_gate():
    def main():
        # 404 is outside of the range
        res = c.get('/missing')
        assert res.status_code == 404

        # 500 is hidden
        res = c.get('/error')
        assert res.status_code == 403
        assert res.headers['content-type'] == 'text/plain'
        assert res.text == 'Forbidden (500)'

        # Identity from a header
        res = c.get('/error', headers={'X-User': 'kolypto'})
        assert res.status_code == 500
        assert res.text == 'Oops'

        # Blank identity: anonymous
        res = c.get('/error', headers={'X-User': '  '})
        assert res.status_code == 403

    async def error(request: Request):
        return PlainTextResponse('Oops', status_code=500)

    gate = ResponseGate(
        sensitive_range_low=500,
        substitute_status=403,
        substitute_content_type='text/plain',
        substitute_body_template='Forbidden ({status})',
    )

    app = Starlette(
        routes=[Route('/error', error)],
        middleware=[
            Middleware(ResponseGateMiddleware, gate=gate, get_identity=lambda request: request.headers.get('X-User')),
        ],
    )

    with TestClient(app) as c:
        main()


def test_middleware_exceptions_propagate():
    async def crash(request: Request):
        raise RuntimeError('Crash')

    app = Starlette(
        routes=[Route('/crash', crash)],
        middleware=[Middleware(ResponseGateMiddleware)],
    )

    with TestClient(app, raise_server_exceptions=True) as c:
        with pytest.raises(RuntimeError, match='Crash'):
            c.get('/crash')


def test_identity_from_session_without_session():
    get_identity = identity_from_session('user_id')

    # No session middleware: anonymous
    request = Request({'type': 'http', 'method': 'GET', 'path': '/', 'headers': []})
    assert get_identity(request) is None

    # With a session
    request = Request({'type': 'http', 'method': 'GET', 'path': '/', 'headers': [], 'session': {'user_id': 7}})
    assert get_identity(request) == 7


def test_middleware_gate_or_options():
    async def app(scope, receive, send):
        pass

    # Options alone, or a gate alone
    assert ResponseGateMiddleware(app, sensitive_range_low=500).gate.sensitive_range.low == 500
    gate = ResponseGate()
    assert ResponseGateMiddleware(app, gate=gate).gate is gate

    # Not both
    with pytest.raises(ConfigurationError):
        ResponseGateMiddleware(app, gate=gate, sensitive_range_low=500)

    # Invalid options
    with pytest.raises(ConfigurationError):
        ResponseGateMiddleware(app, sensitive_range_low=600, sensitive_range_high=500)


def test_middleware_logs_hidden_responses(caplog: pytest.LogCaptureFixture):
    async def missing(request: Request):
        return PlainTextResponse('Not Found', status_code=404)

    app = Starlette(
        routes=[Route('/missing', missing)],
        middleware=[
            Middleware(ResponseGateMiddleware, get_identity=lambda request: request.headers.get('X-User')),
        ],
    )

    with caplog.at_level('DEBUG', logger='errgate.tools.starlette.middleware'):
        with TestClient(app) as c:
            # Signed in: nothing hidden, nothing logged
            res = c.get('/missing', headers={'X-User': 'kolypto'})
            assert res.status_code == 404
            assert [r.message for r in caplog.records if r.name == 'errgate.tools.starlette.middleware'] == []

            # Anonymous
            res = c.get('/missing')
            assert res.status_code == 401
            assert [r.message for r in caplog.records if r.name == 'errgate.tools.starlette.middleware'] == [
                'Hiding GET /missing response from an anonymous caller: 404',
            ]
