"""Stand-in for the REST backend used by view and client tests."""
import json

import requests


def make_response(payload=None, status=200, body=None):
    """Build a real ``requests.Response`` carrying ``payload`` as JSON."""
    response = requests.Response()
    response.status_code = status
    if body is None:
        body = b'' if payload is None else json.dumps(payload).encode('utf-8')
    response._content = body
    response.headers['Content-Type'] = 'application/json'
    response.encoding = 'utf-8'
    return response


class Call:
    """One request seen by the fake backend."""

    def __init__(self, method, path, kwargs):
        self.method = method
        self.path = path
        self.kwargs = kwargs

    @property
    def params(self):
        return self.kwargs.get('params') or {}

    @property
    def form(self):
        """Multipart fields as ``{name: value}``."""
        return {name: value for name, (_filename, value) in (self.kwargs.get('files') or {}).items()}

    @property
    def json(self):
        return self.kwargs.get('json')

    def __repr__(self):
        return f'Call({self.method} {self.path})'


class FakeBackend:
    """
    Routes patched ``requests.Session.request`` calls by method and path.

    A route answers with a JSON payload and status, raises ``error``, or
    calls ``payload`` (a callable taking the ``Call``) to build the payload.
    Unrouted requests get a 404.
    """

    def __init__(self, base_url):
        self.base_url = base_url.rstrip('/')
        self.routes = {}
        self.calls = []

    def on(self, method, path, payload=None, status=200, error=None, body=None):
        self.routes[(method.upper(), path.strip('/'))] = (payload, status, error, body)
        return self

    def __call__(self, method, url, **kwargs):
        path = url[len(self.base_url):].strip('/')
        call = Call(method.upper(), path, kwargs)
        self.calls.append(call)

        route = self.routes.get((call.method, path))
        if route is None:
            return make_response({'status': 'error', 'message': f'Not found: {path}'}, status=404)

        payload, status, error, body = route
        if error is not None:
            raise error
        if callable(payload):
            payload = payload(call)
        return make_response(payload, status=status, body=body)

    def calls_to(self, method, path):
        return [call for call in self.calls if call.method == method.upper() and call.path == path]


def success(data=None, message=None):
    payload = {'status': 'success', 'data': data if data is not None else {}}
    if message:
        payload['message'] = message
    return payload


def error(message):
    return {'status': 'error', 'message': message}


def list_payload(key, records, page=1, per_page=30, total=None, total_pages=None):
    """List response with a ``pagination`` block."""
    total = len(records) if total is None else total
    if total_pages is None:
        total_pages = max((total + per_page - 1) // per_page, 1)
    return success({
        key: list(records),
        'pagination': {
            'current_page': page,
            'per_page': per_page,
            'total': total,
            'total_pages': total_pages,
            'has_next_page': page < total_pages,
            'has_prev_page': page > 1,
        },
    })
