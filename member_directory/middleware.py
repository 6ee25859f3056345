"""
HTTP method override for HTML forms.

Browsers only submit GET and POST, so a form posts to
``/members/3?_method=DELETE`` and the request is dispatched as DELETE.
"""

from urllib.parse import parse_qs

OVERRIDABLE_METHODS = frozenset({'DELETE', 'PUT', 'PATCH'})


class MethodOverrideMiddleware:
    """WSGI middleware reading the override from a query-string key."""

    def __init__(self, app, key='_method'):
        self.app = app
        self.key = key

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = (query.get(self.key) or [''])[0].upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
