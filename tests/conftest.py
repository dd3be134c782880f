"""
Pytest configuration and shared fixtures for the checker tests.

Provides sample markup, a Flask test client and a stub for
``requests.Session.get`` so no test touches the network.
"""

import pytest
import requests

import app as app_module

WIDGET_DESCRIPTION = ("A page about widgets and the workshops that use them. " * 3)[:155]

OPTIMIZED_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Blue Widgets for Every Workshop | The Widget Company Shop</title>
  <meta name="description" content="{description}">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="robots" content="index, follow">
  <meta property="og:title" content="Blue Widgets">
  <meta property="og:description" content="Widgets for every workshop">
  <meta property="og:image" content="https://example.com/widget.png">
  <meta property="og:type" content="website">
  <meta property="og:url" content="https://example.com/widgets">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Blue Widgets">
  <meta name="twitter:description" content="Widgets for every workshop">
  <meta name="twitter:image" content="https://example.com/widget.png">
  <link rel="canonical" href="https://example.com/widgets">
</head>
<body>
  <h1>Blue <em>Widgets</em></h1>
  <img src="a.jpg" alt="A widget">
  <img src="b.jpg" alt="">
</body>
</html>
""".format(description=WIDGET_DESCRIPTION)


@pytest.fixture
def optimized_page():
    return OPTIMIZED_PAGE


@pytest.fixture
def widget_description():
    return WIDGET_DESCRIPTION


def make_response(body=b"", status_code=200, content_type="text/html; charset=utf-8", encoding="utf-8"):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    if content_type is not None:
        resp.headers["Content-Type"] = content_type
    resp.encoding = encoding
    return resp


class FakeGet:
    """Records calls to ``requests.Session.get`` and answers them with a canned result."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, session, url, **kwargs):
        self.calls.append({"url": url, "headers": dict(session.headers), **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_get(monkeypatch):
    """Installs a FakeGet; configure it through the returned object."""
    stub = FakeGet(response=make_response(OPTIMIZED_PAGE.encode("utf-8")))

    def get(session, url, **kwargs):
        return stub(session, url, **kwargs)

    monkeypatch.setattr(requests.Session, "get", get)
    return stub


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
