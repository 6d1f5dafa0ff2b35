"""
Shared fixtures: a small JSONPlaceholder-shaped data set and clients backed by
httpx.MockTransport so no test ever touches the network.
"""
import copy
import re

import httpx
import pytest

from jsonplaceholder.client import JsonPlaceholderClient

BASE_URL = "https://jsonplaceholder.test"

POSTS = [
    {
        "userId": 1,
        "id": 1,
        "title": "sunt aut facere repellat provident occaecati excepturi optio reprehenderit",
        "body": "quia et suscipit\nsuscipit recusandae consequuntur expedita et cum",
    },
    {
        "userId": 1,
        "id": 2,
        "title": "qui est esse",
        "body": "est rerum tempore vitae\nsequi sint nihil reprehenderit dolor beatae ea dolores neque",
    },
]

# Variant used by the filter scenario: only the first title contains "quia".
QUIA_POSTS = [
    {"userId": 1, "id": 1, "title": "quia et suscipit", "body": "recusandae consequuntur expedita"},
    {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore vitae"},
]

COMMENTS = {
    1: [
        {"postId": 1, "id": 1, "name": "id labore ex et quam laborum", "email": "Eliseo@gardner.biz", "body": "laudantium enim quasi est"},
        {"postId": 1, "id": 2, "name": "quo vero reiciendis velit similique earum", "email": "Jayne_Kuhic@sydney.com", "body": "est natus enim nihil est dolore omnis"},
        {"postId": 1, "id": 3, "name": "odio adipisci rerum aut animi", "email": "Nikita@garfield.biz", "body": "quia molestiae reprehenderit quasi"},
    ],
    2: [],
}

USERS = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    },
    {
        "id": 2,
        "name": "Ervin Howell",
        "username": "Antonette",
        "email": "Shanna@melissa.tv",
        "address": {
            "street": "Victor Plains",
            "suite": "Suite 879",
            "city": "Wisokyburgh",
            "zipcode": "90566-7771",
            "geo": {"lat": "-43.9509", "lng": "-34.4618"},
        },
        "phone": "010-692-6593 x09125",
        "website": "anastasia.net",
        "company": {
            "name": "Deckow-Crist",
            "catchPhrase": "Proactive didactic contingency",
            "bs": "synergize scalable supply-chains",
        },
    },
]


def jsonplaceholder_handler(posts=None, comments=None, users=None):
    """Builds a MockTransport handler that serves the six read-only endpoints from fixture data."""
    posts = copy.deepcopy(POSTS if posts is None else posts)
    comments = copy.deepcopy(COMMENTS if comments is None else comments)
    users = copy.deepcopy(USERS if users is None else users)

    routes = [
        (re.compile(r"^/posts$"), lambda m: posts),
        (re.compile(r"^/posts/(-?\d+)$"), lambda m: _one(posts, int(m.group(1)))),
        (re.compile(r"^/posts/(-?\d+)/comments$"), lambda m: comments.get(int(m.group(1)), [])),
        (re.compile(r"^/users$"), lambda m: users),
        (re.compile(r"^/users/(-?\d+)$"), lambda m: _one(users, int(m.group(1)))),
        (re.compile(r"^/users/(-?\d+)/posts$"), lambda m: [p for p in posts if p["userId"] == int(m.group(1))]),
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        for pattern, resolve in routes:
            match = pattern.match(request.url.path)
            if match:
                body = resolve(match)
                if body is None:
                    # JSONPlaceholder answers unknown ids with 404 and an empty object
                    return httpx.Response(404, json={})
                return httpx.Response(200, json=body)
        return httpx.Response(404, json={})

    return handler


def _one(records, record_id):
    return next((r for r in records if r["id"] == record_id), None)


def make_client(handler) -> JsonPlaceholderClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return JsonPlaceholderClient(base_url=BASE_URL, http_client=http_client)


@pytest.fixture
def handler():
    return jsonplaceholder_handler()


@pytest.fixture
def flask_app():
    from app import app

    original_factory = app.config["CLIENT_FACTORY"]
    app.config["TESTING"] = True
    yield app
    app.config["CLIENT_FACTORY"] = original_factory


@pytest.fixture
def serve(flask_app):
    """Points the app's per-request JSONPlaceholder client at a MockTransport handler."""
    def _serve(handler):
        flask_app.config["CLIENT_FACTORY"] = lambda: make_client(handler)
    _serve(jsonplaceholder_handler())
    return _serve


@pytest.fixture
def flask_client(flask_app, serve):
    with flask_app.test_client() as client:
        yield client
