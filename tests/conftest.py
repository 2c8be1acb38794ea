import pytest


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text="", headers=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.headers = headers or {}

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._payload


class FakeRequests:
    """Stands in for requests.get: replays queued responses and records calls."""

    def __init__(self):
        self.responses = []
        self.calls = []

    def queue(self, status_code=200, payload=None, text="", headers=None):
        self.responses.append(FakeResponse(status_code, payload, text, headers))

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        return self.responses.pop(0)


@pytest.fixture
def fake_requests(monkeypatch):
    fake = FakeRequests()
    monkeypatch.setattr("figma2html.figma_client.requests.get", fake.get)
    monkeypatch.setattr("figma2html.figma_client.time.sleep", lambda seconds: fake.calls.append({"slept": seconds}))
    return fake


def bbox(x, y, width, height):
    return {"x": x, "y": y, "width": width, "height": height}


@pytest.fixture
def login_frame():
    """A login screen: absolute frame > auto-layout form > title + forgot-password link."""
    return {
        "id": "1:2",
        "name": "Login",
        "type": "FRAME",
        "absoluteBoundingBox": bbox(100, 200, 390, 844),
        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
        "children": [
            {
                "id": "1:3",
                "name": "Form",
                "type": "FRAME",
                "absoluteBoundingBox": bbox(120, 300, 350, 200),
                "layoutMode": "VERTICAL",
                "itemSpacing": 8,
                "counterAxisAlignItems": "CENTER",
                "children": [
                    {
                        "id": "1:4",
                        "name": "Title",
                        "type": "TEXT",
                        "characters": "Sign <in>",
                        "absoluteBoundingBox": bbox(120, 300, 100, 24),
                        "style": {"fontFamily": "Inter", "fontWeight": 700, "fontSize": 20},
                        "fills": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0, "a": 1}}],
                    },
                    {
                        "id": "1:5",
                        "name": "Hidden",
                        "type": "FRAME",
                        "visible": False,
                        "children": [{"id": "1:6", "type": "TEXT", "characters": "secret"}],
                    },
                    {
                        "id": "1:7",
                        "name": "Forgot",
                        "type": "TEXT",
                        "characters": "Forgot your password?",
                        "absoluteBoundingBox": bbox(120, 340, 150, 16),
                    },
                ],
            },
        ],
    }


@pytest.fixture
def file_json(login_frame):
    return {
        "name": "Demo",
        "document": {
            "id": "0:0",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "name": "Page 1",
                    "type": "CANVAS",
                    "children": [
                        {"id": "9:9", "name": "Loose text", "type": "TEXT", "characters": "x"},
                        login_frame,
                        {"id": "2:1", "name": "Settings", "type": "COMPONENT", "children": []},
                    ],
                },
            ],
        },
    }
