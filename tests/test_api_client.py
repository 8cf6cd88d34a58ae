import pytest

from questionfeed_frontend import api_client
from questionfeed_frontend.api_client import ApiClient, ApiError


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture
def calls(monkeypatch):
    seen = []

    def fake_get(url, **kwargs):
        seen.append(("GET", url, kwargs))
        if url.endswith("/api/stats"):
            return FakeResponse(200, {"totalQuestions": 1, "questionsToday": 1, "totalDonations": 2.5})
        return FakeResponse(200, [{"_id": "x", "question": "q"}])

    def fake_post(url, json=None, **kwargs):
        seen.append(("POST", url, json))
        if json["email"] == "bad":
            return FakeResponse(400, {"error": "Invalid email format"})
        return FakeResponse(201, {"message": "ok", "question": {"_id": "new"}})

    monkeypatch.setattr(api_client.requests, "get", fake_get)
    monkeypatch.setattr(api_client.requests, "post", fake_post)
    return seen


def test_list_and_stats(calls):
    client = ApiClient("http://api.test/")
    assert client.list_questions() == [{"_id": "x", "question": "q"}]
    assert client.stats()["totalDonations"] == 2.5
    assert calls[0][1] == "http://api.test/api/questions"


def test_submit_returns_created_question(calls):
    client = ApiClient("http://api.test")
    assert client.submit_question("q", "a@b.co", "1") == {"_id": "new"}
    assert calls[-1] == ("POST", "http://api.test/api/questions", {"question": "q", "email": "a@b.co", "donation": "1"})


def test_validation_error_carries_server_message(calls):
    with pytest.raises(ApiError) as exc:
        ApiClient("http://api.test").submit_question("q", "bad", "1")
    assert exc.value.status_code == 400
    assert exc.value.message == "Invalid email format"


def test_non_json_error_falls_back_to_text(monkeypatch):
    monkeypatch.setattr(api_client.requests, "get", lambda url, **kw: FakeResponse(502, None, "Bad Gateway"))
    with pytest.raises(ApiError) as exc:
        ApiClient("http://api.test").health()
    assert exc.value.message == "Bad Gateway"


def test_stats_line():
    app = pytest.importorskip("questionfeed_frontend.app")
    line = app.stats_line({"totalQuestions": 3, "questionsToday": 2, "totalDonations": 4.5})
    assert line == "3 questions · 2 today · $4.50 donated"
