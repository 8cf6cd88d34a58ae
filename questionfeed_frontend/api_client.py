# questionfeed_frontend/api_client.py
import os

import requests

API_BASE = os.getenv("QF_API_BASE", "http://127.0.0.1:5000")


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ApiClient:
    def __init__(self, base_url: str = API_BASE, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def headers(self):
        return {"Accept": "application/json"}

    def get(self, path: str, **kwargs):
        return requests.get(f"{self.base_url}{path}", headers=self.headers(), timeout=self.timeout, **kwargs)

    def post(self, path: str, json=None, **kwargs):
        return requests.post(
            f"{self.base_url}{path}",
            json=json,
            headers=self.headers(),
            timeout=self.timeout,
            **kwargs,
        )

    @staticmethod
    def _json(r):
        if r.status_code >= 400:
            try:
                message = r.json().get("error") or r.text
            except ValueError:
                message = r.text
            raise ApiError(r.status_code, message)
        return r.json()

    # ---- endpoints ----
    def list_questions(self):
        return self._json(self.get("/api/questions"))

    def submit_question(self, question: str, email: str, donation):
        body = {"question": question, "email": email, "donation": donation}
        return self._json(self.post("/api/questions", json=body))["question"]

    def stats(self):
        return self._json(self.get("/api/stats"))

    def health(self):
        return self._json(self.get("/api/health"))
