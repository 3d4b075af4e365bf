import logging
from typing import Any

import requests

from pawmate_client.session_cache import SessionCache

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10


class ApiError(Exception):
    def __init__(self, status_code: int, detail: Any) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class ApiClient:
    """Thin JSON client for the PawMate API that keeps the session cache in sync."""

    def __init__(
        self,
        base_url: str,
        cache: SessionCache,
        http: Any = None,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.cache = cache
        self.http = http or requests.Session()
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        session = self.cache.load()
        if session is None:
            return {}
        return {"Authorization": f"Bearer {session.token}"}

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}/api{path}"
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        response = self.http.request(method, url, headers=self._headers(), **kwargs)

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            raise ApiError(response.status_code, detail)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, json=payload)

    def put(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return self._request("PUT", path, json=payload or {})

    def _store_session(self, data: dict[str, Any]) -> dict[str, Any]:
        self.cache.save(data["token"], data["user"])
        return data["user"]

    def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        data = self.post("/auth/register", {"name": name, "email": email, "password": password})
        return self._store_session(data)

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self.post("/auth/login", {"email": email, "password": password})
        user = self._store_session(data)
        logger.info("Logged in as %s (%s)", user.get("email"), user.get("role"))
        return user

    def logout(self) -> None:
        self.cache.clear()
