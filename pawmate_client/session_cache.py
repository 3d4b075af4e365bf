"""Locally persisted login session (token + user snapshot).

This mirrors what the web frontend keeps in browser storage. It exists for
routing convenience only; the API re-checks every token on every request.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TOKEN_KEY = "pawmate_token"
USER_KEY = "pawmate_user"


@dataclass(frozen=True)
class CachedSession:
    token: str
    user: dict[str, Any]

    @property
    def role(self) -> str | None:
        role = self.user.get("role")
        return role if isinstance(role, str) else None


class SessionCache:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_store(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            store = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Session cache at %s is unreadable; ignoring it", self.path)
            return {}
        return store if isinstance(store, dict) else {}

    def _write_store(self, store: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(store), encoding="utf-8")

    def save(self, token: str, user: dict[str, Any]) -> None:
        store = self._read_store()
        store[TOKEN_KEY] = token
        # The snapshot is stored as an encoded string, like browser storage.
        store[USER_KEY] = json.dumps(user)
        self._write_store(store)

    def load(self) -> CachedSession | None:
        store = self._read_store()
        token = store.get(TOKEN_KEY)
        user_str = store.get(USER_KEY)
        if not token or not user_str:
            return None

        try:
            user = json.loads(user_str)
        except (TypeError, json.JSONDecodeError):
            return None
        if not isinstance(user, dict):
            return None

        return CachedSession(token=token, user=user)

    def clear(self) -> None:
        store = self._read_store()
        store.pop(TOKEN_KEY, None)
        store.pop(USER_KEY, None)
        if store:
            self._write_store(store)
        elif self.path.exists():
            self.path.unlink()
