from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from teambuilder.core.config import settings


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _raise_with_body(resp: requests.Response) -> None:
    # Prefer the API's {"error": ...}; fall back to the raw body
    try:
        payload = resp.json()
        msg = payload.get("error") if isinstance(payload, dict) else None
    except ValueError:
        msg = None
    raise ApiError(resp.status_code, msg or resp.text[:500] or resp.reason or "Error")


class FantasyApiClient:
    """Thin HTTP client for the team builder API. No retries."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT_SECONDS

    def _request(self, method: str, path: str, json: Optional[dict] = None) -> requests.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        resp = self.session.request(method, url, json=json, timeout=self.timeout)
        if not resp.ok:
            _raise_with_body(resp)
        return resp

    def ping(self) -> str:
        return self._request("GET", "/").text

    def register(self, team_name: str, password: str) -> None:
        self._request("POST", "/register", {"teamName": team_name, "password": password})

    def login(self, team_name: str, password: str) -> None:
        self._request("POST", "/login", {"teamName": team_name, "password": password})

    def save_team(self, team_name: str, team_players: Dict[str, List[int]]) -> None:
        self._request("POST", "/save-team", {"teamName": team_name, "teamPlayers": team_players})

    def get_team(self, team_name: str) -> Dict[str, List[int]]:
        data: Any = self._request("GET", f"/team/{quote(team_name, safe='')}").json()
        return data.get("teamPlayers") or {}
