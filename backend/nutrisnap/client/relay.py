from typing import Dict, List, Optional

import requests


class RelayError(Exception):
    """Any failure reaching the relay or reading its answer."""


class RelayClient:
    def __init__(self, api_url: str, timeout: Optional[float] = None) -> None:
        self.api_url = api_url
        self.timeout = timeout

    def send(self, history: List[Dict[str, str]]) -> str:
        try:
            resp = requests.post(self.api_url, json={"history": history}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RelayError(f"relay unreachable: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise RelayError(f"relay returned status {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise RelayError("relay response is not JSON") from exc

        reply = data.get("reply") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise RelayError("relay response has no reply")
        return reply
