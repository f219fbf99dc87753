from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response


SUPPORTED_UNITS = ("C", "F")


class ProviderError(RuntimeError):
    """Raised when a weather source cannot produce a reading."""


@dataclass
class RequestConfig:
    timeout: Optional[float] = 10.0


class WeatherProvider:
    """Base class for HTTP weather sources: one attempt, a timeout, no retries."""

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self._shared_session = session
        self._local = threading.local()
        self._log = logging.getLogger(self.__class__.__name__)

    @property
    def session(self) -> requests.Session:
        # one session per thread unless a session was injected
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ProviderError("invalid json") from exc
        if not isinstance(data, dict):
            raise ProviderError("unexpected payload")
        return data


def normalize_unit(unit: object) -> str:
    """Map a unit argument onto "C" or "F"; anything but F means Celsius."""
    return "F" if str(unit).strip().upper() == "F" else "C"


__all__ = ["WeatherProvider", "ProviderError", "RequestConfig", "SUPPORTED_UNITS", "normalize_unit"]
