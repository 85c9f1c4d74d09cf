# core/ai_client.py
import logging
import requests
from typing import Optional
from core.exceptions import ChatNotConfigured, UpstreamError

logger = logging.getLogger(__name__)
DEFAULT_TIMEOUT = 30
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
NO_REPLY_TEXT = "Geen antwoord van de AI."


class AIClient:
    """
    Thin pass-through to the Gemini generateContent endpoint.

    Values not given to the constructor are read from Django settings on
    every call, so a key added to the environment is picked up after reload.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 api_url: Optional[str] = None, timeout: int = DEFAULT_TIMEOUT):
        self._api_key = api_key
        self._model = model
        self._api_url = api_url
        self.timeout = timeout
        self.session = requests.Session()

    def _refresh_keys(self):
        """Pull unset values from django settings."""
        from django.conf import settings as django_settings

        self.api_key = self._api_key or getattr(django_settings, 'GEMINI_API_KEY', None)
        self.model = self._model or getattr(django_settings, 'GEMINI_MODEL', None) or DEFAULT_MODEL
        self.api_url = self._api_url or getattr(django_settings, 'GEMINI_API_URL', None) or DEFAULT_API_URL

    def send(self, text: str) -> str:
        """
        Send one user message and return the model's reply text.

        Raises ChatNotConfigured without an API key and UpstreamError when the
        call fails or the body cannot be read.
        """
        self._refresh_keys()
        if not self.api_key:
            raise ChatNotConfigured()

        data = self._call_gemini(text)
        return self._extract_reply(data)

    def _call_gemini(self, text: str) -> dict:
        url = self.api_url.format(model=self.model)
        headers = {"Content-Type": "application/json"}
        payload = {"contents": [{"parts": [{"text": text}]}]}

        try:
            resp = self.session.post(url, params={"key": self.api_key}, headers=headers,
                                     json=payload, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            # the key travels in the query string, keep it out of the logs
            status = getattr(e.response, "status_code", None)
            logger.warning(f"Gemini request failed (model={self.model}, status={status}): {e.__class__.__name__}")
            raise UpstreamError()

        try:
            return resp.json()
        except ValueError:
            logger.error(f"Gemini returned a non-JSON body (model={self.model})")
            raise UpstreamError()

    @staticmethod
    def _extract_reply(data) -> str:
        """Return the first text part of the first candidate."""
        if not isinstance(data, dict):
            raise UpstreamError()

        candidates = data.get("candidates") or []
        if not candidates:
            return NO_REPLY_TEXT

        content = candidates[0].get("content") or {}
        parts = content.get("parts") or []
        for part in parts:
            if isinstance(part, dict) and part.get("text"):
                return part["text"]
        return NO_REPLY_TEXT
