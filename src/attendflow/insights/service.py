"""HR insights from the attendance log, via the Gemini generateContent API.

The call is best-effort: it never raises, and every outcome is one of
InsightReport, NoInsights or InsightFailure.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

import requests

from ..attendance.model import AttendanceRecord

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "trends": {"type": "ARRAY", "items": {"type": "STRING"}},
        "recommendations": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["summary", "trends", "recommendations"],
}


@dataclass(frozen=True)
class InsightReport:
    summary: str
    trends: tuple[str, ...]
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"summary": self.summary, "trends": list(self.trends), "recommendations": list(self.recommendations)}


@dataclass(frozen=True)
class NoInsights:
    reason: str


@dataclass(frozen=True)
class InsightFailure:
    error: str


InsightResult = Union[InsightReport, NoInsights, InsightFailure]


def build_prompt(records: Iterable[AttendanceRecord]) -> str:
    data = json.dumps([r.to_dict() for r in records])
    return (
        f"Analyze this attendance data and provide HR insights: {data}. "
        "Provide trends on punctuality, location hotspots, and potential issues. "
        'Format as JSON with "summary", "trends" (array), and "recommendations" (array).'
    )


def parse_insights(payload: dict) -> InsightReport:
    """Extract the JSON document the model wrote into its first candidate."""
    text = payload["candidates"][0]["content"]["parts"][0]["text"]
    doc = json.loads(text)
    return InsightReport(
        summary=str(doc["summary"]),
        trends=tuple(str(t) for t in doc.get("trends") or ()),
        recommendations=tuple(str(r) for r in doc.get("recommendations") or ()),
    )


def _describe(error: requests.RequestException) -> str:
    response = getattr(error, "response", None)
    if response is not None:
        return f"{type(error).__name__} (HTTP {response.status_code})"
    return type(error).__name__


class InsightService:
    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str,
        timeout: float = 20.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def get_insights(self, records: Iterable[AttendanceRecord]) -> InsightResult:
        if not self.enabled:
            return NoInsights("insights are not configured")

        records = list(records)
        if not records:
            return NoInsights("no attendance data")

        body = {
            "contents": [{"parts": [{"text": build_prompt(records)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": _RESPONSE_SCHEMA,
            },
        }
        try:
            resp = self._session.post(
                GEMINI_URL.format(model=self._model),
                headers={"x-goog-api-key": self._api_key},
                json=body,
                timeout=self._timeout,
            )
            resp.raise_for_status()
            return parse_insights(resp.json())
        except requests.RequestException as e:
            # The exception text can carry the request URL and headers, keep it out of logs.
            detail = _describe(e)
            logger.warning("insight request failed: %s", detail)
            return InsightFailure(detail)
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning("insight response could not be parsed: %s", e)
            return InsightFailure(f"unreadable response: {e}")
