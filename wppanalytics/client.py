"""HTTP client for the Graph API analytics endpoints."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

import requests

from .models import AnalyticsResponse, TemplateAnalyticsResponse

DEFAULT_BASE_URL = "https://graph.facebook.com/v23.0"


class ApiError(RuntimeError):
    """Raised when an API request fails or its response cannot be read."""


def _encode_query(params: Mapping[str, str]) -> str:
    """Encode query parameters with keys in sorted order."""
    return urlencode(sorted(params.items()))


class GraphClient:
    """Client for account and template analytics requests."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()

    def _get_json(self, url: str, params: Mapping[str, str]) -> Any:
        full_url = f"{url}?{_encode_query(params)}"
        try:
            response = self.session.get(full_url)
        except requests.RequestException as exc:
            raise ApiError(f"failed to make request: {exc}") from exc

        try:
            body = response.text
        except (requests.RequestException, UnicodeDecodeError) as exc:
            raise ApiError(f"failed to read response body: {exc}") from exc

        if response.status_code != 200:
            raise ApiError(
                f"API request failed with status {response.status_code}: {body}"
            )

        try:
            return json.loads(body)
        except ValueError as exc:
            raise ApiError(f"failed to parse response: {exc}") from exc

    def get_analytics(
        self,
        wba_id: str,
        start: int,
        end: int,
        granularity: str,
        access_token: str,
    ) -> AnalyticsResponse:
        """Fetch message analytics for a business account."""
        params = {
            "fields": f"analytics.start({start}).end({end}).granularity({granularity})",
            "access_token": access_token,
        }
        data = self._get_json(f"{self.base_url}/{wba_id}", params)
        try:
            return AnalyticsResponse.from_dict(data)
        except ValueError as exc:
            raise ApiError(f"failed to parse response: {exc}") from exc

    def get_template_analytics(
        self,
        wba_id: str,
        start: int,
        end: int,
        granularity: str,
        metric_types: Iterable[str],
        template_ids: Iterable[str],
        access_token: str,
    ) -> TemplateAnalyticsResponse:
        """Fetch analytics for message templates of a business account."""
        params = {
            "start": str(start),
            "end": str(end),
            "granularity": granularity,
        }
        metrics = [metric.upper() for metric in metric_types]
        if metrics:
            params["metric_types"] = ",".join(metrics)
        templates = list(template_ids)
        if templates:
            params["template_ids"] = f"[{','.join(templates)}]"
        params["access_token"] = access_token

        data = self._get_json(f"{self.base_url}/{wba_id}/template_analytics", params)
        try:
            return TemplateAnalyticsResponse.from_dict(data)
        except ValueError as exc:
            raise ApiError(f"failed to parse response: {exc}") from exc