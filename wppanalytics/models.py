"""Data models for analytics API responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"expected an object for {what}, got {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array, got {value!r}")
    return value


@dataclass
class DataPoint:
    """A single analytics data point."""

    start: int = 0
    end: int = 0
    sent: int = 0
    delivered: int = 0

    @classmethod
    def _parse(cls, raw: Any) -> DataPoint:
        data = _mapping(raw, "data point")
        return cls(
            start=_int(data, "start"),
            end=_int(data, "end"),
            sent=_int(data, "sent"),
            delivered=_int(data, "delivered"),
        )


@dataclass
class AnalyticsData:
    """The analytics section of an account response."""

    phone_numbers: list[str] = field(default_factory=list)
    granularity: str = ""
    data_points: list[DataPoint] = field(default_factory=list)

    @classmethod
    def _parse(cls, raw: Any) -> AnalyticsData:
        data = _mapping(raw, "analytics")
        phones = _list(data, "phone_numbers")
        for phone in phones:
            if not isinstance(phone, str):
                raise ValueError(f"phone number must be a string, got {phone!r}")
        return cls(
            phone_numbers=list(phones),
            granularity=_str(data, "granularity"),
            data_points=[DataPoint._parse(item) for item in _list(data, "data_points")],
        )


@dataclass
class AnalyticsResponse:
    """Response of the account analytics request."""

    id: str = ""
    analytics: AnalyticsData = field(default_factory=AnalyticsData)

    @classmethod
    def from_dict(cls, data: Any) -> AnalyticsResponse:
        """Build a response from decoded JSON; raises ValueError on bad shapes."""
        body = _mapping(data, "response")
        return cls(id=_str(body, "id"), analytics=AnalyticsData._parse(body.get("analytics")))


@dataclass
class ClickedAction:
    """A clicked action reported for a template."""

    type: str = ""
    button_content: str = ""
    count: int = 0

    @classmethod
    def _parse(cls, raw: Any) -> ClickedAction:
        data = _mapping(raw, "clicked action")
        return cls(
            type=_str(data, "type"),
            button_content=_str(data, "button_content"),
            count=_int(data, "count"),
        )


@dataclass
class CostMetric:
    """A cost metric reported for a template."""

    type: str = ""
    value: float = 0.0

    @classmethod
    def _parse(cls, raw: Any) -> CostMetric:
        data = _mapping(raw, "cost metric")
        return cls(type=_str(data, "type"), value=_float(data, "value"))


@dataclass
class TemplateDataPoint:
    """A single template analytics data point."""

    template_id: str = ""
    start: int = 0
    end: int = 0
    sent: int = 0
    delivered: int = 0
    read: int = 0
    clicked: list[ClickedAction] = field(default_factory=list)
    cost: list[CostMetric] = field(default_factory=list)

    @classmethod
    def _parse(cls, raw: Any) -> TemplateDataPoint:
        data = _mapping(raw, "template data point")
        return cls(
            template_id=_str(data, "template_id"),
            start=_int(data, "start"),
            end=_int(data, "end"),
            sent=_int(data, "sent"),
            delivered=_int(data, "delivered"),
            read=_int(data, "read"),
            clicked=[ClickedAction._parse(item) for item in _list(data, "clicked")],
            cost=[CostMetric._parse(item) for item in _list(data, "cost")],
        )


@dataclass
class TemplateAnalyticsData:
    """One block of template analytics data."""

    granularity: str = ""
    product_type: str = ""
    data_points: list[TemplateDataPoint] = field(default_factory=list)

    @classmethod
    def _parse(cls, raw: Any) -> TemplateAnalyticsData:
        data = _mapping(raw, "template analytics data")
        return cls(
            granularity=_str(data, "granularity"),
            product_type=_str(data, "product_type"),
            data_points=[TemplateDataPoint._parse(item) for item in _list(data, "data_points")],
        )


@dataclass
class Cursors:
    """Pagination cursors."""

    before: str = ""
    after: str = ""

    @classmethod
    def _parse(cls, raw: Any) -> Cursors | None:
        if raw is None:
            return None
        data = _mapping(raw, "cursors")
        return cls(before=_str(data, "before"), after=_str(data, "after"))


@dataclass
class Paging:
    """Pagination information."""

    cursors: Cursors | None = None

    @classmethod
    def _parse(cls, raw: Any) -> Paging | None:
        if raw is None:
            return None
        data = _mapping(raw, "paging")
        return cls(cursors=Cursors._parse(data.get("cursors")))


@dataclass
class TemplateAnalyticsResponse:
    """Response of the template analytics request."""

    data: list[TemplateAnalyticsData] = field(default_factory=list)
    paging: Paging | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TemplateAnalyticsResponse:
        """Build a response from decoded JSON; raises ValueError on bad shapes."""
        body = _mapping(data, "response")
        return cls(
            data=[TemplateAnalyticsData._parse(item) for item in _list(body, "data")],
            paging=Paging._parse(body.get("paging")),
        )