"""Text table rendering of analytics responses."""

from __future__ import annotations

from datetime import datetime, tzinfo

from .dateparse import epoch_to_local
from .models import AnalyticsResponse, TemplateAnalyticsResponse

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_ANALYTICS_TOP = "╭──────────────┬─────────────────┬─────────────┬─────────────╮\n"
_ANALYTICS_HEAD = "│     Date     │   Time Range    │    Sent     │  Delivered  │\n"
_ANALYTICS_SEP = "├──────────────┼─────────────────┼─────────────┼─────────────┤\n"
_ANALYTICS_BOTTOM = "╰──────────────┴─────────────────┴─────────────┴─────────────╯\n"

_TEMPLATE_TOP = (
    "╭──────────────┬─────────────────┬──────────┬───────────┬──────────┬"
    "──────────┬───────────┬──────────────╮\n"
)
_TEMPLATE_HEAD = (
    "│     Date     │  Template ID    │   Sent   │ Delivered │   Read   │"
    " Clicked  │   Cost    │ Click Rate % │\n"
)
_TEMPLATE_SEP = (
    "├──────────────┼─────────────────┼──────────┼───────────┼──────────┼"
    "──────────┼───────────┼──────────────┤\n"
)
_TEMPLATE_BOTTOM = (
    "╰──────────────┴─────────────────┴──────────┴───────────┴──────────┴"
    "──────────┴───────────┴──────────────╯\n"
)


def _zone_name(tz: tzinfo) -> str:
    key = getattr(tz, "key", None)
    return key if key else str(tz)


def _hhmm(moment: datetime) -> str:
    return f"{moment.hour:02d}:{moment.minute:02d}"


def _month_day(moment: datetime) -> str:
    return f"{_MONTHS[moment.month - 1]} {moment.day:02d}"


def _time_range(start: int, end: int, tz: tzinfo, granularity: str) -> tuple[str, str]:
    start_time = epoch_to_local(start, tz)
    end_time = epoch_to_local(end, tz)
    if granularity == "MONTH":
        return (
            f"{start_time.year:04d}-{start_time.month:02d}",
            f"{_month_day(start_time)} - {_month_day(end_time)}",
        )
    return (
        start_time.strftime("%Y-%m-%d"),
        f"{_hhmm(start_time)} - {_hhmm(end_time)}",
    )


def format_number(n: int) -> str:
    """Render a count, abbreviating thousands and millions with K and M."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1000:
        return f"{n / 1000:.1f}K"
    return str(n)


def truncate_string(s: str, max_len: int) -> str:
    """Shorten ``s`` to ``max_len`` characters, ending with an ellipsis."""
    if len(s) <= max_len:
        return s
    if max_len < 3:
        raise ValueError("max_len must be at least 3 to truncate")
    return s[: max_len - 3] + "..."


def format_analytics(response: AnalyticsResponse, tz: tzinfo) -> str:
    """Render account analytics as a report with a table and summary."""
    analytics = response.analytics
    parts = [
        f"📱 WhatsApp Business Account: {response.id}\n",
        f"📞 Phone Numbers: {', '.join(analytics.phone_numbers)}\n",
        f"⏱️  Granularity: {analytics.granularity}\n",
        f"📊 Data Points: {len(analytics.data_points)}\n",
        f"🌎 Timezone: {_zone_name(tz)}\n\n",
    ]
    if not analytics.data_points:
        parts.append("❌ No data points found.\n")
        return "".join(parts)

    parts += [_ANALYTICS_TOP, _ANALYTICS_HEAD, _ANALYTICS_SEP]
    total_sent = 0
    total_delivered = 0
    for point in analytics.data_points:
        day, time_range = _time_range(point.start, point.end, tz, analytics.granularity)
        parts.append(
            f"│ {day:<12} │ {time_range:<15} │ {format_number(point.sent):>11} │ "
            f"{format_number(point.delivered):>11} │\n"
        )
        total_sent += point.sent
        total_delivered += point.delivered
    parts.append(_ANALYTICS_BOTTOM)

    parts += [
        "\n📈 Summary:\n",
        f"   📤 Total Sent: {format_number(total_sent)}\n",
        f"   📥 Total Delivered: {format_number(total_delivered)}\n",
        "   ℹ️  Note: Delivered messages may arrive after the reporting period\n",
    ]
    return "".join(parts)


def _percent(part: float, whole: int) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def format_template_analytics(response: TemplateAnalyticsResponse, tz: tzinfo) -> str:
    """Render template analytics as a report with a table and summary."""
    if not response.data:
        return "❌ No template analytics data found.\n"

    data = response.data[0]
    parts = [
        "📊 Template Analytics Report\n",
        f"📈 Granularity: {data.granularity.upper()}\n",
        f"🔧 Product Type: {data.product_type.upper()}\n",
        f"📋 Data Points: {len(data.data_points)}\n",
        f"🌎 Timezone: {_zone_name(tz)}\n\n",
    ]
    if not data.data_points:
        parts.append("❌ No data points found.\n")
        return "".join(parts)

    parts += [_TEMPLATE_TOP, _TEMPLATE_HEAD, _TEMPLATE_SEP]
    total_sent = total_delivered = total_read = total_clicked = 0
    total_cost = 0.0

    for point in data.data_points:
        day = epoch_to_local(point.start, tz).strftime("%Y-%m-%d")
        template_id = truncate_string(point.template_id, 15)
        clicks = sum(action.count for action in point.clicked)
        cost = next(
            (metric.value for metric in point.cost if metric.type == "amount_spent"), 0.0
        )
        click_rate = _percent(clicks, point.delivered)
        cost_text = f"${cost:.2f}"
        parts.append(
            f"│ {day:<12} │ {template_id:<15} │ {format_number(point.sent):>8} │ "
            f"{format_number(point.delivered):>9} │ {format_number(point.read):>8} │ "
            f"{format_number(clicks):>8} │ {cost_text:>9} │ {click_rate:11.1f}% │\n"
        )
        total_sent += point.sent
        total_delivered += point.delivered
        total_read += point.read
        total_clicked += clicks
        total_cost += cost

    parts.append(_TEMPLATE_BOTTOM)

    click_rate = _percent(total_clicked, total_delivered)
    read_rate = _percent(total_read, total_delivered)
    parts += [
        "\n📈 Summary:\n",
        f"   📤 Total Sent: {format_number(total_sent)}\n",
        f"   📥 Total Delivered: {format_number(total_delivered)}\n",
        f"   👀 Total Read: {format_number(total_read)} ({read_rate:.1f}%)\n",
        f"   👆 Total Clicked: {format_number(total_clicked)} ({click_rate:.1f}%)\n",
        f"   💰 Total Cost: ${total_cost:.2f}\n",
    ]
    if total_cost > 0 and total_delivered > 0:
        parts.append(f"   📊 Cost per Delivered: ${total_cost / total_delivered:.4f}\n")

    if data.data_points[0].clicked:
        parts.append("\n🔗 Click Details:\n")
        summary: dict[str, int] = {}
        for point in data.data_points:
            for action in point.clicked:
                key = f"{action.type}: {action.button_content}"
                summary[key] = summary.get(key, 0) + action.count
        parts.extend(f"   • {action}: {count} clicks\n" for action, count in summary.items())

    return "".join(parts)