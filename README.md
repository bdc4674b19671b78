# wppanalytics

A small command-line tool that fetches WhatsApp Business Account analytics
from the Graph API and prints them as tables in your terminal.

It has two modes:

- **analytics** (default): sent and delivered message counts per time slot
  for a business account, at `HALF_HOUR`, `DAY` or `MONTH` granularity.
- **template**: per-template sent, delivered, read and clicked counts, cost
  and click rate, followed by a summary (totals, read rate, click rate, total
  cost, cost per delivered message) and a breakdown of clicks by button.

## Installation

```
pip install .
```

This installs the `wppanalytics` command. The same entry point can also be
run as `python -m wppanalytics.cli`.

## Access token

The access token is read from the `FB_ACCESS_TOKEN` environment variable.
If it is not set, you are asked for it on standard error; when standard input
is a terminal the input is hidden, otherwise one line is read from standard
input.

```
export FB_ACCESS_TOKEN=token
```

## Usage

Message analytics for a date range:

```
wppanalytics --wbaid 123 --start 2025-06-20 --end 2025-06-24
```

Half-hourly data shown in UTC:

```
wppanalytics --wbaid 123 --start 2025-06-20T00:00:00Z --end 2025-06-21T00:00:00Z \
    --granularity HALF_HOUR --timezone UTC
```

Template analytics:

```
wppanalytics --mode template --wbaid 123 --start 2025-06-20 --end 2025-06-24 \
    --granularity daily --templates 111,222 --metrics cost,clicked,delivered,read,sent
```

Every option may also be written with a single dash, as in `-wbaid=123`.

### Options

| Option          | Meaning                                                                 | Default             |
|-----------------|-------------------------------------------------------------------------|---------------------|
| `--wbaid`       | WhatsApp Business Account ID (required)                                 |                     |
| `--start`       | Start date (required)                                                   |                     |
| `--end`         | End date (required)                                                     |                     |
| `--granularity` | `HALF_HOUR`, `DAY` or `MONTH` for analytics; `daily` for templates      | `DAY`               |
| `--timezone`    | IANA time zone used to display dates; falls back to UTC with a warning  | `America/Sao_Paulo` |
| `--mode`        | `analytics` or `template`                                               | `analytics`         |
| `--metrics`     | Comma-separated metric types for templates; sent upper-cased            |                     |
| `--templates`   | Comma-separated template IDs for template analytics                     |                     |

Dates may be given as `YYYY-MM-DD` (midnight UTC), as a full timestamp such
as `2025-06-24T15:30:00Z` or `2025-06-24T15:30:00-03:00`, or as a date with a
zone designator such as `2025-06-24+03:00`.

Template mode requires `--granularity daily`, at least one template ID and at
least one metric type. If `--wbaid`, `--start` or `--end` is missing, a usage
message is printed and the command exits with status 1; any other error is
reported on standard error with status 1 as well.

Large counts are shortened: `1500` is shown as `1.5K` and `1500000` as
`1.5M`. Template IDs longer than 15 characters are cut short with `...`.

## Using it from Python

The pieces behind the command can be used on their own:

```python
from zoneinfo import ZoneInfo

from wppanalytics.client import GraphClient
from wppanalytics.dateparse import parse_to_epoch
from wppanalytics.formatter import format_analytics

client = GraphClient()
response = client.get_analytics(
    "123",
    parse_to_epoch("2025-06-20"),
    parse_to_epoch("2025-06-24"),
    "DAY",
    "token",
)
print(format_analytics(response, ZoneInfo("UTC")), end="")
```

- `wppanalytics.client.GraphClient` has `get_analytics` and
  `get_template_analytics`; its constructor takes a `base_url` and an
  optional `requests.Session`.
- `wppanalytics.models` holds dataclasses for the responses;
  `AnalyticsResponse.from_dict` and `TemplateAnalyticsResponse.from_dict`
  build them from decoded JSON.
- `wppanalytics.formatter` has `format_analytics`,
  `format_template_analytics`, `format_number` and `truncate_string`.
- `wppanalytics.config` has the `Config` dataclass, `validate` and
  `load_access_token`.
- `wppanalytics.dateparse` has `parse_to_epoch` and `epoch_to_local`.

Errors are raised as exceptions: `DateParseError` for dates that cannot be
read, `ConfigError` for invalid settings and `ApiError` when a request fails,
returns a status other than 200, or returns a body that cannot be parsed.

## Limitations

- Template analytics are not paged: only the first page the API returns is
  fetched. Its paging cursors are parsed into the response model but not
  followed.
- Only the first data block of a template analytics response is rendered.
- Output is plain text only; there is no JSON or CSV export and nothing is
  stored between runs.

## Running the tests

```
pip install ".[test]"
pytest
```