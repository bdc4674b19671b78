from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from wppanalytics.client import ApiError, GraphClient

BASE_URL = "https://api.example.com/v1"
WBA_ID = "123456"

ANALYTICS_BODY = {
    "analytics": {
        "phone_numbers": ["[phone]"],
        "granularity": "DAY",
        "data_points": [
            {"start": 1750474800, "end": 1750561200, "sent": 523, "delivered": 539},
            {"start": 1750561200, "end": 1750647600, "sent": 92, "delivered": 100},
        ],
    },
    "id": WBA_ID,
}

TEMPLATE_BODY = {
    "data": [
        {
            "granularity": "DAILY",
            "product_type": "cloud_api",
            "data_points": [
                {
                    "template_id": "[card-number]",
                    "start": 1750377600,
                    "end": 1750464000,
                    "sent": 871,
                    "delivered": 789,
                    "read": 399,
                    "clicked": [
                        {"type": "quick_reply_button", "button_content": "Quero negociar", "count": 56}
                    ],
                    "cost": [{"type": "amount_spent", "value": 6.18}],
                }
            ],
        }
    ],
    "paging": {"cursors": {"before": "MAZDZD", "after": "MjQZD"}},
}


def _query(call):
    return parse_qs(urlsplit(call.request.url).query)


def test_get_analytics_success():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE_URL}/{WBA_ID}", json=ANALYTICS_BODY, status=200)
        response = client.get_analytics(WBA_ID, 1750474800, 1750647600, "DAY", "token")
        query = _query(rsps.calls[0])

    assert response.id == WBA_ID
    assert len(response.analytics.data_points) == 2
    assert response.analytics.granularity == "DAY"
    assert response.analytics.data_points[0].sent == 523
    assert query["fields"] == ["analytics.start(1750474800).end(1750647600).granularity(DAY)"]
    assert query["access_token"] == ["token"]


def test_get_analytics_error_status():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/{WBA_ID}",
            body='{"error": {"message": "Invalid access token"}}',
            status=401,
        )
        with pytest.raises(ApiError) as info:
            client.get_analytics(WBA_ID, 1750474800, 1750647600, "DAY", "token")

    assert "status 401" in str(info.value)
    assert "Invalid access token" in str(info.value)


def test_get_analytics_invalid_json():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE_URL}/{WBA_ID}", body="not json", status=200)
        with pytest.raises(ApiError, match="failed to parse response"):
            client.get_analytics(WBA_ID, 1, 2, "DAY", "token")


def test_get_analytics_wrong_shape():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE_URL}/{WBA_ID}", json={"id": 5}, status=200)
        with pytest.raises(ApiError, match="failed to parse response"):
            client.get_analytics(WBA_ID, 1, 2, "DAY", "token")


def test_get_analytics_connection_failure():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/{WBA_ID}",
            body=requests.ConnectionError("refused"),
        )
        with pytest.raises(ApiError, match="failed to make request"):
            client.get_analytics(WBA_ID, 1, 2, "DAY", "token")


def test_get_template_analytics_params_and_parse():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/{WBA_ID}/template_analytics",
            json=TEMPLATE_BODY,
            status=200,
        )
        response = client.get_template_analytics(
            WBA_ID, 1750377600, 1750464000, "daily", ["cost", "clicked"], ["11", "22"], "token"
        )
        call = rsps.calls[0]
        query = _query(call)

    assert urlsplit(call.request.url).path == "/v1/123456/template_analytics"
    assert query["start"] == ["1750377600"]
    assert query["end"] == ["1750464000"]
    assert query["granularity"] == ["daily"]
    assert query["metric_types"] == ["COST,CLICKED"]
    assert query["template_ids"] == ["[11,22]"]
    assert query["access_token"] == ["token"]
    assert response.data[0].data_points[0].template_id == "[card-number]"
    assert response.paging.cursors.before == "MAZDZD"


def test_get_template_analytics_omits_empty_lists():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/{WBA_ID}/template_analytics",
            json={"data": []},
            status=200,
        )
        response = client.get_template_analytics(WBA_ID, 1, 2, "daily", [], [], "token")
        query = _query(rsps.calls[0])

    assert "metric_types" not in query
    assert "template_ids" not in query
    assert response.data == []


def test_get_template_analytics_error_status():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/{WBA_ID}/template_analytics",
            body="server down",
            status=500,
        )
        with pytest.raises(ApiError, match="API request failed with status 500: server down"):
            client.get_template_analytics(WBA_ID, 1, 2, "daily", ["sent"], ["1"], "token")


def test_query_keys_are_sorted():
    client = GraphClient(base_url=BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/{WBA_ID}/template_analytics",
            json={"data": []},
            status=200,
        )
        client.get_template_analytics(WBA_ID, 1, 2, "daily", ["sent"], ["1"], "token")
        raw_query = urlsplit(rsps.calls[0].request.url).query

    keys = [part.split("=", 1)[0] for part in raw_query.split("&")]
    assert keys == sorted(keys)