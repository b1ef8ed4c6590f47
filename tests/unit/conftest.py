"""Shared fixtures: cloud payloads as the vendor sends them, and HTTP response doubles."""
import json

import jwt
import pytest
import requests

from bambu_cloud.settings import Settings

TEST_SIGNING_KEY = "unit-test-signing-key-not-used-by-the-cloud"


def make_response(payload=None, status: int = 200, url: str = "https://api.bambulab.com/test", raw: bytes | None = None) -> requests.Response:
    """A real requests.Response with a canned body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.encoding = "utf-8"
    if raw is not None:
        resp._content = raw
    else:
        resp._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return resp


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, total_retries=0, backoff_factor=0.0)


@pytest.fixture
def access_token():
    return jwt.encode({"username": "u_1234567", "aud": "bambu"}, TEST_SIGNING_KEY, algorithm="HS256")


@pytest.fixture
def ams_payload():
    return {
        "ams": 0,
        "sourceColor": "FFFFFFFF",
        "targetColor": "F4EE2AFF",
        "filamentId": "GFA00",
        "filamentType": "PLA",
        "targetFilamentType": "PLA",
        "weight": 12.5,
        "nozzleId": 0,
    }


@pytest.fixture
def task_payload(ams_payload):
    return {
        "id": 84716312,
        "designId": 0,
        "designTitle": "",
        "instanceId": 0,
        "modelId": "US2bb7ee0f1e7c52",
        "title": "Benchy",
        "cover": "https://public-cdn.bblmw.com/cover/benchy.png",
        "status": 2,
        "feedbackStatus": 0,
        "startTime": "2024-03-01T10:00:00Z",
        "endTime": "2024-03-01T11:30:00Z",
        "weight": 12.5,
        "length": 4190,
        "costTime": 5400,
        "profileId": 0,
        "plateIndex": 1,
        "plateName": "Plate 1",
        "deviceId": "01S00C123456789",
        "amsDetailMapping": [ams_payload],
        "mode": "cloud_file",
        "isPublicProfile": False,
        "isPrintable": True,
        "deviceModel": "P1S",
        "deviceName": "Workshop P1S",
        "bedType": "textured_plate",
        "someFutureField": "ignored",
    }


@pytest.fixture
def device_payload():
    return {
        "name": "Workshop P1S",
        "online": True,
        "dev_id": "01S00C123456789",
        "print_status": "ACTIVE",
        "nozzle_diameter": 0.4,
        "dev_model_name": "C12",
        "dev_access_code": "ACCESS99",
        "dev_product_name": "P1S",
    }


@pytest.fixture
def account_payload():
    return {
        "uid": 1234567,
        "account": "maker@example.com",
        "name": "maker",
        "avatar": "https://public-cdn.bblmw.com/avatar/1234567.png",
        "fanCount": 3,
        "followCount": 5,
        "likeCount": 10,
        "collectionCount": 1,
        "downloadCount": 42,
        "productModels": ["P1S", "A1 mini"],
        "myLikeCount": 7,
        "favouritesCount": 2,
        "point": 150,
        "personal": {
            "bio": "",
            "links": ["https://example.com/maker"],
            "taskWeightSum": 1520.4,
            "taskLengthSum": 509000,
            "taskTimeSum": 864000,
            "backgroundUrl": "https://public-cdn.bblmw.com/bg/1234567.png",
        },
    }
