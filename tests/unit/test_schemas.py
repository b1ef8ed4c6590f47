"""Deserialization of cloud payloads into typed models."""
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from pydantic import ValidationError

from bambu_cloud.schemas import Account, Device, DevicesResponse, LoginResponse, Task, TasksResponse, Token
from tests.unit.conftest import TEST_SIGNING_KEY


class TestTask:

    def test_fields_are_typed_from_camel_case(self, task_payload):
        task = Task.model_validate(task_payload)

        assert task.id == 84716312
        assert task.model_id == "US2bb7ee0f1e7c52"
        assert task.design_title == ""
        assert task.weight == 12.5
        assert task.length == 4190
        assert task.cost_time == 5400
        assert task.plate_index == 1
        assert task.device_name == "Workshop P1S"
        assert task.is_printable is True
        assert task.is_public_profile is False
        assert str(task.cover) == "https://public-cdn.bblmw.com/cover/benchy.png"

    def test_timestamps_are_utc(self, task_payload):
        task = Task.model_validate(task_payload)

        assert task.start_time == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
        assert task.end_time.tzinfo == timezone.utc
        assert task.duration == timedelta(hours=1, minutes=30)
        assert task.cost_time_delta == timedelta(seconds=5400)

    def test_naive_and_offset_timestamps_normalised(self, task_payload):
        task_payload["startTime"] = "2024-03-01T10:00:00"
        task_payload["endTime"] = "2024-03-01T13:30:00+02:00"
        task = Task.model_validate(task_payload)

        assert task.start_time == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
        assert task.end_time == datetime(2024, 3, 1, 11, 30, tzinfo=timezone.utc)

    def test_ams_position_comes_from_ams_key(self, task_payload):
        task = Task.model_validate(task_payload)

        assert len(task.ams_detail_mapping) == 1
        detail = task.ams_detail_mapping[0]
        assert detail.position == 0
        assert detail.target_color == "F4EE2AFF"
        assert detail.filament_type == "PLA"

    def test_numeric_strings_are_coerced(self, task_payload):
        task_payload["length"] = "4190"
        task_payload["weight"] = "12.5"
        task = Task.model_validate(task_payload)

        assert task.length == 4190
        assert task.weight == 12.5

    def test_missing_field_is_rejected(self, task_payload):
        del task_payload["costTime"]
        with pytest.raises(ValidationError):
            Task.model_validate(task_payload)

    def test_tasks_are_immutable(self, task_payload):
        task = Task.model_validate(task_payload)
        with pytest.raises(ValidationError):
            task.title = "changed"

    def test_tasks_response_keeps_order(self, task_payload):
        second = dict(task_payload, id=1, title="Second")
        parsed = TasksResponse.model_validate({"total": 2, "hits": [task_payload, second]})

        assert parsed.total == 2
        assert [t.title for t in parsed.hits] == ["Benchy", "Second"]


class TestAccountAndDevice:

    def test_account_email_from_account_key(self, account_payload):
        account = Account.model_validate(account_payload)

        assert account.email == "maker@example.com"
        assert account.product_models == ["P1S", "A1 mini"]
        assert account.personal.task_length_sum == 509000
        assert str(account.personal.links[0]) == "https://example.com/maker"

    def test_device_snake_case(self, device_payload):
        parsed = DevicesResponse.model_validate({"devices": [device_payload]})
        device = parsed.devices[0]

        assert isinstance(device, Device)
        assert device.dev_id == "01S00C123456789"
        assert device.nozzle_diameter == 0.4

    def test_access_code_not_in_repr(self, device_payload):
        device = Device.model_validate(device_payload)
        assert "ACCESS99" not in repr(device)
        assert "dev_access_code" not in repr(device)


class TestToken:

    def test_login_response_alias(self):
        assert LoginResponse.model_validate({"accessToken": "abc"}).access_token == "abc"

    def test_username_read_without_signature_check(self, access_token):
        token = Token.from_jwt(access_token)

        assert token.username == "u_1234567"
        assert token.jwt == access_token
        assert access_token not in repr(token)

    def test_expired_token_still_decodes(self):
        raw = jwt.encode({"username": "u_99", "exp": 1}, TEST_SIGNING_KEY, algorithm="HS256")
        assert Token.from_jwt(raw).username == "u_99"

    def test_missing_username_claim(self):
        raw = jwt.encode({"sub": "someone"}, TEST_SIGNING_KEY, algorithm="HS256")
        with pytest.raises(jwt.InvalidTokenError):
            Token.from_jwt(raw)

    def test_garbage_token(self):
        with pytest.raises(jwt.InvalidTokenError):
            Token.from_jwt("not-a-jwt")
