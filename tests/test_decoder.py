import json

import pytest

from conftest import arrival_item, arrival_payload
from subway_bot.decoder import FIELD_MAP, decode_arrivals, map_arrival
from subway_bot.errors import ApiError, AuthenticationError
from subway_bot.models import SubwayArrival


def test_decodes_all_fields():
    [arrival] = decode_arrivals(arrival_payload(arrival_item()))

    assert arrival.subway_line_id == "1002"
    assert arrival.station_name == "강남"
    assert arrival.current_station_id == "1002000222"
    assert arrival.previous_station_id == "1002000221"
    assert arrival.next_station_id == "1002000223"
    assert arrival.train_number == "2234"
    assert arrival.arrival_order_key == "01000성수0"
    assert arrival.connected_subway_line_ids == "1002,1077"
    assert arrival.received_timestamp == "2024-05-01 08:30:15"
    assert arrival.final_destination_station_name == "성수"
    assert arrival.arrival_minutes == 3
    assert arrival.location_status == "전역 출발 (다음: 강남역)"


def test_field_map_covers_every_record_field():
    mapped = {attr for _, attr in FIELD_MAP}

    assert mapped == set(SubwayArrival.__dataclass_fields__)
    assert len({key for key, _ in FIELD_MAP}) == len(FIELD_MAP)


def test_preserves_source_order():
    items = [arrival_item(btrainNo=str(n), barvlDt=str(600 - n)) for n in range(5)]

    arrivals = decode_arrivals(arrival_payload(*items))

    assert [a.train_number for a in arrivals] == ["0", "1", "2", "3", "4"]


def test_missing_and_null_fields_become_empty_strings():
    item = arrival_item(arvlMsg3=None)
    del item["lstcarAt"]

    [arrival] = decode_arrivals(arrival_payload(item))

    assert arrival.second_arrival_message == ""
    assert arrival.last_train_flag == ""
    assert arrival.is_last_train is False


def test_numeric_values_rendered_as_text():
    arrival = map_arrival({"barvlDt": 120, "arvlCd": 1, "statnNm": "강남"})

    assert arrival.arrival_seconds == "120"
    assert arrival.arrival_minutes == 2
    assert arrival.location_status == "강남역 도착"


def test_empty_list_returns_no_arrivals():
    assert decode_arrivals(arrival_payload()) == []


def test_missing_list_returns_no_arrivals():
    body = json.dumps({"errorMessage": {"code": "INFO-000", "message": "ok"}})

    assert decode_arrivals(body) == []


def test_error_envelope_raises_with_code_and_message():
    body = arrival_payload(arrival_item(), code="ERROR-337", message="요청 범위를 초과했습니다.")

    with pytest.raises(ApiError) as excinfo:
        decode_arrivals(body)

    assert excinfo.value.error_code == "ERROR-337"
    assert excinfo.value.message == "요청 범위를 초과했습니다."
    assert "[ERROR-337]" in str(excinfo.value)


def test_top_level_status_envelope_raises():
    body = json.dumps(
        {"status": 500, "code": "INFO-200", "message": "해당하는 데이터가 없습니다.", "total": 0},
        ensure_ascii=False,
    )

    with pytest.raises(ApiError) as excinfo:
        decode_arrivals(body)

    assert excinfo.value.error_code == "INFO-200"


def test_invalid_key_raises_authentication_error():
    body = json.dumps({"errorMessage": {"code": "INFO-100", "message": "인증키가 유효하지 않습니다."}})

    with pytest.raises(AuthenticationError) as excinfo:
        decode_arrivals(body)

    assert excinfo.value.error_code == "INFO-100"


@pytest.mark.parametrize("body", ["", "not json", "{\"realtimeArrivalList\": [", "[1, 2]"])
def test_malformed_body_raises_api_error(body):
    with pytest.raises(ApiError, match="Malformed response"):
        decode_arrivals(body)


def test_non_object_entry_raises_api_error():
    body = json.dumps({"realtimeArrivalList": [arrival_item(), "oops"]})

    with pytest.raises(ApiError):
        decode_arrivals(body)


def test_unexpected_failure_is_wrapped(monkeypatch):
    def explode(item):
        raise KeyError("boom")

    monkeypatch.setattr("subway_bot.decoder.map_arrival", explode)

    with pytest.raises(ApiError, match="boom") as excinfo:
        decode_arrivals(arrival_payload(arrival_item()))

    assert isinstance(excinfo.value.__cause__, KeyError)
