from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from subway_bot.config import SeoulApiSettings
from subway_bot.subway_api import SubwayClient

API_KEY = "test-key-1234"
BASE_URL = "http://example.test/api/subway"


def arrival_item(**overrides: Any) -> dict[str, Any]:
    item = {
        "subwayId": "1002",
        "updnLine": "내선",
        "trainLineNm": "성수행 - 역삼방면",
        "statnFid": "1002000221",
        "statnTid": "1002000223",
        "statnId": "1002000222",
        "statnNm": "강남",
        "trnsitCo": "2",
        "ordkey": "01000성수0",
        "subwayList": "1002,1077",
        "statnList": "1002000222,1077006810",
        "btrainSttus": "일반",
        "barvlDt": "125",
        "btrainNo": "2234",
        "bstatnId": "1002000211",
        "bstatnNm": "성수",
        "recptnDt": "2024-05-01 08:30:15",
        "arvlMsg2": "전역 출발",
        "arvlMsg3": "역삼",
        "arvlCd": "3",
        "lstcarAt": "0",
    }
    item.update(overrides)
    return item


def arrival_payload(*items: dict[str, Any], code: str = "INFO-000", message: str = "정상 처리되었습니다.") -> str:
    return json.dumps(
        {
            "errorMessage": {"status": 200, "code": code, "message": message, "total": len(items)},
            "realtimeArrivalList": list(items),
        },
        ensure_ascii=False,
    )


@pytest.fixture
def settings() -> SeoulApiSettings:
    return SeoulApiSettings(api_key=API_KEY, base_url=BASE_URL, connect_timeout=2.0, read_timeout=3.0)


@pytest.fixture
def make_client(settings: SeoulApiSettings):
    created: list[SubwayClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> SubwayClient:
        client = SubwayClient(settings, transport=httpx.MockTransport(handler))
        created.append(client)
        return client

    yield factory

    for client in created:
        client.close()
