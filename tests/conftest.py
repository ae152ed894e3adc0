"""
Pytest 配置和 fixtures
"""
import json
from typing import Any, List, Optional

import httpx
import pytest

from ozon_seller import new_mock_client


class RecordingHandler:
    """记录收到的请求，并返回预设的响应（或抛出预设的异常）"""

    def __init__(self, body: Any = None, status_code: int = 200, error: Optional[Exception] = None):
        self.body = {} if body is None else body
        self.status_code = status_code
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        """最后一个请求的 JSON 请求体（没有请求体时为 None）"""
        content = self.last_request.content
        if not content:
            return None
        return json.loads(content)


@pytest.fixture
def handler():
    """默认返回空 JSON 对象的 handler"""
    return RecordingHandler()


@pytest.fixture
def client(handler):
    """基于 handler 的 mock 客户端"""
    with new_mock_client(handler) as mock_client:
        yield mock_client


@pytest.fixture
def make_client():
    """按需创建 mock 客户端，测试结束后统一关闭"""
    created = []

    def _make(body: Any = None, status_code: int = 200, error: Optional[Exception] = None):
        recording = RecordingHandler(body=body, status_code=status_code, error=error)
        mock_client = new_mock_client(recording)
        created.append(mock_client)
        return mock_client, recording

    yield _make

    for mock_client in created:
        mock_client.close()
