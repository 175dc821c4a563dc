"""seabird 测试 fixtures -- 进程内 gRPC 服务端 + 示例 Block"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field

import grpc
import pytest
import pytest_asyncio
from pydantic import SecretStr

from seabird import proto
from seabird.block import Block
from seabird.config import ClientConfig

TEST_TOKEN = "test-token"


@dataclass
class RecordedCall:
    """服务端收到的一次调用"""

    method: str
    request: object
    metadata: dict[str, str]


@dataclass
class FakeSeabird:
    """记录请求的进程内服务端

    abort_code 不为 None 时，所有调用以该状态码失败。
    """

    url: str
    token: str = TEST_TOKEN
    calls: list[RecordedCall] = field(default_factory=list)
    abort_code: grpc.StatusCode | None = None
    abort_details: str = ""

    def config(self) -> ClientConfig:
        return ClientConfig(url=self.url, token=SecretStr(self.token), connect_timeout_s=5)


class _RecordingServicer:
    """把每次调用记入 FakeSeabird，再返回空响应"""

    service: str
    response_types: dict[str, type]

    def __init__(self, state: FakeSeabird) -> None:
        self._state = state

    async def _record(self, method: str, request, context: grpc.aio.ServicerContext):
        self._state.calls.append(
            RecordedCall(
                method=f"/{self.service}/{method}",
                request=request,
                metadata=dict(context.invocation_metadata()),
            )
        )
        if self._state.abort_code is not None:
            await context.abort(self._state.abort_code, self._state.abort_details)
        return self.response_types[method]()


class FakeSeabirdServicer(_RecordingServicer, proto.SeabirdServicer):
    service = proto.SEABIRD_SERVICE
    response_types = {
        "SendMessage": proto.SendMessageResponse,
        "SendPrivateMessage": proto.SendPrivateMessageResponse,
        "PerformAction": proto.PerformActionResponse,
        "PerformPrivateAction": proto.PerformPrivateActionResponse,
    }

    async def SendMessage(self, request, context):
        return await self._record("SendMessage", request, context)

    async def SendPrivateMessage(self, request, context):
        return await self._record("SendPrivateMessage", request, context)

    async def PerformAction(self, request, context):
        return await self._record("PerformAction", request, context)

    async def PerformPrivateAction(self, request, context):
        return await self._record("PerformPrivateAction", request, context)


class FakeChatIngestServicer(_RecordingServicer, proto.ChatIngestServicer):
    service = proto.CHAT_INGEST_SERVICE
    response_types = {
        "IngestMessage": proto.IngestMessageResponse,
        "IngestPrivateMessage": proto.IngestPrivateMessageResponse,
        "IngestAction": proto.IngestActionResponse,
        "IngestPrivateAction": proto.IngestPrivateActionResponse,
    }

    async def IngestMessage(self, request, context):
        return await self._record("IngestMessage", request, context)

    async def IngestPrivateMessage(self, request, context):
        return await self._record("IngestPrivateMessage", request, context)

    async def IngestAction(self, request, context):
        return await self._record("IngestAction", request, context)

    async def IngestPrivateAction(self, request, context):
        return await self._record("IngestPrivateAction", request, context)


@pytest_asyncio.fixture
async def fake_seabird() -> AsyncGenerator[FakeSeabird, None]:
    """提供同时实现 Seabird 与 ChatIngest 的明文服务端"""
    server = grpc.aio.server()
    port = server.add_insecure_port("127.0.0.1:0")
    state = FakeSeabird(url=f"http://127.0.0.1:{port}")
    proto.add_SeabirdServicer_to_server(FakeSeabirdServicer(state), server)
    proto.add_ChatIngestServicer_to_server(FakeChatIngestServicer(state), server)
    await server.start()
    yield state
    await server.stop(None)


@pytest.fixture
def sample_block() -> Block:
    """带嵌套格式和列表的示例 Block"""
    return (
        Block()
        .text("Hello ")
        .bold(Block().italic("very").text(" important"))
        .list(["one", "two"])
    )
