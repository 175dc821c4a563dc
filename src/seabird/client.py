"""SeabirdClient / ChatIngestClient -- 鉴权 gRPC 客户端

构造流程（只在 connect() 中执行一次）:
    1. 解析 URL，按 scheme 选择是否启用 TLS（ConfigError）
    2. 校验 token 并格式化为 Bearer 头（ConfigError）
    3. 创建绑定鉴权拦截器的 channel，等待连接就绪（SeabirdConnectionError）

客户端可被多个协程并发使用，不做重试；token 失效时需要重建整个客户端。
"""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, Self

import grpc
import httpx
import structlog

from . import proto
from .auth import bearer_auth_interceptors, format_bearer_token
from .config import ClientConfig
from .content import ContentLike
from .exceptions import CallError, ConfigError, SeabirdConnectionError
from .wire import build_request

log = structlog.get_logger()

DEFAULT_TLS_PORT = 443
DEFAULT_PLAINTEXT_PORT = 80


@dataclass(frozen=True)
class Endpoint:
    """解析后的连接目标"""

    target: str
    secure: bool
    scheme: str


def resolve_endpoint(url: str) -> Endpoint:
    """解析 seabird URL 并决定传输安全方式

    行为规则:
        - 无 scheme（如 ``seabird.example.com:11235``）或 https -> TLS，默认端口 443
        - http -> 明文，默认端口 80
        - 其他 scheme -> 明文，默认端口 80，并记录 warning 日志

    Raises:
        ConfigError: URL 格式非法或缺少 host
    """
    raw = url.strip()
    try:
        # 没有 "://" 时按 authority（host:port）解析，避免把 host 当成 scheme
        parsed = httpx.URL(raw if "://" in raw else f"//{raw}")
    except httpx.InvalidURL as e:
        raise ConfigError(f"failed to parse seabird URL {url!r}: {e}", step="url") from e

    if not parsed.host:
        raise ConfigError(f"seabird URL {url!r} has no host", step="url")

    scheme = parsed.scheme.lower()
    secure = scheme in ("", "https")
    if not secure and scheme != "http":
        log.warning("non_tls_scheme_selected", scheme=scheme, host=parsed.host)

    host = parsed.host
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port or (DEFAULT_TLS_PORT if secure else DEFAULT_PLAINTEXT_PORT)
    return Endpoint(target=f"{host}:{port}", secure=secure, scheme=scheme)


class _AuthenticatedClient:
    """连接建立与调用错误包装的公共部分"""

    service_name: ClassVar[str]
    stub_type: ClassVar[type[proto.ServiceStub]]

    def __init__(
        self, config: ClientConfig, channel: grpc.aio.Channel, inner: proto.ServiceStub
    ) -> None:
        self._config = config
        self._channel = channel
        self._inner = inner

    @classmethod
    async def connect(cls, config: ClientConfig) -> Self:
        """建立连接并返回客户端

        Raises:
            ConfigError: URL 或 token 非法（不会发起任何网络连接）
            SeabirdConnectionError: 连接失败、TLS 握手失败或超时
        """
        endpoint = resolve_endpoint(config.url)
        auth_header = format_bearer_token(config.token.get_secret_value())
        interceptors = bearer_auth_interceptors(auth_header)

        log.debug(
            "seabird_connecting",
            service=cls.service_name,
            target=endpoint.target,
            secure=endpoint.secure,
        )

        if endpoint.secure:
            channel = grpc.aio.secure_channel(
                endpoint.target,
                grpc.ssl_channel_credentials(),
                interceptors=interceptors,
            )
        else:
            channel = grpc.aio.insecure_channel(endpoint.target, interceptors=interceptors)

        try:
            await asyncio.wait_for(channel.channel_ready(), timeout=config.connect_timeout_s)
        except asyncio.CancelledError:
            await channel.close()
            raise
        except Exception as e:
            await channel.close()
            log.error(
                "seabird_connect_failed",
                service=cls.service_name,
                target=endpoint.target,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise SeabirdConnectionError(endpoint.target, e) from e

        log.info(
            "seabird_connected",
            service=cls.service_name,
            target=endpoint.target,
            secure=endpoint.secure,
        )
        return cls(config, channel, cls.stub_type(channel))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def inner(self) -> proto.ServiceStub:
        """原始 stub，用于高层方法未覆盖的调用（同样经过鉴权拦截器）"""
        return self._inner

    async def close(self) -> None:
        await self._channel.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _call(self, method: str, request) -> None:
        """发出一次调用，失败时包装为 CallError"""
        full_method = f"/{self.service_name}/{method}"
        try:
            await getattr(self._inner, method)(request)
        except grpc.aio.AioRpcError as e:
            code = e.code().name
            details = e.details() or ""
            log.error(
                "seabird_call_failed",
                method=full_method,
                code=code,
                details=details,
            )
            raise CallError(
                method=full_method,
                code=code,
                details=details,
                original_error=e,
            ) from e


class SeabirdClient(_AuthenticatedClient):
    """bot 使用的客户端：发送消息与动作

    示例::

        config = ClientConfig(url="https://seabird.example.com", token="your-token")
        async with await SeabirdClient.connect(config) as client:
            await client.send_message("channel-id", "Hello, world!")
            await client.send_message("channel-id", Block().bold("Hello"), {"k": "v"})
    """

    service_name = proto.SEABIRD_SERVICE
    stub_type = proto.SeabirdStub

    async def send_message(
        self,
        channel_id: str,
        content: ContentLike,
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """向频道发送消息

        Args:
            channel_id: 目标频道 ID（不做本地校验）
            content: 纯文本或 Block 节点树
            tags: 元数据标签，None 时发送空 map

        Raises:
            CallError: 远程调用失败
        """
        request = build_request(proto.SendMessageRequest, content, tags, channel_id=channel_id)
        await self._call("SendMessage", request)

    async def send_private_message(
        self,
        user_id: str,
        content: ContentLike,
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """向用户发送私聊消息"""
        request = build_request(proto.SendPrivateMessageRequest, content, tags, user_id=user_id)
        await self._call("SendPrivateMessage", request)

    async def perform_action(
        self,
        channel_id: str,
        content: ContentLike,
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """在频道中执行动作（如 /me）"""
        request = build_request(proto.PerformActionRequest, content, tags, channel_id=channel_id)
        await self._call("PerformAction", request)

    async def perform_private_action(
        self,
        user_id: str,
        content: ContentLike,
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """在私聊中执行动作"""
        request = build_request(
            proto.PerformPrivateActionRequest, content, tags, user_id=user_id
        )
        await self._call("PerformPrivateAction", request)


class ChatIngestClient(_AuthenticatedClient):
    """聊天后端使用的客户端：把外部聊天事件注入 seabird

    与 SeabirdClient 使用相同的配置结构和鉴权方式，互相独立。
    """

    service_name = proto.CHAT_INGEST_SERVICE
    stub_type = proto.ChatIngestStub

    async def ingest_message(
        self,
        channel_id: str,
        user_id: str,
        content: ContentLike,
        user_name: str = "",
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """注入一条频道消息

        Args:
            channel_id: 消息所在频道
            user_id: 发送者 ID
            content: 纯文本或 Block 节点树
            user_name: 发送者显示名
            tags: 元数据标签，None 时发送空 map

        Raises:
            CallError: 远程调用失败
        """
        request = build_request(
            proto.IngestMessageRequest,
            content,
            tags,
            channel_id=channel_id,
            user_id=user_id,
            user_name=user_name,
        )
        await self._call("IngestMessage", request)

    async def ingest_private_message(
        self,
        user_id: str,
        content: ContentLike,
        user_name: str = "",
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """注入一条发给 bot 的私聊消息"""
        request = build_request(
            proto.IngestPrivateMessageRequest,
            content,
            tags,
            user_id=user_id,
            user_name=user_name,
        )
        await self._call("IngestPrivateMessage", request)

    async def ingest_action(
        self,
        channel_id: str,
        user_id: str,
        content: ContentLike,
        user_name: str = "",
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """注入一条频道动作"""
        request = build_request(
            proto.IngestActionRequest,
            content,
            tags,
            channel_id=channel_id,
            user_id=user_id,
            user_name=user_name,
        )
        await self._call("IngestAction", request)

    async def ingest_private_action(
        self,
        user_id: str,
        content: ContentLike,
        user_name: str = "",
        tags: Mapping[str, str] | None = None,
    ) -> None:
        """注入一条私聊动作"""
        request = build_request(
            proto.IngestPrivateActionRequest,
            content,
            tags,
            user_id=user_id,
            user_name=user_name,
        )
        await self._call("IngestPrivateAction", request)
