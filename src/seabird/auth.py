"""Bearer token 鉴权拦截器

拦截器在构造时绑定到 channel 上，因此高层方法和原始 stub 发出的每个调用
都会带上 authorization 头。
"""

import grpc

from .exceptions import ConfigError

AUTHORIZATION_HEADER = "authorization"


def format_bearer_token(token: str) -> str:
    """格式化为 ``Bearer <token>`` 并校验是否为合法的 header 值

    合法字符：可见 ASCII、空格、制表符。

    Raises:
        ConfigError: token 含控制字符或非 ASCII 字符（错误信息不包含 token）
    """
    value = f"Bearer {token}"
    for char in value:
        if char != "\t" and not (" " <= char <= "~"):
            raise ConfigError(
                "seabird token contains characters that are not valid in a header value",
                step="token",
            )
    return value


class _BearerAuthMixin:
    """覆盖 authorization 元数据的公共逻辑"""

    def __init__(self, auth_header: str) -> None:
        self._auth_header = auth_header

    def _with_auth(self, details: grpc.aio.ClientCallDetails) -> grpc.aio.ClientCallDetails:
        # 无条件覆盖已有的 authorization
        pairs = [
            (key, value)
            for key, value in (details.metadata or ())
            if key.lower() != AUTHORIZATION_HEADER
        ]
        pairs.append((AUTHORIZATION_HEADER, self._auth_header))
        return grpc.aio.ClientCallDetails(
            method=details.method,
            timeout=details.timeout,
            metadata=grpc.aio.Metadata(*pairs),
            credentials=details.credentials,
            wait_for_ready=details.wait_for_ready,
        )


class UnaryUnaryAuthInterceptor(_BearerAuthMixin, grpc.aio.UnaryUnaryClientInterceptor):
    async def intercept_unary_unary(self, continuation, client_call_details, request):
        return await continuation(self._with_auth(client_call_details), request)


class UnaryStreamAuthInterceptor(_BearerAuthMixin, grpc.aio.UnaryStreamClientInterceptor):
    async def intercept_unary_stream(self, continuation, client_call_details, request):
        return await continuation(self._with_auth(client_call_details), request)


class StreamUnaryAuthInterceptor(_BearerAuthMixin, grpc.aio.StreamUnaryClientInterceptor):
    async def intercept_stream_unary(self, continuation, client_call_details, request_iterator):
        return await continuation(self._with_auth(client_call_details), request_iterator)


class StreamStreamAuthInterceptor(_BearerAuthMixin, grpc.aio.StreamStreamClientInterceptor):
    async def intercept_stream_stream(self, continuation, client_call_details, request_iterator):
        return await continuation(self._with_auth(client_call_details), request_iterator)


def bearer_auth_interceptors(auth_header: str) -> list[grpc.aio.ClientInterceptor]:
    """为全部四种调用类型创建鉴权拦截器

    Args:
        auth_header: format_bearer_token() 的结果
    """
    return [
        UnaryUnaryAuthInterceptor(auth_header),
        UnaryStreamAuthInterceptor(auth_header),
        StreamUnaryAuthInterceptor(auth_header),
        StreamStreamAuthInterceptor(auth_header),
    ]
