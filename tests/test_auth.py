"""Bearer 鉴权单元测试"""

import grpc
import pytest

from seabird.auth import (
    AUTHORIZATION_HEADER,
    StreamStreamAuthInterceptor,
    UnaryUnaryAuthInterceptor,
    bearer_auth_interceptors,
    format_bearer_token,
)
from seabird.exceptions import ConfigError


def _details(metadata=None) -> grpc.aio.ClientCallDetails:
    return grpc.aio.ClientCallDetails(
        method="/seabird.Seabird/SendMessage",
        timeout=3.0,
        metadata=metadata,
        credentials=None,
        wait_for_ready=None,
    )


class TestFormatBearerToken:
    def test_format(self):
        assert format_bearer_token("abc123") == "Bearer abc123"

    def test_tab_and_space_allowed(self):
        assert format_bearer_token("a b\tc") == "Bearer a b\tc"

    @pytest.mark.parametrize("token", ["abc\n", "a\rb", "\x00", "tok\x7f", "tökén"])
    def test_illegal_characters_rejected(self, token):
        with pytest.raises(ConfigError) as exc_info:
            format_bearer_token(token)
        assert exc_info.value.step == "token"
        assert token not in str(exc_info.value)


class TestBearerAuthInterceptor:
    """每次调用无条件覆盖 authorization"""

    async def test_sets_header(self):
        captured = {}

        async def continuation(details, request):
            captured["details"] = details
            return "call"

        interceptor = UnaryUnaryAuthInterceptor("Bearer t")
        result = await interceptor.intercept_unary_unary(continuation, _details(), "req")

        assert result == "call"
        assert list(captured["details"].metadata) == [(AUTHORIZATION_HEADER, "Bearer t")]
        assert captured["details"].method == "/seabird.Seabird/SendMessage"
        assert captured["details"].timeout == 3.0

    async def test_overwrites_existing_header(self):
        captured = {}

        async def continuation(details, request):
            captured["details"] = details

        metadata = grpc.aio.Metadata(("authorization", "Bearer old"), ("x-trace", "1"))
        interceptor = UnaryUnaryAuthInterceptor("Bearer new")
        await interceptor.intercept_unary_unary(continuation, _details(metadata), "req")

        pairs = list(captured["details"].metadata)
        assert ("x-trace", "1") in pairs
        assert [v for k, v in pairs if k == AUTHORIZATION_HEADER] == ["Bearer new"]

    async def test_stream_stream(self):
        captured = {}

        async def continuation(details, request_iterator):
            captured["details"] = details

        interceptor = StreamStreamAuthInterceptor("Bearer t")
        await interceptor.intercept_stream_stream(continuation, _details(), iter(()))
        assert dict(captured["details"].metadata)[AUTHORIZATION_HEADER] == "Bearer t"

    def test_all_call_types_covered(self):
        interceptors = bearer_auth_interceptors("Bearer t")
        assert any(isinstance(i, grpc.aio.UnaryUnaryClientInterceptor) for i in interceptors)
        assert any(isinstance(i, grpc.aio.UnaryStreamClientInterceptor) for i in interceptors)
        assert any(isinstance(i, grpc.aio.StreamUnaryClientInterceptor) for i in interceptors)
        assert any(isinstance(i, grpc.aio.StreamStreamClientInterceptor) for i in interceptors)
