"""seabird 异常体系

构造期错误（ConfigError / SeabirdConnectionError）与调用期错误（CallError）
统一继承 SeabirdError。所有包装异常都通过 ``raise ... from e`` 保留原始异常链。
"""


class SeabirdError(Exception):
    """seabird 包基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方重试或重建客户端后是否可能恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class ConfigError(SeabirdError):
    """配置错误（URL 格式非法、token 含非法字符、必填项缺失）

    构造阶段立即抛出，不可重试。
    """

    def __init__(self, message: str, step: str = "config") -> None:
        """
        Args:
            message: 错误描述（不包含 token 原文）
            step: 出错的构造步骤：url / token / config
        """
        super().__init__(message, recoverable=False)
        self.step = step


class SeabirdConnectionError(SeabirdError, ConnectionError):
    """连接 seabird 失败（不可达、TLS 握手失败、连接超时）

    同时是内置 ConnectionError 的子类，方便调用方按标准库类型捕获。
    """

    def __init__(self, target: str, original_error: BaseException) -> None:
        """
        Args:
            target: 尝试连接的 host:port
            original_error: 原始异常
        """
        super().__init__(
            f"Failed to connect to seabird at {target} -- {original_error!r}",
            recoverable=True,
        )
        self.target = target
        self.original_error = original_error


class CallError(SeabirdError):
    """远程调用失败（传输层或服务端返回错误）

    所有 RPC 方法统一抛出此异常，不附带重试或去重语义。
    """

    def __init__(
        self,
        method: str,
        code: str,
        details: str,
        original_error: BaseException | None = None,
    ) -> None:
        """
        Args:
            method: 失败的 RPC 方法全名（如 /seabird.Seabird/SendMessage）
            code: gRPC 状态码名称（如 UNAVAILABLE）
            details: 服务端返回的错误详情
            original_error: 原始异常
        """
        super().__init__(f"{method} failed: {code} {details}".rstrip(), recoverable=True)
        self.method = method
        self.code = code
        self.details = details
        self.original_error = original_error
