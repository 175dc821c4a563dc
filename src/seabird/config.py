"""ClientConfig -- 客户端配置加载

SeabirdClient 与 ChatIngestClient 共用同一配置结构。
可直接构造，也可以从环境变量加载。
"""

import os

import structlog
from pydantic import BaseModel, Field, SecretStr

from .exceptions import ConfigError

log = structlog.get_logger()

DEFAULT_CONNECT_TIMEOUT_S = 10.0


class ClientConfig(BaseModel):
    """客户端配置

    环境变量:
        SEABIRD_HOST: seabird 地址（如 https://seabird.example.com）
        SEABIRD_TOKEN: bot 鉴权 token
        SEABIRD_CONNECT_TIMEOUT_S: 建立连接超时（秒，默认 10）
    """

    url: str = Field(description="seabird 服务地址，scheme 决定是否启用 TLS")
    token: SecretStr = Field(description="bot 鉴权 token，以 Bearer 方式发送")
    connect_timeout_s: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT_S,
        gt=0,
        description="建立连接超时（秒）",
    )


def load_client_config() -> ClientConfig:
    """从环境变量加载客户端配置

    环境变量映射:
        SEABIRD_HOST -> url (必填)
        SEABIRD_TOKEN -> token (必填)
        SEABIRD_CONNECT_TIMEOUT_S -> connect_timeout_s (默认 10)

    Returns:
        ClientConfig 实例

    Raises:
        ConfigError: SEABIRD_HOST 或 SEABIRD_TOKEN 未设置
    """
    url = os.environ.get("SEABIRD_HOST", "")
    if not url:
        raise ConfigError("SEABIRD_HOST is not set", step="config")

    token = os.environ.get("SEABIRD_TOKEN", "")
    if not token:
        raise ConfigError("SEABIRD_TOKEN is not set", step="config")

    kwargs: dict = {"url": url, "token": SecretStr(token)}

    if val := os.environ.get("SEABIRD_CONNECT_TIMEOUT_S"):
        try:
            timeout = float(val)
            if timeout <= 0:
                raise ValueError(val)
            kwargs["connect_timeout_s"] = timeout
        except ValueError:
            log.warning(
                "invalid_connect_timeout_config",
                env_var="SEABIRD_CONNECT_TIMEOUT_S",
                value=val,
                fallback=DEFAULT_CONNECT_TIMEOUT_S,
            )
            # 使用默认值，不阻塞启动

    return ClientConfig(**kwargs)
