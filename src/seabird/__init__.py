"""seabird -- seabird-chat 生态的客户端库

公开接口导出：
- Block 构建器与 ContentNode 节点模型
- SeabirdClient（bot 消息/动作）与 ChatIngestClient（事件注入）
"""

# Block 模型
from .block import Block, BlockLike, to_block
from .nodes import (
    BlockquoteNode,
    BoldNode,
    ContainerNode,
    ContentNode,
    FencedCodeNode,
    HeadingNode,
    InlineCodeNode,
    ItalicNode,
    LinkNode,
    ListNode,
    SpoilerNode,
    StrikethroughNode,
    TextNode,
    TimestampNode,
    UnderlineNode,
)
from .content import MessageContent, PlainText, StructuredBlock, to_message_content

# 客户端
from .client import ChatIngestClient, Endpoint, SeabirdClient, resolve_endpoint

# 配置
from .config import ClientConfig, load_client_config

# 异常
from .exceptions import CallError, ConfigError, SeabirdConnectionError, SeabirdError

__all__ = [
    # Block
    "Block",
    "BlockLike",
    "to_block",
    "ContentNode",
    "TextNode",
    "BoldNode",
    "ItalicNode",
    "UnderlineNode",
    "StrikethroughNode",
    "SpoilerNode",
    "BlockquoteNode",
    "InlineCodeNode",
    "FencedCodeNode",
    "LinkNode",
    "HeadingNode",
    "ListNode",
    "TimestampNode",
    "ContainerNode",
    "MessageContent",
    "PlainText",
    "StructuredBlock",
    "to_message_content",
    # 客户端
    "SeabirdClient",
    "ChatIngestClient",
    "Endpoint",
    "resolve_endpoint",
    "ClientConfig",
    "load_client_config",
    # 异常
    "SeabirdError",
    "ConfigError",
    "SeabirdConnectionError",
    "CallError",
]
