"""ContentNode <-> protobuf 转换，以及 RPC 请求构建

节点类型与 common.Block 的 oneof 字段一一对应，转换两个方向都穷举全部变体。
"""

from collections.abc import Mapping

from . import proto
from .content import ContentLike, to_message_content
from .nodes import (
    WRAPPER_TYPES,
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

# 节点类型 -> common.Block.inner oneof 字段名
ONEOF_FIELD_BY_NODE: dict[type, str] = {
    TextNode: "text",
    BoldNode: "bold",
    ItalicNode: "italics",
    UnderlineNode: "underline",
    StrikethroughNode: "strikethrough",
    SpoilerNode: "spoiler",
    BlockquoteNode: "blockquote",
    InlineCodeNode: "inline_code",
    FencedCodeNode: "fenced_code",
    LinkNode: "link",
    HeadingNode: "heading",
    ListNode: "list",
    TimestampNode: "timestamp",
    ContainerNode: "container",
}

NODE_BY_ONEOF_FIELD: dict[str, type] = {v: k for k, v in ONEOF_FIELD_BY_NODE.items()}


def node_to_proto(node: ContentNode):
    """ContentNode -> common.Block

    Raises:
        TypeError: node 不是 ContentNode
    """
    try:
        field = ONEOF_FIELD_BY_NODE[type(node)]
    except KeyError:
        raise TypeError(f"not a content node: {type(node).__name__}") from None

    message = proto.Block(plain=node.plain)
    inner = getattr(message, field)
    # 空的子消息也要选中 oneof 分支（如空 container、空文本）
    inner.SetInParent()

    if isinstance(node, (TextNode, InlineCodeNode)):
        inner.text = node.text
    elif isinstance(node, FencedCodeNode):
        inner.info = node.info
        inner.text = node.text
    elif isinstance(node, WRAPPER_TYPES):
        inner.inner.CopyFrom(node_to_proto(node.inner))
    elif isinstance(node, LinkNode):
        inner.url = node.url
        inner.inner.CopyFrom(node_to_proto(node.inner))
    elif isinstance(node, HeadingNode):
        inner.level = node.level
        inner.inner.CopyFrom(node_to_proto(node.inner))
    elif isinstance(node, (ListNode, ContainerNode)):
        inner.inner.extend([node_to_proto(item) for item in node.items])
    elif isinstance(node, TimestampNode):
        inner.inner.seconds = node.seconds
        inner.inner.nanos = node.nanos
    return message


def node_from_proto(message) -> ContentNode:
    """common.Block -> ContentNode

    未设置 oneof 的 Block（旧版本后端只填 plain）解码为空 container，保留 plain。
    """
    plain = message.plain
    field = message.WhichOneof("inner")
    if field is None:
        return ContainerNode(plain=plain)

    node_type = NODE_BY_ONEOF_FIELD[field]
    inner = getattr(message, field)

    if node_type in (TextNode, InlineCodeNode):
        return node_type(plain=plain, text=inner.text)
    if node_type is FencedCodeNode:
        return FencedCodeNode(plain=plain, info=inner.info, text=inner.text)
    if node_type in WRAPPER_TYPES:
        return node_type(plain=plain, inner=node_from_proto(inner.inner))
    if node_type is LinkNode:
        return LinkNode(plain=plain, url=inner.url, inner=node_from_proto(inner.inner))
    if node_type is HeadingNode:
        return HeadingNode(plain=plain, level=inner.level, inner=node_from_proto(inner.inner))
    if node_type in (ListNode, ContainerNode):
        return node_type(plain=plain, items=tuple(node_from_proto(item) for item in inner.inner))
    return TimestampNode(plain=plain, seconds=inner.inner.seconds, nanos=inner.inner.nanos)


def build_request(
    request_type,
    content: ContentLike,
    tags: Mapping[str, str] | None = None,
    **fields: str,
):
    """构建 RPC 请求

    text 与 root 只填其中之一；tags 为 None 时发送空 map。

    Args:
        request_type: proto 请求消息类型（如 proto.SendMessageRequest）
        content: 纯文本或 Block 节点树
        tags: 元数据标签
        **fields: 请求上的 id 字段（channel_id / user_id / user_name）
    """
    text, root = to_message_content(content).request_fields()
    request = request_type(text=text, tags=dict(tags or {}), **fields)
    if root is not None:
        request.root.CopyFrom(node_to_proto(root))
    return request
