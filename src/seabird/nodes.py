"""ContentNode -- 富文本消息树的节点模型

以 ``kind`` 字段区分的 tagged union。每个节点都带 ``plain`` 纯文本回退字段，
结构型节点（bold/italic/...）独占一个子节点，list/container 持有有序子节点序列。
节点为 frozen 模型，交给传输层后不可再修改。
"""

from datetime import UTC, datetime, timedelta
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# HeadingBlock.level 在线上是 int32
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class _Node(BaseModel):
    """所有节点的公共字段"""

    model_config = ConfigDict(frozen=True)

    plain: str = Field(default="", description="纯文本回退，兼容不支持 Block 的后端")


class TextNode(_Node):
    """纯文本"""

    kind: Literal["text"] = "text"
    text: str


class BoldNode(_Node):
    kind: Literal["bold"] = "bold"
    inner: "ContentNode"


class ItalicNode(_Node):
    kind: Literal["italic"] = "italic"
    inner: "ContentNode"


class UnderlineNode(_Node):
    kind: Literal["underline"] = "underline"
    inner: "ContentNode"


class StrikethroughNode(_Node):
    kind: Literal["strikethrough"] = "strikethrough"
    inner: "ContentNode"


class SpoilerNode(_Node):
    kind: Literal["spoiler"] = "spoiler"
    inner: "ContentNode"


class BlockquoteNode(_Node):
    kind: Literal["blockquote"] = "blockquote"
    inner: "ContentNode"


class InlineCodeNode(_Node):
    """行内代码"""

    kind: Literal["inline_code"] = "inline_code"
    text: str


class FencedCodeNode(_Node):
    """代码块，info 为语言标识（可为空）"""

    kind: Literal["fenced_code"] = "fenced_code"
    info: str = ""
    text: str


class LinkNode(_Node):
    """链接：url + 链接文字"""

    kind: Literal["link"] = "link"
    url: str
    inner: "ContentNode"


class HeadingNode(_Node):
    """标题

    level 只限制在 int32 范围内，具体取值含义由服务端决定。
    """

    kind: Literal["heading"] = "heading"
    level: int = Field(ge=INT32_MIN, le=INT32_MAX)
    inner: "ContentNode"


class ListNode(_Node):
    """列表，items 保持插入顺序"""

    kind: Literal["list"] = "list"
    items: tuple["ContentNode", ...] = ()


class TimestampNode(_Node):
    """UTC 时间点（秒 + 纳秒）"""

    kind: Literal["timestamp"] = "timestamp"
    seconds: int = 0
    nanos: int = Field(default=0, ge=0, lt=1_000_000_000)

    def to_datetime(self) -> datetime:
        """转换为带 UTC 时区的 datetime（纳秒截断到微秒）"""
        return UNIX_EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)


class ContainerNode(_Node):
    """无格式语义的有序子节点容器"""

    kind: Literal["container"] = "container"
    items: tuple["ContentNode", ...] = ()


ContentNode = Annotated[
    Union[
        TextNode,
        BoldNode,
        ItalicNode,
        UnderlineNode,
        StrikethroughNode,
        SpoilerNode,
        BlockquoteNode,
        InlineCodeNode,
        FencedCodeNode,
        LinkNode,
        HeadingNode,
        ListNode,
        TimestampNode,
        ContainerNode,
    ],
    Field(discriminator="kind"),
]

# 所有节点类型，供 isinstance 判断和 wire 转换使用
NODE_TYPES: tuple[type[_Node], ...] = (
    TextNode,
    BoldNode,
    ItalicNode,
    UnderlineNode,
    StrikethroughNode,
    SpoilerNode,
    BlockquoteNode,
    InlineCodeNode,
    FencedCodeNode,
    LinkNode,
    HeadingNode,
    ListNode,
    TimestampNode,
    ContainerNode,
)

# 只包裹一个子节点的结构型节点
WRAPPER_TYPES: tuple[type[_Node], ...] = (
    BoldNode,
    ItalicNode,
    UnderlineNode,
    StrikethroughNode,
    SpoilerNode,
    BlockquoteNode,
)

# 递归类型需要在 ContentNode 定义后重建
for _model in NODE_TYPES:
    _model.model_rebuild()

content_node_adapter: TypeAdapter = TypeAdapter(ContentNode)


def is_content_node(value: object) -> bool:
    """判断 value 是否为 ContentNode 的某个变体"""
    return isinstance(value, NODE_TYPES)


def timestamp_from_datetime(instant: datetime) -> TimestampNode:
    """从 datetime 构造 TimestampNode

    naive datetime 视为 UTC；早于 Unix epoch 的时间点钳制到 epoch。
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    delta = instant - UNIX_EPOCH
    if delta < timedelta(0):
        delta = timedelta(0)
    seconds = delta.days * 86400 + delta.seconds
    return TimestampNode(seconds=seconds, nanos=delta.microseconds * 1000)
