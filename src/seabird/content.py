"""MessageContent -- 消息内容（纯文本或结构化 Block）

线上请求的 text 与 root 字段只会填其中之一：
- PlainText -> text=原文, root=None
- StructuredBlock -> text="", root=节点树
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .block import Block
from .nodes import ContentNode, is_content_node


class PlainText(BaseModel):
    """纯文本消息"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain_text"] = "plain_text"
    text: str

    def request_fields(self) -> tuple[str, ContentNode | None]:
        return self.text, None


class StructuredBlock(BaseModel):
    """结构化 Block 消息"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["structured_block"] = "structured_block"
    root: ContentNode = Field(description="归一化后的节点树")

    def request_fields(self) -> tuple[str, ContentNode | None]:
        return "", self.root


MessageContent = Union[PlainText, StructuredBlock]

# 客户端方法接受的 content 类型
ContentLike = Union[str, Block, ContentNode, PlainText, StructuredBlock]


def to_message_content(value: ContentLike) -> MessageContent:
    """把调用方传入的 content 转换为 MessageContent

    - str -> PlainText（原样保留字符串）
    - Block -> StructuredBlock(block.to_node())
    - ContentNode -> StructuredBlock(node)
    - PlainText / StructuredBlock -> 原样返回

    Raises:
        TypeError: value 不是上述类型之一
    """
    if isinstance(value, (PlainText, StructuredBlock)):
        return value
    if isinstance(value, str):
        return PlainText(text=value)
    if isinstance(value, Block):
        return StructuredBlock(root=value.to_node())
    if is_content_node(value):
        return StructuredBlock(root=value)
    raise TypeError(f"cannot convert {type(value).__name__} to MessageContent")
