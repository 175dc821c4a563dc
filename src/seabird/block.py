"""Block -- 消息 Block 构建器

按插入顺序暂存 ContentNode，再归一化为一棵可上线的节点树。

示例::

    # 简单文本 + 格式
    block = Block().text("Hello ").bold("world").text("!")

    # 嵌套格式
    block = Block().text("This is ").bold(Block().italic("very").text(" important"))

    # 列表
    block = Block().text("My list:").list(["Item 1", "Item 2", "Item 3"])

    # append / prepend 拼接
    block = Block().append(Block().heading(1, "Title")).append(Block().text("Content"))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Union

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
    UnderlineNode,
    is_content_node,
    timestamp_from_datetime,
)

# 可以转换为 Block 的值：字符串、Block 或单个节点
BlockLike = Union[str, "Block", ContentNode]


class Block:
    """消息 Block 构建器

    只持有 children 列表，本身不是线上类型。每个构建方法追加一个节点并返回
    self，便于链式调用。空字符串等内容原样接受，由服务端负责校验；
    唯一的本地约束是 heading level 必须落在线上 int32 范围内。
    """

    __slots__ = ("children",)

    def __init__(self, children: Iterable[ContentNode] | None = None) -> None:
        self.children: list[ContentNode] = list(children) if children is not None else []

    # ------------------------------------------------------------------
    # 归一化 / 反归一化
    # ------------------------------------------------------------------

    def to_node(self) -> ContentNode:
        """归一化为单个节点

        恰好一个子节点时直接返回该节点，否则（0 个或多个）包裹为 ContainerNode。
        """
        if len(self.children) == 1:
            return self.children[0]
        return ContainerNode(items=tuple(self.children))

    @classmethod
    def from_node(cls, node: ContentNode) -> Block:
        """从节点反归一化

        ContainerNode 展开一层作为 children，其他节点成为唯一的 child。
        """
        if isinstance(node, ContainerNode):
            return cls(node.items)
        return cls([node])

    # ------------------------------------------------------------------
    # 拼接
    # ------------------------------------------------------------------

    def append(self, other: BlockLike) -> Block:
        """把另一个 Block 的 children 追加到末尾"""
        self.children.extend(to_block(other).children)
        return self

    def prepend(self, other: BlockLike) -> Block:
        """把另一个 Block 的 children 插入到开头"""
        self.children[:0] = to_block(other).children
        return self

    # ------------------------------------------------------------------
    # 叶子节点
    # ------------------------------------------------------------------

    def text(self, text: object) -> Block:
        self.children.append(TextNode(text=str(text)))
        return self

    def inline_code(self, text: object) -> Block:
        self.children.append(InlineCodeNode(text=str(text)))
        return self

    def fenced_code(self, info: object, text: object) -> Block:
        """代码块，info 为语言标识，可以为空字符串"""
        self.children.append(FencedCodeNode(info=str(info), text=str(text)))
        return self

    def timestamp(self, instant: datetime) -> Block:
        """时间点，naive datetime 视为 UTC"""
        self.children.append(timestamp_from_datetime(instant))
        return self

    # ------------------------------------------------------------------
    # 结构型节点
    # ------------------------------------------------------------------

    def bold(self, content: BlockLike) -> Block:
        self.children.append(BoldNode(inner=to_node(content)))
        return self

    def italic(self, content: BlockLike) -> Block:
        self.children.append(ItalicNode(inner=to_node(content)))
        return self

    def underline(self, content: BlockLike) -> Block:
        self.children.append(UnderlineNode(inner=to_node(content)))
        return self

    def strikethrough(self, content: BlockLike) -> Block:
        self.children.append(StrikethroughNode(inner=to_node(content)))
        return self

    def spoiler(self, content: BlockLike) -> Block:
        self.children.append(SpoilerNode(inner=to_node(content)))
        return self

    def blockquote(self, content: BlockLike) -> Block:
        self.children.append(BlockquoteNode(inner=to_node(content)))
        return self

    def link(self, url: str, content: BlockLike) -> Block:
        self.children.append(LinkNode(url=url, inner=to_node(content)))
        return self

    def heading(self, level: int, content: BlockLike) -> Block:
        """标题，level 原样透传

        Raises:
            pydantic.ValidationError: level 超出 int32 范围
        """
        self.children.append(HeadingNode(level=level, inner=to_node(content)))
        return self

    def list(self, items: Iterable[BlockLike]) -> Block:
        """列表，每个 item 归一化后按输入顺序保存"""
        self.children.append(ListNode(items=tuple(to_node(item) for item in items)))
        return self

    def container(self, items: Iterable[BlockLike]) -> Block:
        """嵌套 container，顺序规则同 list"""
        self.children.append(ContainerNode(items=tuple(to_node(item) for item in items)))
        return self

    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[ContentNode]:
        return iter(self.children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self.children == other.children

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Block(children={self.children!r})"


def to_block(value: BlockLike) -> Block:
    """把 BlockLike 转换为 Block

    - str: 单个 TextNode
    - Block: 原样返回
    - ContentNode: 按反归一化规则展开

    Raises:
        TypeError: value 不是上述类型之一
    """
    if isinstance(value, Block):
        return value
    if isinstance(value, str):
        return Block().text(value)
    if is_content_node(value):
        return Block.from_node(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Block")


def to_node(value: BlockLike) -> ContentNode:
    """把 BlockLike 转换为归一化后的节点

    单个节点原样返回，不经过展开再归一化（单子节点 container 保持不变）。
    """
    if is_content_node(value):
        return value
    return to_block(value).to_node()
