"""Block 构建器单元测试

验证各构建方法追加的节点、归一化/反归一化规则、append/prepend 顺序。
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from seabird.block import Block, to_block, to_node
from seabird.nodes import (
    INT32_MAX,
    INT32_MIN,
    BlockquoteNode,
    BoldNode,
    ContainerNode,
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


def _text(value: str) -> TextNode:
    return TextNode(text=value)


class TestLeafNodes:
    """叶子节点构建"""

    def test_text(self):
        block = Block().text("hi")
        assert block.children == [_text("hi")]

    def test_text_accepts_numbers(self):
        block = Block().text(42)
        assert block.children == [_text("42")]

    def test_empty_text_accepted(self):
        assert Block().text("").children == [_text("")]

    def test_inline_code(self):
        assert Block().inline_code("x = 1").children == [InlineCodeNode(text="x = 1")]

    def test_fenced_code(self):
        block = Block().fenced_code("python", "print(1)")
        assert block.children == [FencedCodeNode(info="python", text="print(1)")]

    def test_fenced_code_without_info(self):
        block = Block().fenced_code("", "plain")
        assert block.children[0].info == ""

    def test_timestamp_aware(self):
        instant = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=UTC)
        node = Block().timestamp(instant).children[0]
        assert isinstance(node, TimestampNode)
        assert node.seconds == int(instant.timestamp())
        assert node.nanos == 123456000

    def test_timestamp_other_timezone_normalized(self):
        instant = datetime(2024, 1, 1, 8, 0, tzinfo=timezone(timedelta(hours=8)))
        node = Block().timestamp(instant).children[0]
        assert node.to_datetime() == datetime(2024, 1, 1, 0, 0, tzinfo=UTC)

    def test_timestamp_naive_is_utc(self):
        node = Block().timestamp(datetime(1970, 1, 1, 0, 1)).children[0]
        assert node.seconds == 60
        assert node.nanos == 0

    def test_timestamp_before_epoch_clamped(self):
        node = Block().timestamp(datetime(1960, 1, 1, tzinfo=UTC)).children[0]
        assert node.seconds == 0
        assert node.nanos == 0


class TestStructuralNodes:
    """结构型节点构建"""

    @pytest.mark.parametrize(
        ("method", "node_type"),
        [
            ("bold", BoldNode),
            ("italic", ItalicNode),
            ("underline", UnderlineNode),
            ("strikethrough", StrikethroughNode),
            ("spoiler", SpoilerNode),
            ("blockquote", BlockquoteNode),
        ],
    )
    def test_wrapper_with_string(self, method, node_type):
        block = getattr(Block(), method)("x")
        assert block.children == [node_type(inner=_text("x"))]

    def test_wrapper_with_multi_child_block_wraps_in_container(self):
        block = Block().bold(Block().text("a").text("b"))
        assert block.children == [
            BoldNode(inner=ContainerNode(items=(_text("a"), _text("b"))))
        ]

    def test_nested_formatting(self):
        block = Block().bold(Block().italic("very"))
        assert block.children == [BoldNode(inner=ItalicNode(inner=_text("very")))]

    def test_link(self):
        block = Block().link("https://example.com", "site")
        assert block.children == [LinkNode(url="https://example.com", inner=_text("site"))]

    def test_heading_level_passed_through(self):
        block = Block().heading(-7, "Title").heading(99, "Other")
        assert block.children[0] == HeadingNode(level=-7, inner=_text("Title"))
        assert block.children[1].level == 99

    @pytest.mark.parametrize("level", [INT32_MIN, INT32_MAX])
    def test_heading_level_int32_bounds_accepted(self, level):
        block = Block().heading(level, "Title")
        assert block.children[0].level == level

    @pytest.mark.parametrize("level", [INT32_MIN - 1, INT32_MAX + 1])
    def test_heading_level_outside_int32_rejected(self, level):
        """超出线上 int32 范围的 level 在构建时失败，而不是在发送时"""
        with pytest.raises(ValidationError):
            Block().heading(level, "Title")

    def test_list_preserves_order(self):
        block = Block().list(["a", Block().bold("b"), "c"])
        assert block.children == [
            ListNode(items=(_text("a"), BoldNode(inner=_text("b")), _text("c")))
        ]

    def test_empty_list(self):
        assert Block().list([]).children == [ListNode(items=())]

    def test_nested_container(self):
        block = Block().container(["a", "b"])
        assert block.children == [ContainerNode(items=(_text("a"), _text("b")))]

    def test_node_argument_passed_through(self):
        single = ContainerNode(items=(_text("only"),))
        block = Block().bold(single)
        assert block.children == [BoldNode(inner=single)]

    def test_fluent_returns_same_builder(self):
        block = Block()
        assert block.text("a") is block


class TestNormalization:
    """Block -> ContentNode"""

    def test_single_child_not_wrapped(self):
        node = Block().bold("x").to_node()
        assert node == BoldNode(inner=_text("x"))

    def test_empty_becomes_empty_container(self):
        assert Block().to_node() == ContainerNode(items=())

    def test_multiple_children_wrapped_in_order(self):
        node = Block().text("a").italic("b").text("c").to_node()
        assert node == ContainerNode(
            items=(_text("a"), ItalicNode(inner=_text("b")), _text("c"))
        )

    def test_single_container_child_not_double_wrapped(self):
        node = Block().container(["a", "b"]).to_node()
        assert node == ContainerNode(items=(_text("a"), _text("b")))


class TestDenormalization:
    """ContentNode -> Block"""

    def test_container_unwrapped_one_level(self):
        inner = ContainerNode(items=(_text("x"),))
        node = ContainerNode(items=(_text("a"), inner))
        assert Block.from_node(node).children == [_text("a"), inner]

    def test_other_node_becomes_single_child(self):
        node = BoldNode(inner=_text("x"))
        assert Block.from_node(node).children == [node]

    @pytest.mark.parametrize(
        "block",
        [
            Block(),
            Block().text("a"),
            Block().text("a").bold("b"),
            Block().container(["a"]).container(["b"]),
        ],
    )
    def test_round_trip_preserves_children(self, block):
        original = list(block.children)
        assert Block.from_node(block.to_node()).children == original

    def test_single_container_round_trip_idempotent(self):
        block = Block().container(["a", "b"])
        node = block.to_node()
        restored = Block.from_node(node)
        # 唯一的 container 子节点被展开一层，再归一化得到同一个节点
        assert restored.children == [_text("a"), _text("b")]
        assert restored.to_node() == node


class TestAppendPrepend:
    """append / prepend 顺序"""

    def test_append_containers_flattens_children(self):
        a, b, c, d = (_text(x) for x in "abcd")
        block = Block([a, b]).append(Block([c, d]))
        assert block.to_node() == ContainerNode(items=(a, b, c, d))

    def test_append_container_nodes(self):
        a, b, c, d = (_text(x) for x in "abcd")
        block = to_block(ContainerNode(items=(a, b))).append(ContainerNode(items=(c, d)))
        assert block.to_node() == ContainerNode(items=(a, b, c, d))

    def test_prepend_keeps_relative_order(self):
        block = Block().text("c").text("d").prepend(Block().text("a").text("b"))
        assert [child.text for child in block.children] == ["a", "b", "c", "d"]

    def test_append_string(self):
        block = Block().text("a").append("b")
        assert block.children == [_text("a"), _text("b")]

    def test_append_container_node_is_unwrapped(self):
        block = Block().text("a").append(ContainerNode(items=(_text("b"), _text("c"))))
        assert block.children == [_text("a"), _text("b"), _text("c")]

    def test_append_does_not_mutate_other(self):
        other = Block().text("x")
        Block().append(other).text("y")
        assert other.children == [_text("x")]


class TestCoercion:
    """to_block / to_node"""

    def test_string_to_block(self):
        assert to_block("hi") == Block().text("hi")

    def test_block_passthrough(self):
        block = Block()
        assert to_block(block) is block

    def test_node_to_block(self):
        assert to_block(_text("x")).children == [_text("x")]

    def test_to_node_multi(self):
        assert to_node(Block().text("a").text("b")) == ContainerNode(
            items=(_text("a"), _text("b"))
        )

    def test_unsupported_type_rejected(self):
        with pytest.raises(TypeError):
            to_block(3.5)


class TestBlockProtocol:
    """len / iter / eq"""

    def test_len_and_iter(self, sample_block):
        assert len(sample_block) == 3
        assert [type(node) for node in sample_block] == [TextNode, BoldNode, ListNode]

    def test_equality(self):
        assert Block().text("a") == Block().text("a")
        assert Block().text("a") != Block().text("b")
