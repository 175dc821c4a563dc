"""MessageContent 转换单元测试"""

import pytest

from seabird.block import Block
from seabird.content import PlainText, StructuredBlock, to_message_content
from seabird.nodes import BoldNode, ContainerNode, TextNode


class TestToMessageContent:
    def test_string_becomes_plain_text(self):
        content = to_message_content("hi there")
        assert content == PlainText(text="hi there")

    def test_empty_string_is_still_plain_text(self):
        assert to_message_content("") == PlainText(text="")

    def test_block_becomes_structured(self, sample_block):
        content = to_message_content(sample_block)
        assert isinstance(content, StructuredBlock)
        assert content.root == sample_block.to_node()

    def test_single_child_block_not_wrapped(self):
        content = to_message_content(Block().bold("x"))
        assert content.root == BoldNode(inner=TextNode(text="x"))

    def test_empty_block_is_empty_container(self):
        assert to_message_content(Block()).root == ContainerNode()

    def test_node_becomes_structured(self):
        node = TextNode(text="x")
        assert to_message_content(node) == StructuredBlock(root=node)

    def test_message_content_passthrough(self):
        content = PlainText(text="x")
        assert to_message_content(content) is content

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_message_content(123)


class TestRequestFields:
    """text 与 root 只填其中之一"""

    def test_plain_text_fields(self):
        assert PlainText(text="hi").request_fields() == ("hi", None)

    def test_structured_fields(self):
        node = TextNode(text="hi")
        assert StructuredBlock(root=node).request_fields() == ("", node)
