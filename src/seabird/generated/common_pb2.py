# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: seabird/common.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from google.protobuf import timestamp_pb2 as google_dot_protobuf_dot_timestamp__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x14seabird/common.proto\x12\x06\x63ommon\x1a\x1fgoogle/protobuf/timestamp.proto\"\xf1\x04\n\x05\x42lock\x12\r\n\x05plain\x18\x01 \x01(\t\x12!\n\x04text\x18\x02 \x01(\x0b\x32\x11.common.TextBlockH\x00\x12!\n\x04\x62old\x18\x03 \x01(\x0b\x32\x11.common.BoldBlockH\x00\x12\'\n\x07italics\x18\x04 \x01(\x0b\x32\x14.common.ItalicsBlockH\x00\x12+\n\tunderline\x18\x05 \x01(\x0b\x32\x16.common.UnderlineBlockH\x00\x12\x33\n\rstrikethrough\x18\x06 \x01(\x0b\x32\x1a.common.StrikethroughBlockH\x00\x12\'\n\x07spoiler\x18\x07 \x01(\x0b\x32\x14.common.SpoilerBlockH\x00\x12-\n\nblockquote\x18\x08 \x01(\x0b\x32\x17.common.BlockquoteBlockH\x00\x12.\n\x0binline_code\x18\t \x01(\x0b\x32\x17.common.InlineCodeBlockH\x00\x12.\n\x0b\x66\x65nced_code\x18\n \x01(\x0b\x32\x17.common.FencedCodeBlockH\x00\x12!\n\x04link\x18\x0b \x01(\x0b\x32\x11.common.LinkBlockH\x00\x12\'\n\x07heading\x18\x0c \x01(\x0b\x32\x14.common.HeadingBlockH\x00\x12!\n\x04list\x18\r \x01(\x0b\x32\x11.common.ListBlockH\x00\x12+\n\ttimestamp\x18\x0e \x01(\x0b\x32\x16.common.TimestampBlockH\x00\x12+\n\tcontainer\x18\x0f \x01(\x0b\x32\x16.common.ContainerBlockH\x00\x42\x07\n\x05inner\"\x19\n\tTextBlock\x12\x0c\n\x04text\x18\x01 \x01(\t\")\n\tBoldBlock\x12\x1c\n\x05inner\x18\x01 \x01(\x0b\x32\r.common.Block\",\n\x0cItalicsBlock\x12\x1c\n\x05inner\x18\x01 \x01(\x0b\x32\r.common.Block\".\n\x0eUnderlineBlock\x12\x1c\n\x05inner\x18\x01 \x01(\x0b\x32\r.common.Block\"2\n\x12StrikethroughBlock\x12\x1c\n\x05inner\x18\x01 \x01(\x0b\x32\r.common.Block\",\n\x0cSpoilerBlock\x12\x1c\n\x05inner\x18\x01 \x01(\x0b\x32\r.common.Block\"/\n\x0f\x42lockquoteBlock\x12\x1c\n\x05inner\x18\x01 \x01(\x0b\x32\r.common.Block\"\x1f\n\x0fInlineCodeBlock\x12\x0c\n\x04text\x18\x01 \x01(\t\"-\n\x0f\x46\x65ncedCodeBlock\x12\x0c\n\x04info\x18\x01 \x01(\t\x12\x0c\n\x04text\x18\x02 \x01(\t\"6\n\tLinkBlock\x12\x0b\n\x03url\x18\x01 \x01(\t\x12\x1c\n\x05inner\x18\x02 \x01(\x0b\x32\r.common.Block\";\n\x0cHeadingBlock\x12\r\n\x05level\x18\x01 \x01(\x05\x12\x1c\n\x05inner\x18\x02 \x01(\x0b\x32\r.common.Block\")\n\tListBlock\x12\x1c\n\x05inner\x18\x01 \x03(\x0b\x32\r.common.Block\";\n\x0eTimestampBlock\x12)\n\x05inner\x18\x01 \x01(\x0b\x32\x1a.google.protobuf.Timestamp\".\n\x0e\x43ontainerBlock\x12\x1c\n\x05inner\x18\x01 \x03(\x0b\x32\r.common.Blockb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'seabird.common_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _BLOCK._serialized_start=66
  _BLOCK._serialized_end=691
  _TEXTBLOCK._serialized_start=693
  _TEXTBLOCK._serialized_end=718
  _BOLDBLOCK._serialized_start=720
  _BOLDBLOCK._serialized_end=761
  _ITALICSBLOCK._serialized_start=763
  _ITALICSBLOCK._serialized_end=807
  _UNDERLINEBLOCK._serialized_start=809
  _UNDERLINEBLOCK._serialized_end=855
  _STRIKETHROUGHBLOCK._serialized_start=857
  _STRIKETHROUGHBLOCK._serialized_end=907
  _SPOILERBLOCK._serialized_start=909
  _SPOILERBLOCK._serialized_end=953
  _BLOCKQUOTEBLOCK._serialized_start=955
  _BLOCKQUOTEBLOCK._serialized_end=1002
  _INLINECODEBLOCK._serialized_start=1004
  _INLINECODEBLOCK._serialized_end=1035
  _FENCEDCODEBLOCK._serialized_start=1037
  _FENCEDCODEBLOCK._serialized_end=1082
  _LINKBLOCK._serialized_start=1084
  _LINKBLOCK._serialized_end=1138
  _HEADINGBLOCK._serialized_start=1140
  _HEADINGBLOCK._serialized_end=1199
  _LISTBLOCK._serialized_start=1201
  _LISTBLOCK._serialized_end=1242
  _TIMESTAMPBLOCK._serialized_start=1244
  _TIMESTAMPBLOCK._serialized_end=1303
  _CONTAINERBLOCK._serialized_start=1305
  _CONTAINERBLOCK._serialized_end=1351
# @@protoc_insertion_point(module_scope)
