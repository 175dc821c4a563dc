# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: seabird/seabird.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from . import common_pb2 as seabird_dot_common__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x15seabird/seabird.proto\x12\x07seabird\x1a\x14seabird/common.proto\"\xb5\x01\n\x12SendMessageRequest\x12\x12\n\nchannel_id\x18\x01 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12\x33\n\x04tags\x18\x05 \x03(\x0b\x32%.seabird.SendMessageRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x15\n\x13SendMessageResponse\"\xc0\x01\n\x19SendPrivateMessageRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12:\n\x04tags\x18\x05 \x03(\x0b\x32,.seabird.SendPrivateMessageRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x1c\n\x1aSendPrivateMessageResponse\"\xb9\x01\n\x14PerformActionRequest\x12\x12\n\nchannel_id\x18\x01 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12\x35\n\x04tags\x18\x05 \x03(\x0b\x32\'.seabird.PerformActionRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x17\n\x15PerformActionResponse\"\xc4\x01\n\x1bPerformPrivateActionRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12<\n\x04tags\x18\x05 \x03(\x0b\x32..seabird.PerformPrivateActionRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x1e\n\x1cPerformPrivateActionResponse2\xe7\x02\n\x07Seabird\x12H\n\x0bSendMessage\x12\x1b.seabird.SendMessageRequest\x1a\x1c.seabird.SendMessageResponse\x12]\n\x12SendPrivateMessage\x12\".seabird.SendPrivateMessageRequest\x1a#.seabird.SendPrivateMessageResponse\x12N\n\rPerformAction\x12\x1d.seabird.PerformActionRequest\x1a\x1e.seabird.PerformActionResponse\x12\x63\n\x14PerformPrivateAction\x12$.seabird.PerformPrivateActionRequest\x1a%.seabird.PerformPrivateActionResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'seabird.seabird_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _SENDMESSAGEREQUEST_TAGSENTRY._options = None
  _SENDMESSAGEREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _SENDPRIVATEMESSAGEREQUEST_TAGSENTRY._options = None
  _SENDPRIVATEMESSAGEREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _PERFORMACTIONREQUEST_TAGSENTRY._options = None
  _PERFORMACTIONREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _PERFORMPRIVATEACTIONREQUEST_TAGSENTRY._options = None
  _PERFORMPRIVATEACTIONREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _SENDMESSAGEREQUEST._serialized_start=57
  _SENDMESSAGEREQUEST._serialized_end=238
  _SENDMESSAGEREQUEST_TAGSENTRY._serialized_start=195
  _SENDMESSAGEREQUEST_TAGSENTRY._serialized_end=238
  _SENDMESSAGERESPONSE._serialized_start=240
  _SENDMESSAGERESPONSE._serialized_end=261
  _SENDPRIVATEMESSAGEREQUEST._serialized_start=264
  _SENDPRIVATEMESSAGEREQUEST._serialized_end=456
  _SENDPRIVATEMESSAGEREQUEST_TAGSENTRY._serialized_start=195
  _SENDPRIVATEMESSAGEREQUEST_TAGSENTRY._serialized_end=238
  _SENDPRIVATEMESSAGERESPONSE._serialized_start=458
  _SENDPRIVATEMESSAGERESPONSE._serialized_end=486
  _PERFORMACTIONREQUEST._serialized_start=489
  _PERFORMACTIONREQUEST._serialized_end=674
  _PERFORMACTIONREQUEST_TAGSENTRY._serialized_start=195
  _PERFORMACTIONREQUEST_TAGSENTRY._serialized_end=238
  _PERFORMACTIONRESPONSE._serialized_start=676
  _PERFORMACTIONRESPONSE._serialized_end=699
  _PERFORMPRIVATEACTIONREQUEST._serialized_start=702
  _PERFORMPRIVATEACTIONREQUEST._serialized_end=898
  _PERFORMPRIVATEACTIONREQUEST_TAGSENTRY._serialized_start=195
  _PERFORMPRIVATEACTIONREQUEST_TAGSENTRY._serialized_end=238
  _PERFORMPRIVATEACTIONRESPONSE._serialized_start=900
  _PERFORMPRIVATEACTIONRESPONSE._serialized_end=930
  _SEABIRD._serialized_start=933
  _SEABIRD._serialized_end=1292
# @@protoc_insertion_point(module_scope)
