# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: seabird/seabird_chat_ingest.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from . import common_pb2 as seabird_dot_common__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n!seabird/seabird_chat_ingest.proto\x12\x13seabird_chat_ingest\x1a\x14seabird/common.proto\"\xe9\x01\n\x14IngestMessageRequest\x12\x12\n\nchannel_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\x11\n\tuser_name\x18\x03 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12\x41\n\x04tags\x18\x05 \x03(\x0b\x32\x33.seabird_chat_ingest.IngestMessageRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x17\n\x15IngestMessageResponse\"\xe3\x01\n\x1bIngestPrivateMessageRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\x11\n\tuser_name\x18\x03 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12H\n\x04tags\x18\x05 \x03(\x0b\x32:.seabird_chat_ingest.IngestPrivateMessageRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x1e\n\x1cIngestPrivateMessageResponse\"\xe7\x01\n\x13IngestActionRequest\x12\x12\n\nchannel_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\x11\n\tuser_name\x18\x03 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12@\n\x04tags\x18\x05 \x03(\x0b\x32\x32.seabird_chat_ingest.IngestActionRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x16\n\x14IngestActionResponse\"\xe1\x01\n\x1aIngestPrivateActionRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\x11\n\tuser_name\x18\x03 \x01(\t\x12\x0c\n\x04text\x18\x04 \x01(\t\x12G\n\x04tags\x18\x05 \x03(\x0b\x32\x39.seabird_chat_ingest.IngestPrivateActionRequest.TagsEntry\x12\x1b\n\x04root\x18\x06 \x01(\x0b\x32\r.common.Block\x1a+\n\tTagsEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"\x1d\n\x1bIngestPrivateActionResponse2\xd0\x03\n\nChatIngest\x12\x66\n\rIngestMessage\x12).seabird_chat_ingest.IngestMessageRequest\x1a*.seabird_chat_ingest.IngestMessageResponse\x12{\n\x14IngestPrivateMessage\x12\x30.seabird_chat_ingest.IngestPrivateMessageRequest\x1a\x31.seabird_chat_ingest.IngestPrivateMessageResponse\x12\x63\n\x0cIngestAction\x12(.seabird_chat_ingest.IngestActionRequest\x1a).seabird_chat_ingest.IngestActionResponse\x12x\n\x13IngestPrivateAction\x12/.seabird_chat_ingest.IngestPrivateActionRequest\x1a\x30.seabird_chat_ingest.IngestPrivateActionResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'seabird.seabird_chat_ingest_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _INGESTMESSAGEREQUEST_TAGSENTRY._options = None
  _INGESTMESSAGEREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _INGESTPRIVATEMESSAGEREQUEST_TAGSENTRY._options = None
  _INGESTPRIVATEMESSAGEREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _INGESTACTIONREQUEST_TAGSENTRY._options = None
  _INGESTACTIONREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _INGESTPRIVATEACTIONREQUEST_TAGSENTRY._options = None
  _INGESTPRIVATEACTIONREQUEST_TAGSENTRY._serialized_options = b'8\001'
  _INGESTMESSAGEREQUEST._serialized_start=81
  _INGESTMESSAGEREQUEST._serialized_end=314
  _INGESTMESSAGEREQUEST_TAGSENTRY._serialized_start=271
  _INGESTMESSAGEREQUEST_TAGSENTRY._serialized_end=314
  _INGESTMESSAGERESPONSE._serialized_start=316
  _INGESTMESSAGERESPONSE._serialized_end=339
  _INGESTPRIVATEMESSAGEREQUEST._serialized_start=342
  _INGESTPRIVATEMESSAGEREQUEST._serialized_end=569
  _INGESTPRIVATEMESSAGEREQUEST_TAGSENTRY._serialized_start=271
  _INGESTPRIVATEMESSAGEREQUEST_TAGSENTRY._serialized_end=314
  _INGESTPRIVATEMESSAGERESPONSE._serialized_start=571
  _INGESTPRIVATEMESSAGERESPONSE._serialized_end=601
  _INGESTACTIONREQUEST._serialized_start=604
  _INGESTACTIONREQUEST._serialized_end=835
  _INGESTACTIONREQUEST_TAGSENTRY._serialized_start=271
  _INGESTACTIONREQUEST_TAGSENTRY._serialized_end=314
  _INGESTACTIONRESPONSE._serialized_start=837
  _INGESTACTIONRESPONSE._serialized_end=859
  _INGESTPRIVATEACTIONREQUEST._serialized_start=862
  _INGESTPRIVATEACTIONREQUEST._serialized_end=1087
  _INGESTPRIVATEACTIONREQUEST_TAGSENTRY._serialized_start=271
  _INGESTPRIVATEACTIONREQUEST_TAGSENTRY._serialized_end=314
  _INGESTPRIVATEACTIONRESPONSE._serialized_start=1089
  _INGESTPRIVATEACTIONRESPONSE._serialized_end=1118
  _CHATINGEST._serialized_start=1121
  _CHATINGEST._serialized_end=1585
# @@protoc_insertion_point(module_scope)
