"""seabird 线上协议 -- protobuf 消息与 gRPC stub 的统一入口

消息与 stub 由 ``protos/seabird/*.proto`` 经 grpcio-tools 生成到 ``generated/``，
这里只做重新导出，上层模块不直接依赖生成代码的模块布局。

- seabird/common.proto: Block 节点树（package common）
- seabird/seabird.proto: Seabird bot 服务（package seabird）
- seabird/seabird_chat_ingest.proto: ChatIngest 事件注入服务
"""

from .generated import seabird_chat_ingest_pb2, seabird_pb2
from .generated.common_pb2 import (
    Block,
    BlockquoteBlock,
    BoldBlock,
    ContainerBlock,
    FencedCodeBlock,
    HeadingBlock,
    InlineCodeBlock,
    ItalicsBlock,
    LinkBlock,
    ListBlock,
    SpoilerBlock,
    StrikethroughBlock,
    TextBlock,
    TimestampBlock,
    UnderlineBlock,
)
from .generated.seabird_chat_ingest_pb2 import (
    IngestActionRequest,
    IngestActionResponse,
    IngestMessageRequest,
    IngestMessageResponse,
    IngestPrivateActionRequest,
    IngestPrivateActionResponse,
    IngestPrivateMessageRequest,
    IngestPrivateMessageResponse,
)
from .generated.seabird_chat_ingest_pb2_grpc import (
    ChatIngestServicer,
    ChatIngestStub,
    add_ChatIngestServicer_to_server,
)
from .generated.seabird_pb2 import (
    PerformActionRequest,
    PerformActionResponse,
    PerformPrivateActionRequest,
    PerformPrivateActionResponse,
    SendMessageRequest,
    SendMessageResponse,
    SendPrivateMessageRequest,
    SendPrivateMessageResponse,
)
from .generated.seabird_pb2_grpc import (
    SeabirdServicer,
    SeabirdStub,
    add_SeabirdServicer_to_server,
)

SEABIRD_SERVICE = seabird_pb2.DESCRIPTOR.services_by_name["Seabird"].full_name
CHAT_INGEST_SERVICE = seabird_chat_ingest_pb2.DESCRIPTOR.services_by_name["ChatIngest"].full_name

# 高层客户端持有的原始 stub 类型
ServiceStub = SeabirdStub | ChatIngestStub

__all__ = [
    # common
    "Block",
    "BlockquoteBlock",
    "BoldBlock",
    "ContainerBlock",
    "FencedCodeBlock",
    "HeadingBlock",
    "InlineCodeBlock",
    "ItalicsBlock",
    "LinkBlock",
    "ListBlock",
    "SpoilerBlock",
    "StrikethroughBlock",
    "TextBlock",
    "TimestampBlock",
    "UnderlineBlock",
    # seabird
    "SEABIRD_SERVICE",
    "PerformActionRequest",
    "PerformActionResponse",
    "PerformPrivateActionRequest",
    "PerformPrivateActionResponse",
    "SendMessageRequest",
    "SendMessageResponse",
    "SendPrivateMessageRequest",
    "SendPrivateMessageResponse",
    "SeabirdServicer",
    "SeabirdStub",
    "add_SeabirdServicer_to_server",
    # seabird_chat_ingest
    "CHAT_INGEST_SERVICE",
    "IngestActionRequest",
    "IngestActionResponse",
    "IngestMessageRequest",
    "IngestMessageResponse",
    "IngestPrivateActionRequest",
    "IngestPrivateActionResponse",
    "IngestPrivateMessageRequest",
    "IngestPrivateMessageResponse",
    "ChatIngestServicer",
    "ChatIngestStub",
    "add_ChatIngestServicer_to_server",
    # 类型
    "ServiceStub",
]
