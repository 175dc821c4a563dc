"""由 ``protos/seabird/*.proto`` 生成的 protobuf / gRPC 模块，请勿手工修改

重新生成: ``scripts/gen_protos.sh``
"""
