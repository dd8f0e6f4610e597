"""Amazon Redshift Serverless client (awsJson1_1)."""

from ..core import BaseServiceClient, MemberCase, Protocol, ServiceModels, ServiceSpec, SpanPolicy
from ..core.operations import json_operations

SERVICE = ServiceSpec(
    service_name="redshift-serverless",
    client_name="Redshift Serverless",
    endpoint_prefix="redshift-serverless",
    protocol=Protocol.AWS_JSON_1_1,
    target_prefix="RedshiftServerless",
    member_case=MemberCase.CAMEL,
    span_policy=SpanPolicy.NONE,
    operations=json_operations(
        "ConvertRecoveryPointToSnapshot",
        "CreateEndpointAccess",
        "CreateNamespace",
        "CreateSnapshot",
        "CreateUsageLimit",
        "CreateWorkgroup",
        "DeleteEndpointAccess",
        "DeleteNamespace",
        "DeleteResourcePolicy",
        "DeleteSnapshot",
        "DeleteUsageLimit",
        "DeleteWorkgroup",
        "GetCredentials",
        "GetEndpointAccess",
        "GetNamespace",
        "GetRecoveryPoint",
        "GetResourcePolicy",
        "GetSnapshot",
        "GetTableRestoreStatus",
        "GetUsageLimit",
        "GetWorkgroup",
        "ListEndpointAccess",
        "ListNamespaces",
        "ListRecoveryPoints",
        "ListSnapshots",
        "ListTableRestoreStatus",
        "ListTagsForResource",
        "ListUsageLimits",
        "ListWorkgroups",
        "PutResourcePolicy",
        "RestoreFromRecoveryPoint",
        "RestoreFromSnapshot",
        "RestoreTableFromSnapshot",
        "TagResource",
        "UntagResource",
        "UpdateEndpointAccess",
        "UpdateNamespace",
        "UpdateSnapshot",
        "UpdateUsageLimit",
        "UpdateWorkgroup",
    ),
)

models = ServiceModels(SERVICE, __name__)


class RedshiftServerlessClient(BaseServiceClient):
    """Client for Amazon Redshift Serverless."""

    service = SERVICE
    models = models
