"""AWS Direct Connect client (awsJson1_1)."""

from ..core import BaseServiceClient, MemberCase, Protocol, ServiceModels, ServiceSpec, SpanPolicy
from ..core.operations import json_operations

SERVICE = ServiceSpec(
    service_name="directconnect",
    client_name="Direct Connect",
    endpoint_prefix="directconnect",
    protocol=Protocol.AWS_JSON_1_1,
    target_prefix="OvertureService",
    member_case=MemberCase.CAMEL,
    span_policy=SpanPolicy.PARAMETERLESS,
    operations=json_operations(
        "AcceptDirectConnectGatewayAssociationProposal",
        "AllocateHostedConnection",
        "AllocatePrivateVirtualInterface",
        "AllocatePublicVirtualInterface",
        "AllocateTransitVirtualInterface",
        "AssociateConnectionWithLag",
        "AssociateHostedConnection",
        "AssociateMacSecKey",
        "AssociateVirtualInterface",
        "ConfirmConnection",
        "ConfirmCustomerAgreement",
        "ConfirmPrivateVirtualInterface",
        "ConfirmPublicVirtualInterface",
        "ConfirmTransitVirtualInterface",
        "CreateBGPPeer",
        "CreateConnection",
        "CreateDirectConnectGateway",
        "CreateDirectConnectGatewayAssociation",
        "CreateDirectConnectGatewayAssociationProposal",
        "CreateInterconnect",
        "CreateLag",
        "CreatePrivateVirtualInterface",
        "CreatePublicVirtualInterface",
        "CreateTransitVirtualInterface",
        "DeleteBGPPeer",
        "DeleteConnection",
        "DeleteDirectConnectGateway",
        "DeleteDirectConnectGatewayAssociation",
        "DeleteDirectConnectGatewayAssociationProposal",
        "DeleteInterconnect",
        "DeleteLag",
        "DeleteVirtualInterface",
        "DescribeConnections",
        "DescribeCustomerMetadata",
        "DescribeDirectConnectGatewayAssociationProposals",
        "DescribeDirectConnectGatewayAssociations",
        "DescribeDirectConnectGatewayAttachments",
        "DescribeDirectConnectGateways",
        "DescribeHostedConnections",
        "DescribeInterconnects",
        "DescribeLags",
        "DescribeLoa",
        "DescribeLocations",
        "DescribeRouterConfiguration",
        "DescribeTags",
        "DescribeVirtualGateways",
        "DescribeVirtualInterfaces",
        "DisassociateConnectionFromLag",
        "DisassociateMacSecKey",
        "ListVirtualInterfaceTestHistory",
        "StartBgpFailoverTest",
        "StopBgpFailoverTest",
        "TagResource",
        "UntagResource",
        "UpdateConnection",
        "UpdateDirectConnectGateway",
        "UpdateDirectConnectGatewayAssociation",
        "UpdateLag",
        "UpdateVirtualInterfaceAttributes",
        parameterless=("DescribeCustomerMetadata", "DescribeLocations", "DescribeVirtualGateways"),
    ),
)

models = ServiceModels(SERVICE, __name__)


class DirectConnectClient(BaseServiceClient):
    """Client for AWS Direct Connect."""

    service = SERVICE
    models = models
