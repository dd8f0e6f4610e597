"""AWS IoT Analytics client (restJson1).

Unlike the other bundled services, every IoT Analytics operation has its
own HTTP binding: verb, path template and query string members.
"""

from ..core import BaseServiceClient, MemberCase, OperationSpec, Protocol, ServiceModels, ServiceSpec, SpanPolicy

_PAGING = {"NextToken": "nextToken", "MaxResults": "maxResults"}

SERVICE = ServiceSpec(
    service_name="iotanalytics",
    client_name="IoTAnalytics",
    endpoint_prefix="iotanalytics",
    protocol=Protocol.REST_JSON_1,
    member_case=MemberCase.CAMEL,
    span_policy=SpanPolicy.ALL,
    operations=(
        OperationSpec("BatchPutMessage", "POST", path="/messages/batch"),
        OperationSpec(
            "CancelPipelineReprocessing",
            "DELETE",
            required=("PipelineName", "ReprocessingId"),
            path="/pipelines/{PipelineName}/reprocessing/{ReprocessingId}",
        ),
        OperationSpec("CreateChannel", "POST", path="/channels"),
        OperationSpec("CreateDataset", "POST", path="/datasets"),
        OperationSpec(
            "CreateDatasetContent",
            "POST",
            required=("DatasetName",),
            path="/datasets/{DatasetName}/content",
        ),
        OperationSpec("CreateDatastore", "POST", path="/datastores"),
        OperationSpec("CreatePipeline", "POST", path="/pipelines"),
        OperationSpec("DeleteChannel", "DELETE", required=("ChannelName",), path="/channels/{ChannelName}"),
        OperationSpec("DeleteDataset", "DELETE", required=("DatasetName",), path="/datasets/{DatasetName}"),
        OperationSpec(
            "DeleteDatasetContent",
            "DELETE",
            required=("DatasetName",),
            path="/datasets/{DatasetName}/content",
            query={"VersionId": "versionId"},
        ),
        OperationSpec(
            "DeleteDatastore", "DELETE", required=("DatastoreName",), path="/datastores/{DatastoreName}"
        ),
        OperationSpec("DeletePipeline", "DELETE", required=("PipelineName",), path="/pipelines/{PipelineName}"),
        OperationSpec(
            "DescribeChannel",
            "GET",
            required=("ChannelName",),
            path="/channels/{ChannelName}",
            query={"IncludeStatistics": "includeStatistics"},
        ),
        OperationSpec("DescribeDataset", "GET", required=("DatasetName",), path="/datasets/{DatasetName}"),
        OperationSpec(
            "DescribeDatastore",
            "GET",
            required=("DatastoreName",),
            path="/datastores/{DatastoreName}",
            query={"IncludeStatistics": "includeStatistics"},
        ),
        OperationSpec("DescribeLoggingOptions", "GET", path="/logging"),
        OperationSpec("DescribePipeline", "GET", required=("PipelineName",), path="/pipelines/{PipelineName}"),
        OperationSpec(
            "GetDatasetContent",
            "GET",
            required=("DatasetName",),
            path="/datasets/{DatasetName}/content",
            query={"VersionId": "versionId"},
        ),
        OperationSpec("ListChannels", "GET", path="/channels", query=_PAGING),
        OperationSpec(
            "ListDatasetContents",
            "GET",
            required=("DatasetName",),
            path="/datasets/{DatasetName}/contents",
            query={
                **_PAGING,
                "ScheduledOnOrAfter": "scheduledOnOrAfter",
                "ScheduledBefore": "scheduledBefore",
            },
        ),
        OperationSpec("ListDatasets", "GET", path="/datasets", query=_PAGING),
        OperationSpec("ListDatastores", "GET", path="/datastores", query=_PAGING),
        OperationSpec("ListPipelines", "GET", path="/pipelines", query=_PAGING),
        OperationSpec(
            "ListTagsForResource",
            "GET",
            required=("ResourceArn",),
            path="/tags",
            query={"ResourceArn": "resourceArn"},
        ),
        OperationSpec("PutLoggingOptions", "PUT", path="/logging"),
        OperationSpec("RunPipelineActivity", "POST", path="/pipelineactivities/run"),
        OperationSpec(
            "SampleChannelData",
            "GET",
            required=("ChannelName",),
            path="/channels/{ChannelName}/sample",
            query={"MaxMessages": "maxMessages", "StartTime": "startTime", "EndTime": "endTime"},
        ),
        OperationSpec(
            "StartPipelineReprocessing",
            "POST",
            required=("PipelineName",),
            path="/pipelines/{PipelineName}/reprocessing",
        ),
        OperationSpec(
            "TagResource",
            "POST",
            required=("ResourceArn",),
            path="/tags",
            query={"ResourceArn": "resourceArn"},
        ),
        OperationSpec(
            "UntagResource",
            "DELETE",
            required=("ResourceArn", "TagKeys"),
            path="/tags",
            query={"ResourceArn": "resourceArn", "TagKeys": "tagKeys"},
        ),
        OperationSpec("UpdateChannel", "PUT", required=("ChannelName",), path="/channels/{ChannelName}"),
        OperationSpec("UpdateDataset", "PUT", required=("DatasetName",), path="/datasets/{DatasetName}"),
        OperationSpec(
            "UpdateDatastore", "PUT", required=("DatastoreName",), path="/datastores/{DatastoreName}"
        ),
        OperationSpec("UpdatePipeline", "PUT", required=("PipelineName",), path="/pipelines/{PipelineName}"),
    ),
)

models = ServiceModels(SERVICE, __name__)


class IoTAnalyticsClient(BaseServiceClient):
    """Client for AWS IoT Analytics."""

    service = SERVICE
    models = models
