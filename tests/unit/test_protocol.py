"""
Unit tests for request serialization and response parsing.
"""

import json

from service_clients.core import ErrorType, HttpResponse, ResolvedEndpoint
from service_clients.core.protocol import JsonErrorMarshaller, RequestSerializer, ResponseParser
from service_clients.services import iotanalytics, license_manager, redshift_serverless

USER_AGENT = "aws-service-clients/test"


def _endpoint(operation=None, request=None, url="https://service.us-west-2.amazonaws.com"):
    endpoint = ResolvedEndpoint(url=url)
    if operation is not None:
        for is_member, text in operation.path_parts():
            if is_member:
                endpoint.add_path_segment(request.get_member(text))
            else:
                endpoint.add_path_segments(text)
    return endpoint


class TestAwsJsonSerialization:
    """Test the awsJson1_1 protocol"""

    def test_target_header_and_body(self):
        serializer = RequestSerializer(license_manager.SERVICE, USER_AGENT)
        operation = license_manager.SERVICE.operation("GetLicense")
        request = license_manager.models.GetLicenseRequest(LicenseArn="arn:aws:license-manager::1:license:l-1")

        aws_request = serializer.serialize(operation, request, _endpoint())

        assert aws_request.method == "POST"
        assert aws_request.url == "https://service.us-west-2.amazonaws.com/"
        assert aws_request.headers["X-Amz-Target"] == "AWSLicenseManager.GetLicense"
        assert aws_request.headers["Content-Type"] == "application/x-amz-json-1.1"
        assert aws_request.headers["User-Agent"] == USER_AGENT
        assert json.loads(aws_request.data) == {"LicenseArn": "arn:aws:license-manager::1:license:l-1"}

    def test_camel_case_service(self):
        """Test top-level members follow the service casing, nested ones do not"""
        serializer = RequestSerializer(
            redshift_serverless.SERVICE, USER_AGENT
        )
        operation = redshift_serverless.SERVICE.operation("CreateWorkgroup")
        request = redshift_serverless.models.CreateWorkgroupRequest(
            WorkgroupName="wg", ConfigParameters=[{"parameterKey": "k"}]
        )

        aws_request = serializer.serialize(operation, request, _endpoint())

        assert aws_request.headers["X-Amz-Target"] == "RedshiftServerless.CreateWorkgroup"
        assert json.loads(aws_request.data) == {
            "workgroupName": "wg",
            "configParameters": [{"parameterKey": "k"}],
        }

    def test_empty_request_body(self):
        serializer = RequestSerializer(license_manager.SERVICE, USER_AGENT)
        operation = license_manager.SERVICE.operation("GetServiceSettings")

        aws_request = serializer.serialize(operation, license_manager.models.GetServiceSettingsRequest(), _endpoint())

        assert aws_request.data == b"{}"


class TestRestJsonSerialization:
    """Test the restJson1 protocol"""

    def test_path_query_and_body_split(self):
        serializer = RequestSerializer(iotanalytics.SERVICE, USER_AGENT)
        operation = iotanalytics.SERVICE.operation("UntagResource")
        request = iotanalytics.models.UntagResourceRequest(
            ResourceArn="arn:aws:iotanalytics:us-west-2:1:channel/c", TagKeys=["team", "env"]
        )

        aws_request = serializer.serialize(operation, request, _endpoint(operation, request))
        prepared = aws_request.prepare()

        assert prepared.method == "DELETE"
        assert prepared.url.startswith("https://service.us-west-2.amazonaws.com/tags?")
        assert "resourceArn=arn%3Aaws%3Aiotanalytics%3Aus-west-2%3A1%3Achannel%2Fc" in prepared.url
        assert "tagKeys=team" in prepared.url
        assert "tagKeys=env" in prepared.url
        assert not prepared.body

    def test_boolean_query_value(self):
        serializer = RequestSerializer(iotanalytics.SERVICE, USER_AGENT)
        operation = iotanalytics.SERVICE.operation("DescribeChannel")
        request = iotanalytics.models.DescribeChannelRequest(ChannelName="c1", IncludeStatistics=True)

        prepared = serializer.serialize(operation, request, _endpoint(operation, request)).prepare()

        assert prepared.url == "https://service.us-west-2.amazonaws.com/channels/c1?includeStatistics=true"

    def test_post_body_uses_wire_casing(self):
        serializer = RequestSerializer(iotanalytics.SERVICE, USER_AGENT)
        operation = iotanalytics.SERVICE.operation("CreateChannel")
        request = iotanalytics.models.CreateChannelRequest(ChannelName="c1")

        aws_request = serializer.serialize(operation, request, _endpoint(operation, request))

        assert aws_request.method == "POST"
        assert aws_request.headers["Content-Type"] == "application/json"
        assert "X-Amz-Target" not in aws_request.headers
        assert json.loads(aws_request.data) == {"channelName": "c1"}

    def test_path_members_are_not_in_body(self):
        serializer = RequestSerializer(iotanalytics.SERVICE, USER_AGENT)
        operation = iotanalytics.SERVICE.operation("UpdateChannel")
        request = iotanalytics.models.UpdateChannelRequest(ChannelName="c1", RetentionPeriod={"numberOfDays": 3})

        aws_request = serializer.serialize(operation, request, _endpoint(operation, request))

        assert aws_request.url.endswith("/channels/c1")
        assert json.loads(aws_request.data) == {"retentionPeriod": {"numberOfDays": 3}}


class TestErrorMarshalling:
    """Test service error unmarshalling"""

    def test_error_type_header(self):
        response = HttpResponse(
            400,
            {"x-amzn-ErrorType": "ResourceNotFoundException:http://internal.amazon.com/", "x-amzn-RequestId": "r-1"},
            b'{"message": "channel c1 not found"}',
        )

        error = JsonErrorMarshaller().marshall(response)

        assert error.error_type is ErrorType.SERVICE
        assert error.exception_name == "ResourceNotFoundException"
        assert error.message == "channel c1 not found"
        assert error.request_id == "r-1"
        assert error.response_code == 400
        assert error.is_retryable is False

    def test_type_member_with_namespace(self):
        response = HttpResponse(400, {}, b'{"__type": "com.amazonaws.licensemanager#ValidationException", "Message": "bad"}')

        error = JsonErrorMarshaller().marshall(response)

        assert error.exception_name == "ValidationException"
        assert error.message == "bad"

    def test_throttling_is_retryable(self):
        response = HttpResponse(400, {}, b'{"__type": "ThrottlingException", "message": "slow down"}')

        assert JsonErrorMarshaller().marshall(response).is_retryable is True

    def test_server_error_without_code(self):
        error = JsonErrorMarshaller().marshall(HttpResponse(503, {}, b"Service Unavailable"))

        assert error.exception_name == "HTTP503"
        assert error.message == "Service Unavailable"
        assert error.is_retryable is True

    def test_numeric_code_falls_back_to_status(self):
        error = JsonErrorMarshaller().marshall(HttpResponse(400, {}, b'{"code": 400, "message": "bad"}'))

        assert error.exception_name == "HTTP400"
        assert error.message == "bad"

    def test_non_string_type_skipped(self):
        response = HttpResponse(400, {}, b'{"__type": {"name": "x"}, "code": "ValidationException", "message": 7}')

        error = JsonErrorMarshaller().marshall(response)

        assert error.exception_name == "ValidationException"
        assert error.message == response.body.decode()

    def test_numeric_code_through_client(self, make_client, transport):
        from service_clients.services import LicenseManagerClient

        transport.status_code = 400
        transport.body = b'{"code": 400, "message": "bad"}'

        outcome = make_client(LicenseManagerClient).list_licenses()

        assert not outcome.is_success
        assert outcome.error.error_type is ErrorType.SERVICE
        assert outcome.error.exception_name == "HTTP400"


class TestResponseParsing:
    """Test success and failure outcomes from HTTP responses"""

    def test_success(self):
        operation = iotanalytics.SERVICE.operation("ListChannels")
        response = HttpResponse(200, {"x-amzn-RequestId": "r-9"}, b'{"channelSummaries": []}')

        outcome = ResponseParser().parse(operation, response, iotanalytics.models.ListChannelsResult)

        assert outcome.is_success
        assert outcome.result.members() == {"channelSummaries": []}
        assert outcome.result.ResponseMetadata.RequestId == "r-9"

    def test_empty_success_body(self):
        operation = iotanalytics.SERVICE.operation("DeleteChannel")

        outcome = ResponseParser().parse(operation, HttpResponse(204, {}, b""), iotanalytics.models.DeleteChannelResult)

        assert outcome.is_success
        assert outcome.result.ResponseMetadata.HTTPStatusCode == 204

    def test_non_object_body(self):
        operation = iotanalytics.SERVICE.operation("ListChannels")

        outcome = ResponseParser().parse(operation, HttpResponse(200, {}, b"[1, 2]"), iotanalytics.models.ListChannelsResult)

        assert outcome.error.error_type is ErrorType.UNKNOWN
        assert outcome.error.exception_name == "InvalidResponse"

    def test_error_status(self):
        operation = iotanalytics.SERVICE.operation("ListChannels")
        response = HttpResponse(403, {}, b'{"message": "denied", "__type": "AccessDeniedException"}')

        outcome = ResponseParser().parse(operation, response, iotanalytics.models.ListChannelsResult)

        assert outcome.error.exception_name == "AccessDeniedException"
        assert outcome.error.response_code == 403
