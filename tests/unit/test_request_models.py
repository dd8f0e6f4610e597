"""
Unit tests for the generated request and result models.
"""

import pytest

from service_clients.core import ServiceRequest, ServiceResult
from service_clients.services import iotanalytics, organizations


class TestGeneratedRequests:
    """Test request classes built from operation tables"""

    def test_request_class_per_operation(self):
        request_cls = iotanalytics.models.DeleteChannelRequest

        assert issubclass(request_cls, ServiceRequest)
        assert request_cls.__name__ == "DeleteChannelRequest"
        assert request_cls().service_request_name == "DeleteChannel"

    def test_parameterless_operations_have_no_request(self):
        """Test operations invoked without arguments only get a result class"""
        with pytest.raises(AttributeError):
            organizations.models.DescribeOrganizationRequest

        assert issubclass(organizations.models.DescribeOrganizationResult, ServiceResult)

    def test_unknown_model(self):
        with pytest.raises(AttributeError):
            iotanalytics.models.NoSuchThingRequest

    def test_has_been_set(self):
        request = iotanalytics.models.DescribeChannelRequest(ChannelName="telemetry")

        assert request.has_been_set("ChannelName")
        assert not request.has_been_set("IncludeStatistics")

    def test_explicit_none_is_not_set(self):
        request = iotanalytics.models.DeleteChannelRequest(ChannelName=None)

        assert not request.has_been_set("ChannelName")

    def test_extra_members_are_accepted(self):
        """Test members outside the operation table travel as extras"""
        request = iotanalytics.models.CreateChannelRequest(
            ChannelName="telemetry", RetentionPeriod={"unlimited": True}
        )

        assert request.has_been_set("RetentionPeriod")
        assert request.members() == {"ChannelName": "telemetry", "RetentionPeriod": {"unlimited": True}}

    def test_members_skip_unset(self):
        request = iotanalytics.models.ListChannelsRequest(MaxResults=10)

        assert request.members() == {"MaxResults": 10}

    def test_no_endpoint_context_params(self):
        assert iotanalytics.models.ListChannelsRequest().endpoint_context_params() == []

    def test_dir_lists_generated_models(self):
        names = dir(iotanalytics.models)

        assert "DeleteChannelRequest" in names
        assert "DeleteChannelResult" in names


class TestGeneratedResults:
    """Test result classes"""

    def test_result_keeps_wire_members(self):
        result = iotanalytics.models.DescribeChannelResult.model_validate(
            {"channel": {"name": "telemetry"}, "ResponseMetadata": {"RequestId": "abc"}}
        )

        assert result.members() == {"channel": {"name": "telemetry"}}
        assert result.ResponseMetadata.RequestId == "abc"
        assert result.ResponseMetadata.HTTPStatusCode == 200
