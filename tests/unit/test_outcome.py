"""
Unit tests for operation outcomes and error values.
"""

import pytest

from service_clients.core import AWSError, ErrorType, Outcome, OutcomeError
from service_clients.core.outcome import endpoint_resolution_failure, missing_parameter, not_initialized


class TestOutcome:
    """Test the success/error container"""

    def test_success_outcome(self):
        """Test a successful outcome exposes its result"""
        outcome = Outcome.success({"ok": True})

        assert outcome.is_success
        assert bool(outcome)
        assert outcome.error is None
        assert outcome.get_result() == {"ok": True}

    def test_failure_outcome_raises_on_get_result(self):
        """Test get_result raises OutcomeError carrying the error"""
        error = missing_parameter("ChannelName")
        outcome = Outcome.failure(error)

        assert not outcome.is_success
        assert not outcome
        with pytest.raises(OutcomeError) as exc_info:
            outcome.get_result()
        assert exc_info.value.error is error

    def test_outcome_cannot_hold_both(self):
        """Test an outcome never holds a result and an error together"""
        with pytest.raises(ValueError):
            Outcome(result=1, error=not_initialized("ListChannels"))


class TestErrorFactories:
    """Test the client-side error constructors"""

    def test_missing_parameter(self):
        error = missing_parameter("PipelineName")

        assert error.error_type is ErrorType.MISSING_PARAMETER
        assert error.exception_name == "MISSING_PARAMETER"
        assert error.message == "Missing required field [PipelineName]"
        assert error.is_retryable is False

    def test_endpoint_resolution_failure(self):
        error = endpoint_resolution_failure("Invalid Configuration: Missing Region")

        assert error.error_type is ErrorType.ENDPOINT_RESOLUTION_FAILURE
        assert error.message == "Invalid Configuration: Missing Region"
        assert error.is_retryable is False

    def test_not_initialized_names_operation(self):
        error = not_initialized("DescribeLocations")

        assert error.error_type is ErrorType.NOT_INITIALIZED
        assert "DescribeLocations" in error.message

    def test_error_str(self):
        """Test errors render as name and message"""
        error = AWSError(ErrorType.SERVICE, "ResourceNotFoundException", "channel not found")

        assert str(error) == "ResourceNotFoundException: channel not found"
