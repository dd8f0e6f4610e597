"""
Unit tests for SigV4 request signing.
"""

from unittest.mock import Mock

import pytest
from botocore.awsrequest import AWSRequest
from botocore.exceptions import NoCredentialsError

from service_clients.core import SigningError, SigV4Signer, SimpleCredentialsProvider
from service_clients.core.signing import compute_signer_region
from tests.fakes import STATIC_CREDENTIALS


def _request():
    return AWSRequest(
        method="POST",
        url="https://license-manager.us-west-2.amazonaws.com/",
        data=b"{}",
        headers={"X-Amz-Target": "AWSLicenseManager.ListLicenses"},
    )


class TestSignerRegion:
    """Test the credential scope region"""

    @pytest.mark.parametrize(
        "region,expected",
        [
            ("us-west-2", "us-west-2"),
            ("aws-global", "us-east-1"),
            ("fips-us-gov-west-1", "us-gov-west-1"),
            ("us-east-1-fips", "us-east-1"),
        ],
    )
    def test_compute_signer_region(self, region, expected):
        assert compute_signer_region(region) == expected


class TestSigV4Signer:
    """Test signing with botocore SigV4Auth"""

    def test_adds_authorization_headers(self):
        signer = SigV4Signer("license-manager", "us-west-2", SimpleCredentialsProvider(STATIC_CREDENTIALS))

        request = signer.sign(_request())

        authorization = request.headers["Authorization"]
        assert authorization.startswith("AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/")
        assert "/us-west-2/license-manager/aws4_request" in authorization
        assert "X-Amz-Date" in request.headers

    def test_signing_region_override(self):
        """Test global services sign for the region of the resolved endpoint"""
        signer = SigV4Signer("organizations", "eu-west-1", SimpleCredentialsProvider(STATIC_CREDENTIALS))

        request = signer.sign(_request(), signing_region="us-east-1")

        assert "/us-east-1/organizations/aws4_request" in request.headers["Authorization"]

    def test_missing_credentials(self):
        signer = SigV4Signer("inspector", "us-west-2", SimpleCredentialsProvider(None))

        with pytest.raises(SigningError, match="no credentials"):
            signer.sign(_request())

    def test_credential_loading_failure(self):
        provider = Mock()
        provider.load_credentials.side_effect = NoCredentialsError()
        signer = SigV4Signer("inspector", "us-west-2", provider)

        with pytest.raises(SigningError):
            signer.sign(_request())
