"""SigV4 request signing over botocore."""

from typing import Optional

import structlog
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials, create_credential_resolver
from botocore.exceptions import BotoCoreError
from botocore.session import get_session

logger = structlog.get_logger(__name__)


class SigningError(Exception):
    """Raised when a request cannot be signed."""


def compute_signer_region(region: str) -> str:
    """Region used in the credential scope for a configured region.

    "aws-global" signs as "us-east-1"; FIPS pseudo regions such as
    "fips-us-gov-west-1" or "us-east-1-fips" sign as the plain region.
    """
    if region == "aws-global":
        return "us-east-1"
    if region.startswith("fips-"):
        region = region[len("fips-"):]
    if region.endswith("-fips"):
        region = region[: -len("-fips")]
    return region


class SimpleCredentialsProvider:
    """Serves one fixed set of credentials."""

    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def load_credentials(self) -> Optional[Credentials]:
        return self._credentials


def default_credentials_provider():
    """botocore's default chain: environment, shared files, SSO, IMDS ..."""
    return create_credential_resolver(get_session())


class SigV4Signer:
    """Signs requests for one service in place.

    Args:
        service_name: Signing name, e.g. "license-manager"
        region: Configured client region
        credentials_provider: Object exposing ``load_credentials()``
    """

    def __init__(self, service_name: str, region: str, credentials_provider) -> None:
        self.service_name = service_name
        self.region = compute_signer_region(region)
        self.credentials_provider = credentials_provider

    def sign(self, request: AWSRequest, signing_region: Optional[str] = None) -> AWSRequest:
        """Add SigV4 headers to request.

        Args:
            request: Unsigned request
            signing_region: Region override from the resolved endpoint

        Returns:
            The same request, signed

        Raises:
            SigningError: If no credentials are available or signing fails
        """
        try:
            credentials = self.credentials_provider.load_credentials()
        except BotoCoreError as e:
            raise SigningError(f"Unable to load credentials: {e}") from e
        if credentials is None:
            raise SigningError("Unable to sign request: no credentials available")

        region = compute_signer_region(signing_region) if signing_region else self.region
        try:
            SigV4Auth(credentials.get_frozen_credentials(), self.service_name, region).add_auth(request)
        except BotoCoreError as e:
            raise SigningError(str(e)) from e

        logger.debug("request_signed", service=self.service_name, region=region)
        return request
