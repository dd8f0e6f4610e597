"""Amazon Transcribe client (awsJson1_1)."""

from ..core import BaseServiceClient, MemberCase, Protocol, ServiceModels, ServiceSpec, SpanPolicy
from ..core.operations import json_operations

SERVICE = ServiceSpec(
    service_name="transcribe",
    client_name="Transcribe",
    endpoint_prefix="transcribe",
    protocol=Protocol.AWS_JSON_1_1,
    target_prefix="Transcribe",
    member_case=MemberCase.PASCAL,
    span_policy=SpanPolicy.ALL,
    operations=json_operations(
        "CreateCallAnalyticsCategory",
        "CreateLanguageModel",
        "CreateMedicalVocabulary",
        "CreateVocabulary",
        "CreateVocabularyFilter",
        "DeleteCallAnalyticsCategory",
        "DeleteCallAnalyticsJob",
        "DeleteLanguageModel",
        "DeleteMedicalTranscriptionJob",
        "DeleteMedicalVocabulary",
        "DeleteTranscriptionJob",
        "DeleteVocabulary",
        "DeleteVocabularyFilter",
        "DescribeLanguageModel",
        "GetCallAnalyticsCategory",
        "GetCallAnalyticsJob",
        "GetMedicalTranscriptionJob",
        "GetMedicalVocabulary",
        "GetTranscriptionJob",
        "GetVocabulary",
        "GetVocabularyFilter",
        "ListCallAnalyticsCategories",
        "ListCallAnalyticsJobs",
        "ListLanguageModels",
        "ListMedicalTranscriptionJobs",
        "ListMedicalVocabularies",
        "ListTagsForResource",
        "ListTranscriptionJobs",
        "ListVocabularies",
        "ListVocabularyFilters",
        "StartCallAnalyticsJob",
        "StartMedicalTranscriptionJob",
        "StartTranscriptionJob",
        "TagResource",
        "UntagResource",
        "UpdateCallAnalyticsCategory",
        "UpdateMedicalVocabulary",
        "UpdateVocabulary",
        "UpdateVocabularyFilter",
    ),
)

models = ServiceModels(SERVICE, __name__)


class TranscribeServiceClient(BaseServiceClient):
    """Client for Amazon Transcribe."""

    service = SERVICE
    models = models
