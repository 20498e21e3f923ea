from enum import Enum


def resource_governance_doc_url(resource: str) -> str:
    governance_doc_url = f"https://cloud-stacks-docs/{resource}-governance"
    return governance_doc_url


class AWSService(str, Enum):
    Lambda = "lambda"
    S3 = "s3"
    IAM_Role = "iam"
    Security_Group = "security-group"
