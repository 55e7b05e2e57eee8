import boto3

from infrastructure.config import AWS_REGION


def get_bedrock_client():
    return boto3.client("bedrock-runtime", region_name=AWS_REGION)
