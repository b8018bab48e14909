"""
Shared fixtures for the security header tests.

CloudFront clients are real boto3 clients wrapped in botocore's Stubber, so
nothing here reaches AWS.
"""
import copy

import boto3
import pytest
from botocore.stub import Stubber

from edge_headers.events import load_event


@pytest.fixture()
def viewer_event():
    return load_event()


@pytest.fixture()
def empty_response():
    return {"statusCode": 200, "statusDescription": "OK", "headers": {}, "body": "<html></html>"}


@pytest.fixture()
def lambda_edge_event():
    return {
        "Records": [
            {
                "cf": {
                    "config": {"distributionId": "EDFDVBD6EXAMPLE", "eventType": "viewer-response"},
                    "request": {"method": "GET", "uri": "/index.html", "headers": {}},
                    "response": {
                        "status": "200",
                        "statusDescription": "OK",
                        "headers": {
                            "cache-control": [{"key": "Cache-Control", "value": "no-store"}],
                            "x-frame-options": [{"key": "X-Frame-Options", "value": "SAMEORIGIN"}],
                            "vary": [
                                {"key": "Vary", "value": "Accept-Encoding"},
                                {"key": "Vary", "value": "Origin"},
                            ],
                        },
                    },
                }
            }
        ]
    }


@pytest.fixture()
def cloudfront():
    client = boto3.client(
        "cloudfront",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture()
def snapshot():
    return copy.deepcopy
