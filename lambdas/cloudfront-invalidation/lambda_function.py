import json
import logging
import os
import sys

from botocore.exceptions import BotoCoreError, ClientError

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
from edge_headers.config import DeployConfig, log_level  # type: ignore
from edge_headers.invalidation import create_invalidation  # type: ignore

# Set up logging
logger = logging.getLogger()
logger.setLevel(log_level())


def lambda_handler(event, context):
    """
    Invalidate the CloudFront cache after new header policy is published.

    Optional payload: {"distribution_id": "E2...", "paths": ["/*"]}
    """
    event = event or {}
    cfg = DeployConfig(distribution_id=event.get('distribution_id'))
    paths = event.get('paths') or ['/*']

    try:
        result = create_invalidation(cfg.distribution_id, paths)
        return {
            'statusCode': 200,
            'body': json.dumps({
                'message': 'CloudFront invalidation created successfully',
                'invalidationId': result['invalidation_id'],
                'distributionId': result['distribution_id'],
                'status': result['status'],
            })
        }
    except (ClientError, BotoCoreError, ValueError) as e:
        error_message = f"Error creating CloudFront invalidation: {str(e)}"
        logger.error(error_message)
        return {
            'statusCode': 500,
            'body': json.dumps({
                'error': error_message,
                'distributionId': cfg.distribution_id,
            })
        }
