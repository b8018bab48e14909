import logging
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
from edge_headers.exceptions import InvalidInput  # type: ignore
from edge_headers.lambda_edge import handler  # type: ignore

# Lambda@Edge does not pass environment variables; level is fixed
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    """
    Viewer-response trigger: add the security headers to the outgoing response.
    """
    try:
        return handler(event, context)
    except InvalidInput as e:
        logger.error(f"Security headers not applied, unexpected event: {e}")
        raise
