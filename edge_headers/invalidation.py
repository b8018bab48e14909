import logging
import uuid
from typing import Dict, Iterable

from .common.aws_utils import get_cloudfront_client

logger = logging.getLogger(__name__)


def create_invalidation(distribution_id: str, paths: Iterable[str] = ("/*",), client=None) -> Dict[str, str]:
    """
    Invalidate cached objects so viewers get responses carrying the new headers.
    """
    if not distribution_id:
        raise ValueError("distribution_id is required")
    items = list(paths)
    client = client or get_cloudfront_client()

    logger.info(f"Starting CloudFront invalidation for distribution: {distribution_id}")
    response = client.create_invalidation(
        DistributionId=distribution_id,
        InvalidationBatch={
            "Paths": {"Quantity": len(items), "Items": items},
            "CallerReference": str(uuid.uuid4()),
        },
    )
    invalidation = response["Invalidation"]
    logger.info(f"CloudFront invalidation created successfully: {invalidation['Id']}")
    return {
        "invalidation_id": invalidation["Id"],
        "status": invalidation["Status"],
        "distribution_id": distribution_id,
    }
