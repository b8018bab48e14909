from edge_headers.common import aws_utils


def test_cloudfront_client_cached_per_region(monkeypatch):
    created = []

    def fake_client(service, region_name=None):
        created.append((service, region_name))
        return object()

    monkeypatch.setattr(aws_utils, "_cloudfront_clients", {})
    monkeypatch.setattr(aws_utils.boto3, "client", fake_client)

    default = aws_utils.get_cloudfront_client()
    assert aws_utils.get_cloudfront_client("us-east-1") is default
    other = aws_utils.get_cloudfront_client("eu-west-1")
    assert other is not default
    assert aws_utils.get_cloudfront_client("eu-west-1") is other
    assert created == [("cloudfront", "us-east-1"), ("cloudfront", "eu-west-1")]
