"""
Deploy helper for the security headers CloudFront Function.
Usage:
  edge-headers render --outfile security-headers.js
  edge-headers apply --event event.json [--lambda-edge]
  edge-headers publish --name security-headers
  edge-headers test --name security-headers
  edge-headers invalidate --distribution-id EDFDVBD6EXAMPLE --path '/*'

Settings default to CF_FUNCTION_NAME, CF_FUNCTION_COMMENT, CF_DISTRIBUTION_ID
and AWS_REGION from the environment; flags win.
"""
import argparse
import json
import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from . import applier, lambda_edge
from .cloudfront_function import publish_function, render_function_code, run_function_test
from .common.aws_utils import get_cloudfront_client
from .config import DeployConfig, log_level
from .events import load_event
from .exceptions import EdgeHeadersError
from .invalidation import create_invalidation

logger = logging.getLogger("edge_headers")


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="edge-headers")
    sub = p.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Print the CloudFront Function source")
    render.add_argument("--outfile")

    apply = sub.add_parser("apply", help="Run the transform locally on a JSON event")
    apply.add_argument("--event", help="Event JSON file (defaults to the bundled viewer-response event)")
    apply.add_argument("--lambda-edge", action="store_true", help="Treat the event as a Lambda@Edge event")

    for name, help_text in (("publish", "Create/update, test and publish the function"),
                            ("test", "Test the DEVELOPMENT stage of the function")):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("--name")
        sp.add_argument("--region")
        if name == "publish":
            sp.add_argument("--comment")
            sp.add_argument("--skip-test", action="store_true", help="Publish without running the test event")
        else:
            sp.add_argument("--event")

    inv = sub.add_parser("invalidate", help="Invalidate the distribution cache")
    inv.add_argument("--distribution-id")
    inv.add_argument("--path", action="append", dest="paths", help="Path to invalidate (repeatable, default /*)")
    inv.add_argument("--region")
    return p.parse_args(argv)


def _read_event(path):
    if not path:
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _print_json(data):
    print(json.dumps(data, indent=2, default=str))


def cmd_render(args):
    code = render_function_code()
    if args.outfile:
        with open(args.outfile, "w", encoding="utf-8") as f:
            f.write(code)
        logger.info(f"Wrote {args.outfile}")
    else:
        sys.stdout.write(code)


def cmd_apply(args):
    event = _read_event(args.event)
    if args.lambda_edge:
        if event is None:
            raise EdgeHeadersError("--lambda-edge needs --event")
        response = lambda_edge.handler(event)
    else:
        response = applier.handler(event if event is not None else load_event())
    _print_json(response)


def cmd_publish(args):
    cfg = DeployConfig(function_name=args.name, comment=args.comment, region=args.region)
    client = get_cloudfront_client(cfg.region)
    code = render_function_code()
    etag = publish_function(cfg.function_name, code, cfg.comment, client=client, verify=not args.skip_test)
    _print_json({"function": cfg.function_name, "etag": etag})


def cmd_test(args):
    cfg = DeployConfig(function_name=args.name, region=args.region)
    client = get_cloudfront_client(cfg.region)
    result = run_function_test(cfg.function_name, _read_event(args.event), client=client)
    _print_json(result)


def cmd_invalidate(args):
    cfg = DeployConfig(distribution_id=args.distribution_id, region=args.region)
    client = get_cloudfront_client(cfg.region)
    result = create_invalidation(cfg.distribution_id, args.paths or ["/*"], client=client)
    _print_json(result)


COMMANDS = {
    "render": cmd_render,
    "apply": cmd_apply,
    "publish": cmd_publish,
    "test": cmd_test,
    "invalidate": cmd_invalidate,
}


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        COMMANDS[args.command](args)
    except (EdgeHeadersError, ValueError, OSError, ClientError, BotoCoreError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
