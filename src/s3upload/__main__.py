"""CLI entrypoint for uploading a file or directory to S3.

Usage:
    s3upload --bucket my-bucket --path ./dist --key releases/1.2.0
    python -m s3upload --bucket my-bucket --path report.csv

Every flag falls back to an environment variable (a .env file in the
working directory is loaded first):
    S3_UPLOAD_BUCKET  — target bucket (required)
    S3_UPLOAD_PATH    — local file or directory (required)
    S3_UPLOAD_KEY     — object key, or key prefix for a directory (optional)
    S3_UPLOAD_REGION  — AWS region, falls back to AWS_REGION (optional)
    S3_UPLOAD_DEBUG   — enable debug logging (optional)

Credentials come from the standard AWS chain (AWS_ACCESS_KEY_ID etc.,
~/.aws/credentials, instance metadata).
"""

# ruff: noqa: T201 — print is the correct output mechanism for a CLI

from __future__ import annotations

import argparse
import logging
import sys

from s3upload.config import UploadConfig
from s3upload.errors import S3UploadError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3upload",
        description="Upload a local file or directory tree to an S3 bucket.",
    )
    parser.add_argument("--bucket", help="Target bucket (env: S3_UPLOAD_BUCKET)")
    parser.add_argument("--path", help="Local file or directory (env: S3_UPLOAD_PATH)")
    parser.add_argument(
        "--key",
        help="Object key for a file, or key prefix for a directory (env: S3_UPLOAD_KEY)",
    )
    parser.add_argument("--region", help="AWS region (env: S3_UPLOAD_REGION)")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging (env: S3_UPLOAD_DEBUG)",
    )
    return parser


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # Only show detailed logs for our own code
    logging.getLogger("s3upload").setLevel(logging.DEBUG if debug else logging.INFO)


def main(argv: list[str] | None = None) -> None:
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))

    args = _build_parser().parse_args(argv)
    cfg = UploadConfig.from_env().merged(
        bucket=args.bucket,
        path=args.path,
        key=args.key,
        region=args.region,
        debug=args.debug,
    )
    _configure_logging(cfg.debug)

    from s3upload.upload import execute

    try:
        summary = execute(cfg.to_request())
    except S3UploadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    for obj in summary.objects:
        print(f"  uploaded s3://{summary.bucket}/{obj.key}")
    print(f"Uploaded {summary.count} file(s) to s3://{summary.bucket}")
    sys.exit(0)


if __name__ == "__main__":
    main()
