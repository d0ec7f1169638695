#!/usr/bin/env python3
import argparse

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    add_auth_arguments,
    authorize_from_args,
    forget,
    report_error,
    setup_logging,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create or refresh a cached YouTube OAuth token."
    )
    parser.add_argument(
        "--datastore",
        default="youtube-auth",
        help="Credential datastore name (default: youtube-auth)",
    )
    parser.add_argument(
        "--scope",
        action="append",
        dest="scopes",
        help="OAuth scope to request (repeatable, default: youtube.readonly)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop the cached token before authorizing.",
    )
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    scopes = args.scopes or [YOUTUBE_READONLY]
    try:
        if args.reset and forget(args.datastore, args.credentials_dir):
            print(f"Removed cached token for {args.datastore}")
        creds = authorize_from_args(args, scopes, args.datastore)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print(f"OK: token for {args.datastore} valid until {creds.expiry or 'n/a'} (UTC)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
