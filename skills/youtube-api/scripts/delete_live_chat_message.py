#!/usr/bin/env python3
import argparse

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_FORCE_SSL,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE_FORCE_SSL]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Delete a message from a YouTube live chat")
    parser.add_argument("message_id", help="Id of the chat message to delete")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "deletelivechatmessage")
        youtube = build_service("youtube", "v3", creds)
        youtube.liveChatMessages().delete(id=args.message_id).execute()
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print(f"Deleted message id {args.message_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
