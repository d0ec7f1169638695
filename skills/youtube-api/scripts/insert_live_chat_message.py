#!/usr/bin/env python3
import argparse

from get_live_chat_id import add_video_argument, resolve_live_chat_id
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


def insert_message(youtube, live_chat_id: str, text: str) -> dict:
    body = {
        "snippet": {
            "type": "textMessageEvent",
            "liveChatId": live_chat_id,
            "textMessageDetails": {"messageText": text},
        }
    }
    return youtube.liveChatMessages().insert(part="snippet", body=body).execute()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Insert a message into a YouTube live chat")
    parser.add_argument("message", help="Message text to insert")
    add_video_argument(parser)
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.message.strip():
        parser.error("message must not be empty")

    try:
        creds = authorize_from_args(args, SCOPES, "insertlivechatmessage")
        youtube = build_service("youtube", "v3", creds)
        live_chat_id = resolve_live_chat_id(youtube, args.video_id)
        if not live_chat_id:
            return 1
        resp = insert_message(youtube, live_chat_id, args.message)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print(f"Inserted message id {resp.get('id')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
