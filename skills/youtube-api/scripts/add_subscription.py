#!/usr/bin/env python3
import argparse

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    print_header,
    prompt,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE]

# YouTube For Developers
DEFAULT_CHANNEL_ID = "UCtVd0c0tGXuTSbU5d8cSBUg"


def subscribe(youtube, channel_id: str) -> dict:
    body = {
        "snippet": {
            "resourceId": {"kind": "youtube#channel", "channelId": channel_id},
        }
    }
    return youtube.subscriptions().insert(part="snippet,contentDetails", body=body).execute()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Subscribe to a YouTube channel")
    parser.add_argument("--channel-id", help="Channel to subscribe to (prompted if omitted)")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "addsubscription")
        youtube = build_service("youtube", "v3", creds)
        channel_id = args.channel_id or prompt("Please enter a channel id: ", DEFAULT_CHANNEL_ID)
        print(f"You chose {channel_id} to subscribe.")
        subscription = subscribe(youtube, channel_id)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print_header("Returned Subscription")
    print(f"  - Id: {subscription.get('id', '')}")
    print(f"  - Title: {subscription.get('snippet', {}).get('title', '')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
