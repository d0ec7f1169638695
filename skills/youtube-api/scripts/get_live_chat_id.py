#!/usr/bin/env python3
"""Print the live chat id of a video, or of the signed-in user's active broadcast.

The video id is the ``v`` parameter of a watch URL, e.g.
https://www.youtube.com/watch?v=L5Xc93_ZL60
"""

import argparse
import sys

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    report_error,
    setup_logging,
)

SCOPES = [YOUTUBE_READONLY]


def _broadcast_chat_id(youtube) -> str | None:
    resp = youtube.liveBroadcasts().list(
        part="snippet",
        fields="items/snippet/liveChatId",
        broadcastType="all",
        broadcastStatus="active",
    ).execute()
    for broadcast in resp.get("items", []):
        live_chat_id = broadcast.get("snippet", {}).get("liveChatId")
        if live_chat_id:
            return live_chat_id
    return None


def _video_chat_id(youtube, video_id: str) -> str | None:
    resp = youtube.videos().list(
        part="liveStreamingDetails",
        fields="items/liveStreamingDetails/activeLiveChatId",
        id=video_id,
    ).execute()
    for video in resp.get("items", []):
        live_chat_id = video.get("liveStreamingDetails", {}).get("activeLiveChatId")
        if live_chat_id:
            return live_chat_id
    return None


def get_live_chat_id(youtube, video_id: str | None = None) -> str | None:
    if video_id:
        return _video_chat_id(youtube, video_id)
    return _broadcast_chat_id(youtube)


def add_video_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--video-id",
        help="Video of the live broadcast (default: your active broadcast)",
    )


def resolve_live_chat_id(youtube, video_id: str | None) -> str | None:
    live_chat_id = get_live_chat_id(youtube, video_id)
    if live_chat_id:
        print(f"Live chat id: {live_chat_id}")
    else:
        print("Unable to find a live chat id", file=sys.stderr)
    return live_chat_id


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Get a YouTube live chat id")
    add_video_argument(parser)
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "getlivechatid")
        youtube = build_service("youtube", "v3", creds)
        if not resolve_live_chat_id(youtube, args.video_id):
            return 1
    except SAMPLE_ERRORS as exc:
        return report_error(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
