#!/usr/bin/env python3
"""Poll live chat messages and Super Chat details from a live broadcast.

Messages are fetched at the interval the server asks for; owners and
moderators of a chat are usually given a shorter interval.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Callable

from get_live_chat_id import add_video_argument, resolve_live_chat_id
from youtube_common import (
    REQUEST_ERRORS,
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    report_error,
    setup_logging,
)

logger = logging.getLogger(__name__)

SCOPES = [YOUTUBE_READONLY]

LIVE_CHAT_FIELDS = (
    "items(id,authorDetails(channelId,displayName,isChatModerator,isChatOwner,isChatSponsor,"
    "profileImageUrl),snippet(displayMessage,superChatDetails,publishedAt)),"
    "nextPageToken,pollingIntervalMillis"
)

# Fixed display order, independent of the order flags appear in the payload.
ROLE_FLAGS = (
    ("isChatOwner", "OWNER"),
    ("isChatModerator", "MODERATOR"),
    ("isChatSponsor", "SPONSOR"),
)


def format_message(message: dict) -> str:
    snippet = message.get("snippet", {})
    author = message.get("authorDetails", {})
    super_chat = snippet.get("superChatDetails")
    text = snippet.get("displayMessage")

    output = ""
    if super_chat:
        output += f"{super_chat.get('amountDisplayString', '')} SUPERCHAT RECEIVED FROM "
    output += author.get("displayName", "")

    roles = [role for flag, role in ROLE_FLAGS if author.get(flag)]
    if roles:
        output += f" ({', '.join(roles)})"
    if text:
        output += f": {text}"
    return output


def fetch_messages(youtube, live_chat_id: str, page_token: str | None) -> dict:
    request_kwargs = {
        "liveChatId": live_chat_id,
        "part": "snippet,authorDetails",
        "fields": LIVE_CHAT_FIELDS,
    }
    if page_token:
        request_kwargs["pageToken"] = page_token
    return youtube.liveChatMessages().list(**request_kwargs).execute()


def poll_chat(
    youtube,
    live_chat_id: str,
    *,
    page_token: str | None = None,
    delay_ms: int = 0,
    sleep: Callable[[float], None] = time.sleep,
    emit: Callable[[str], None] = print,
) -> str | None:
    """Print new chat messages until a request fails.

    Each request uses exactly the page token and delay returned by the
    previous response. Returns the last page token received.
    """
    while True:
        logger.info("Getting chat messages in %.3f seconds...", delay_ms * 0.001)
        sleep(delay_ms / 1000)
        try:
            resp = fetch_messages(youtube, live_chat_id, page_token)
        except REQUEST_ERRORS as exc:
            # TODO: decide whether a failed poll should back off and retry instead of stopping.
            logger.error("Polling stopped: %s", exc, exc_info=exc)
            return page_token

        for message in resp.get("items", []):
            emit(format_message(message))

        page_token = resp.get("nextPageToken")
        delay_ms = resp.get("pollingIntervalMillis") or 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Poll YouTube live chat messages")
    add_video_argument(parser)
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "listlivechatmessages")
        youtube = build_service("youtube", "v3", creds)
        live_chat_id = resolve_live_chat_id(youtube, args.video_id)
        if not live_chat_id:
            return 1
        poll_chat(youtube, live_chat_id)
    except SAMPLE_ERRORS as exc:
        return report_error(exc)
    except KeyboardInterrupt:
        print("Stopped.")
        return 0
    # poll_chat only returns after a failed request
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
