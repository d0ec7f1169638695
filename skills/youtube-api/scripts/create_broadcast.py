#!/usr/bin/env python3
import argparse
from datetime import datetime, timedelta, timezone

from list_broadcasts import print_broadcast
from list_streams import print_stream
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


def to_rfc3339(value: str) -> str:
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid time {value!r}; use ISO format: YYYY-MM-DD HH:MM")
    if dt.tzinfo is None:
        # naive times are local
        dt = dt.astimezone()
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def default_schedule(now: datetime | None = None) -> tuple[str, str]:
    now = (now or datetime.now(timezone.utc)).replace(microsecond=0)
    start = now + timedelta(days=1)
    end = start + timedelta(days=1)
    return to_rfc3339(start.isoformat()), to_rfc3339(end.isoformat())


def insert_broadcast(youtube, title: str, start: str, end: str) -> dict:
    body = {
        "kind": "youtube#liveBroadcast",
        "snippet": {
            "title": title,
            "scheduledStartTime": start,
            "scheduledEndTime": end,
        },
        "status": {"privacyStatus": "private"},
    }
    return youtube.liveBroadcasts().insert(part="snippet,status", body=body).execute()


def insert_stream(youtube, title: str) -> dict:
    body = {
        "kind": "youtube#liveStream",
        "snippet": {"title": title},
        "cdn": {"format": "1080p", "ingestionType": "rtmp"},
    }
    return youtube.liveStreams().insert(part="snippet,cdn", body=body).execute()


def bind_stream(youtube, broadcast_id: str, stream_id: str) -> dict:
    return youtube.liveBroadcasts().bind(
        id=broadcast_id,
        part="id,contentDetails",
        streamId=stream_id,
    ).execute()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a YouTube broadcast and bind a stream to it")
    parser.add_argument("--broadcast-title", help="Broadcast title (prompted if omitted)")
    parser.add_argument("--stream-title", help="Stream title (prompted if omitted)")
    parser.add_argument("--start", help="Scheduled start: YYYY-MM-DD HH:MM (default: in 24h)")
    parser.add_argument("--end", help="Scheduled end: YYYY-MM-DD HH:MM (default: start + 24h)")
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    start, end = default_schedule()
    try:
        if args.start:
            start = to_rfc3339(args.start)
        if args.end:
            end = to_rfc3339(args.end)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        creds = authorize_from_args(args, SCOPES, "createbroadcast")
        youtube = build_service("youtube", "v3", creds)

        title = args.broadcast_title or prompt("Please enter a broadcast title: ", "New Broadcast")
        print(f"You chose {title} for broadcast title.")
        broadcast = insert_broadcast(youtube, title, start, end)
        print_header("Returned Broadcast")
        print_broadcast(broadcast)

        title = args.stream_title or prompt("Please enter a stream title: ", "New Stream")
        print(f"You chose {title} for stream title.")
        stream = insert_stream(youtube, title)
        print_header("Returned Stream")
        print_stream(stream)

        bound = bind_stream(youtube, broadcast["id"], stream["id"])
    except SAMPLE_ERRORS as exc:
        return report_error(exc)

    print_header("Returned Bound Broadcast")
    print(f"  - Broadcast Id: {bound.get('id', '')}")
    print(f"  - Bound Stream Id: {bound.get('contentDetails', {}).get('boundStreamId', '')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
