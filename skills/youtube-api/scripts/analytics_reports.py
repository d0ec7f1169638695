#!/usr/bin/env python3
"""Print YouTube Analytics reports for the signed-in user's default channel."""

import argparse
import sys
from datetime import date, timedelta

from youtube_common import (
    SAMPLE_ERRORS,
    YOUTUBE_READONLY,
    YT_ANALYTICS_READONLY,
    add_auth_arguments,
    authorize_from_args,
    build_service,
    report_error,
    setup_logging,
)

SCOPES = [YT_ANALYTICS_READONLY, YOUTUBE_READONLY]
COLUMN_WIDTH = 30


def views_over_time_query(analytics, channel_id: str, start: str, end: str) -> dict:
    return analytics.reports().query(
        ids=f"channel=={channel_id}",
        startDate=start,
        endDate=end,
        metrics="views,estimatedMinutesWatched",
        dimensions="day",
        sort="day",
    ).execute()


def top_videos_query(analytics, channel_id: str, start: str, end: str) -> dict:
    return analytics.reports().query(
        ids=f"channel=={channel_id}",
        startDate=start,
        endDate=end,
        metrics="views,subscribersGained,subscribersLost",
        dimensions="video",
        sort="-views",
        maxResults=10,
    ).execute()


def demographics_query(analytics, channel_id: str, start: str, end: str) -> dict:
    return analytics.reports().query(
        ids=f"channel=={channel_id}",
        startDate=start,
        endDate=end,
        metrics="viewerPercentage",
        dimensions="ageGroup,gender",
        sort="-viewerPercentage",
    ).execute()


def format_cell(value, data_type: str | None) -> str:
    if data_type == "INTEGER":
        return f"{int(value):>{COLUMN_WIDTH}d}"
    if data_type == "FLOAT":
        return f"{float(value):>{COLUMN_WIDTH}f}"
    return f"{str(value):>{COLUMN_WIDTH}}"


def format_table(title: str, results: dict) -> str:
    lines = [f"Report: {title}"]
    rows = results.get("rows") or []
    if not rows:
        lines.append("No results Found.")
        return "\n".join(lines)

    headers = results.get("columnHeaders", [])
    lines.append("".join(f"{h.get('name', ''):>{COLUMN_WIDTH}}" for h in headers))
    for row in rows:
        lines.append(
            "".join(format_cell(value, header.get("dataType")) for header, value in zip(headers, row))
        )
    lines.append("")
    return "\n".join(lines)


def default_channel(youtube) -> dict | None:
    resp = youtube.channels().list(part="id,snippet", mine=True, fields="items(id,snippet/title)").execute()
    items = resp.get("items", [])
    return items[0] if items else None


def main(argv: list[str] | None = None) -> int:
    today = date.today()
    parser = argparse.ArgumentParser(description="Print YouTube Analytics reports")
    parser.add_argument(
        "--start-date",
        default=(today - timedelta(days=30)).isoformat(),
        help="Report start date YYYY-MM-DD (default: 30 days ago)",
    )
    parser.add_argument(
        "--end-date",
        default=today.isoformat(),
        help="Report end date YYYY-MM-DD (default: today)",
    )
    add_auth_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        creds = authorize_from_args(args, SCOPES, "analyticsreports")
        youtube = build_service("youtube", "v3", creds)
        analytics = build_service("youtubeAnalytics", "v2", creds)

        channel = default_channel(youtube)
        if not channel or not channel.get("id"):
            print("No channel found.", file=sys.stderr)
            return 1

        channel_id = channel["id"]
        print(f"Default Channel: {channel.get('snippet', {}).get('title', '')} ( {channel_id} )\n")
        reports = [
            ("Views Over Time.", views_over_time_query),
            ("Top Videos", top_videos_query),
            ("Demographics", demographics_query),
        ]
        for title, query in reports:
            print(format_table(title, query(analytics, channel_id, args.start_date, args.end_date)))
    except SAMPLE_ERRORS as exc:
        return report_error(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
