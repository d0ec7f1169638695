import json
from unittest import mock

import httplib2
import pytest
from google.auth.exceptions import RefreshError, TransportError
from googleapiclient.errors import HttpError

import list_live_chat_messages
from list_live_chat_messages import LIVE_CHAT_FIELDS, format_message, poll_chat


class FakeChatApi:
    """Stands in for ``youtube.liveChatMessages()``; replays canned responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def liveChatMessages(self):
        return self

    def list(self, **kwargs):
        self.calls.append(kwargs)
        return self

    def execute(self):
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def message(name="Alice", text="hello", owner=False, moderator=False, sponsor=False, amount=None):
    snippet = {"displayMessage": text, "publishedAt": "2024-01-30T00:00:00Z"}
    if amount:
        snippet["superChatDetails"] = {"amountDisplayString": amount}
    return {
        "id": "msg-1",
        "snippet": snippet,
        "authorDetails": {
            "displayName": name,
            "isChatOwner": owner,
            "isChatModerator": moderator,
            "isChatSponsor": sponsor,
        },
    }


def test_format_plain_message():
    assert format_message(message()) == "Alice: hello"


def test_format_roles_in_fixed_order():
    # dict order of the flags is reversed on purpose
    msg = message()
    msg["authorDetails"] = {
        "isChatSponsor": True,
        "isChatModerator": True,
        "isChatOwner": True,
        "displayName": "Bob",
    }
    assert format_message(msg) == "Bob (OWNER, MODERATOR, SPONSOR): hello"


def test_format_single_role():
    assert format_message(message(name="Mod", moderator=True)) == "Mod (MODERATOR): hello"


def test_format_super_chat_amount_precedes_author():
    line = format_message(message(amount="$5.00"))
    assert line == "$5.00 SUPERCHAT RECEIVED FROM Alice: hello"
    assert line.index("$5.00") < line.index("Alice")


def test_format_without_super_chat_starts_with_author():
    assert format_message(message(name="Carol", sponsor=True)).startswith("Carol")


@pytest.mark.parametrize("text", ["", None])
def test_format_empty_text_omits_suffix(text):
    assert format_message(message(text=text, owner=True)) == "Alice (OWNER)"


def test_poll_uses_returned_token_and_interval():
    api = FakeChatApi(
        [
            {"nextPageToken": "abc", "pollingIntervalMillis": 5000, "items": []},
            OSError("connection reset"),
        ]
    )
    sleeps, lines = [], []

    last_token = poll_chat(api, "chat-1", sleep=sleeps.append, emit=lines.append)

    assert lines == []
    assert sleeps == [0, 5.0]
    assert "pageToken" not in api.calls[0]
    assert api.calls[1]["pageToken"] == "abc"
    assert last_token == "abc"


def test_poll_chains_tokens_across_cycles():
    api = FakeChatApi(
        [
            {"nextPageToken": "t1", "pollingIntervalMillis": 1000, "items": [message(name="A")]},
            {"nextPageToken": "t2", "pollingIntervalMillis": 2500, "items": [message(name="B"), message(name="C")]},
            {"nextPageToken": "t3", "pollingIntervalMillis": 0, "items": []},
            OSError("gone"),
        ]
    )
    sleeps, lines = [], []

    poll_chat(api, "chat-1", sleep=sleeps.append, emit=lines.append)

    assert [call.get("pageToken") for call in api.calls] == [None, "t1", "t2", "t3"]
    assert sleeps == [0, 1.0, 2.5, 0]
    assert lines == ["A: hello", "B: hello", "C: hello"]


def test_poll_request_shape():
    api = FakeChatApi([OSError("down")])
    poll_chat(api, "chat-xyz", sleep=lambda s: None, emit=lambda line: None)

    assert api.calls == [
        {"liveChatId": "chat-xyz", "part": "snippet,authorDetails", "fields": LIVE_CHAT_FIELDS}
    ]


def test_poll_stops_after_http_error(caplog):
    content = json.dumps({"error": {"code": 403, "message": "liveChatEnded"}}).encode()
    api = FakeChatApi(
        [
            {"nextPageToken": "abc", "pollingIntervalMillis": 10, "items": []},
            HttpError(httplib2.Response({"status": 403}), content),
            {"nextPageToken": "never", "pollingIntervalMillis": 10, "items": [message()]},
        ]
    )
    lines = []

    assert poll_chat(api, "chat-1", sleep=lambda s: None, emit=lines.append) == "abc"
    assert len(api.calls) == 2
    assert lines == []
    assert "Polling stopped" in caplog.text


def test_poll_resumes_from_given_token():
    api = FakeChatApi([OSError("down")])
    sleeps = []
    poll_chat(api, "chat-1", page_token="resume", delay_ms=750, sleep=sleeps.append, emit=print)
    assert api.calls[0]["pageToken"] == "resume"
    assert sleeps == [0.75]


@pytest.mark.parametrize(
    "error",
    [
        httplib2.ServerNotFoundError("Unable to find the server at youtube.googleapis.com"),
        RefreshError("invalid_grant: Token has been expired or revoked."),
        TransportError("connection aborted"),
    ],
)
def test_poll_stops_on_transport_and_auth_errors(error, caplog):
    api = FakeChatApi([{"nextPageToken": "abc", "pollingIntervalMillis": 10, "items": [message()]}, error])
    lines = []

    assert poll_chat(api, "chat-1", sleep=lambda s: None, emit=lines.append) == "abc"
    assert lines == ["Alice: hello"]
    assert "Polling stopped" in caplog.text


@pytest.fixture
def chat_client(monkeypatch):
    client = mock.MagicMock()
    client.videos.return_value.list.return_value.execute.return_value = {
        "items": [{"liveStreamingDetails": {"activeLiveChatId": "chat-1"}}]
    }
    monkeypatch.setattr(list_live_chat_messages, "authorize_from_args", mock.MagicMock(return_value=object()))
    monkeypatch.setattr(list_live_chat_messages, "build_service", mock.MagicMock(return_value=client))
    return client


def test_main_exits_nonzero_when_polling_stops(chat_client, capsys):
    chat_client.liveChatMessages.return_value.list.return_value.execute.side_effect = [
        {"nextPageToken": "abc", "pollingIntervalMillis": 0, "items": [message(name="Dan")]},
        httplib2.ServerNotFoundError("Unable to find the server at youtube.googleapis.com"),
    ]

    assert list_live_chat_messages.main(["--video-id", "vid"]) == 1
    out = capsys.readouterr().out
    assert "Live chat id: chat-1" in out
    assert "Dan: hello" in out


def test_main_stops_cleanly_on_interrupt(chat_client, capsys):
    chat_client.liveChatMessages.return_value.list.return_value.execute.side_effect = KeyboardInterrupt

    assert list_live_chat_messages.main(["--video-id", "vid"]) == 0
    assert "Stopped." in capsys.readouterr().out


def test_main_without_chat_never_polls(chat_client, capsys):
    chat_client.videos.return_value.list.return_value.execute.return_value = {"items": []}

    assert list_live_chat_messages.main(["--video-id", "vid"]) == 1
    assert "Unable to find a live chat id" in capsys.readouterr().err
    assert not chat_client.liveChatMessages.called


def test_main_reports_auth_transport_failure(monkeypatch, caplog):
    monkeypatch.setattr(
        list_live_chat_messages,
        "authorize_from_args",
        mock.MagicMock(side_effect=TransportError("Failed to establish a new connection")),
    )

    assert list_live_chat_messages.main([]) == 1
    assert "TransportError" in caplog.text
