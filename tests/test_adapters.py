"""Unit tests for adapters."""

import pytest
import requests
from unittest.mock import AsyncMock, MagicMock, Mock, patch
from statussim.adapters import (
    AlertAdapter,
    FileAdapter,
    MessageBirdAdapter,
    StdoutAdapter,
    TelegramBotAdapter,
    truncate_message,
)
from statussim.errors import MessagingError


def test_stdout_adapter_writes_verbatim(capsys):
    """Stdout adapter writes text unchanged."""
    adapter = StdoutAdapter()

    assert adapter.write('level=info msg="hi"\n') is True
    assert capsys.readouterr().out == 'level=info msg="hi"\n'


def test_file_adapter_appends(tmp_path):
    """File adapter appends to existing file."""
    path = tmp_path / "server.log"
    path.write_text("old line\n")

    with FileAdapter(str(path)) as adapter:
        assert adapter.write("first\n") is True
        assert adapter.write("second\n") is True

    assert adapter.closed
    assert path.read_text() == "old line\nfirst\nsecond\n"


def test_file_adapter_creates_missing_file(tmp_path):
    """File adapter creates log file on open."""
    path = tmp_path / "new.log"

    adapter = FileAdapter(str(path))
    adapter.close()

    assert path.exists()


def test_file_adapter_open_failure(tmp_path):
    """Unopenable path raises OSError."""
    with pytest.raises(OSError):
        FileAdapter(str(tmp_path / "missing" / "server.log"))


def test_file_adapter_write_after_close(tmp_path):
    """Closed file adapter reports failure."""
    adapter = FileAdapter(str(tmp_path / "server.log"))
    adapter.close()
    adapter.close()

    assert adapter.write("late\n") is False


def test_truncate_message_limits():
    """Payloads over 160 chars are cut to 159."""
    assert truncate_message("x" * 159) == "x" * 159
    assert truncate_message("x" * 160) == "x" * 160
    assert truncate_message("x" * 161) == "x" * 159
    assert truncate_message("x" * 500) == "x" * 159


def test_alert_adapter_sends_truncated_text():
    """Alert adapter forwards truncated text to recipients."""
    messaging = Mock()
    adapter = AlertAdapter(messaging, ["+31600000001", "+31600000002"])

    assert adapter.write("e" * 300) is True

    messaging.send_text.assert_called_once_with(
        ("+31600000001", "+31600000002"), "e" * 159
    )


def test_alert_adapter_transport_failure(capsys):
    """Transport failure returns False without retry."""
    messaging = Mock()
    messaging.send_text.side_effect = MessagingError("send failed: 401")
    adapter = AlertAdapter(messaging, ["+31600000001"])

    assert adapter.write("Server error") is False
    messaging.send_text.assert_called_once()
    assert "send failed: 401" in capsys.readouterr().err


@patch('statussim.adapters.messagebird_adapter.requests.post')
def test_messagebird_adapter_sends_sms(mock_post, capsys):
    """MessageBird adapter posts message form."""
    mock_post.return_value = Mock(
        status_code=201,
        json=lambda: {"id": "msg-123"}
    )

    adapter = MessageBirdAdapter("test_key", "MBServerMon")
    adapter.send_text(["+31600000001", "+31600000002"], "Server error")

    mock_post.assert_called_once()
    kwargs = mock_post.call_args[1]
    assert kwargs["headers"]["Authorization"] == "AccessKey test_key"
    assert kwargs["data"] == {
        "originator": "MBServerMon",
        "recipients": "+31600000001,+31600000002",
        "body": "Server error",
    }
    assert "Message sent: msg-123" in capsys.readouterr().out


@patch('statussim.adapters.messagebird_adapter.requests.post')
def test_messagebird_adapter_rejected(mock_post):
    """Non-201 response raises MessagingError."""
    mock_post.return_value = Mock(status_code=401)

    adapter = MessageBirdAdapter("bad_key", "MBServerMon")

    with pytest.raises(MessagingError):
        adapter.send_text(["+31600000001"], "Server error")


@patch('statussim.adapters.messagebird_adapter.requests.post')
def test_messagebird_adapter_network_error(mock_post):
    """Connection errors surface as MessagingError."""
    mock_post.side_effect = requests.ConnectionError("unreachable")

    adapter = MessageBirdAdapter("test_key", "MBServerMon")

    with pytest.raises(MessagingError):
        adapter.send_text(["+31600000001"], "Server error")


def test_messagebird_adapter_requires_recipients():
    """Empty recipient list is rejected before sending."""
    adapter = MessageBirdAdapter("test_key", "MBServerMon")

    with pytest.raises(MessagingError):
        adapter.send_text([], "Server error")


@patch('statussim.adapters.telegram_bot_adapter.Bot')
def test_telegram_adapter_sends_to_each_chat(mock_bot_cls):
    """Telegram adapter messages every chat id."""
    bot = Mock()
    bot.send_message = AsyncMock()
    context = MagicMock()
    context.__aenter__.return_value = bot
    mock_bot_cls.return_value = context

    adapter = TelegramBotAdapter("test_token")
    adapter.send_text(["111", "222"], "Server error")

    mock_bot_cls.assert_called_once_with(token="test_token")
    assert bot.send_message.await_count == 2
    bot.send_message.assert_any_await(chat_id="111", text="Server error")
    bot.send_message.assert_any_await(chat_id="222", text="Server error")
