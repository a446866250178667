"""Tests for reply transports."""

import io
from unittest.mock import MagicMock

import requests

from ninecat.models import HelpDocument
from ninecat.transport import ConsoleTransport, WebhookTransport

DOC = HelpDocument('Title', 'Description', [('!help', 'Returns this message.')])


class TestConsoleTransport:
    def test_text(self):
        stream = io.StringIO()
        ConsoleTransport(stream).send_text('console', 'hello')
        assert stream.getvalue() == 'hello\n'

    def test_document_rendered_as_text(self):
        stream = io.StringIO()
        ConsoleTransport(stream).send_rich_document('console', DOC)
        assert '!help\n    Returns this message.' in stream.getvalue()


class TestWebhookTransport:
    def test_posts_content(self):
        session = MagicMock()
        WebhookTransport('https://hooks.example/abc', session=session).send_text(None, 'hi')
        session.post.assert_called_once_with(
            'https://hooks.example/abc', json={'content': 'hi'}, timeout=10.0
        )

    def test_posts_embed(self):
        session = MagicMock()
        WebhookTransport('https://hooks.example/abc', session=session).send_rich_document(None, DOC)
        payload = session.post.call_args.kwargs['json']
        assert payload['embeds'][0]['title'] == 'Title'
        assert payload['embeds'][0]['fields'] == [{'name': '!help', 'value': 'Returns this message.'}]

    def test_failure_logged_not_raised(self, caplog):
        """Test a failed post is logged and not retried."""
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError('refused')
        WebhookTransport('https://hooks.example/abc', session=session).send_text(None, 'hi')
        assert session.post.call_count == 1
        assert 'Webhook post failed' in caplog.text
