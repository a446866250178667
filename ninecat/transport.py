"""Outbound chat transports."""

import logging
from typing import Protocol, TextIO

import requests

from .models import HelpDocument

logger = logging.getLogger('ninecat.transport')


class Transport(Protocol):
    """Where replies go. `channel` is whatever the inbound side handed us."""

    def send_text(self, channel, text: str) -> None: ...

    def send_rich_document(self, channel, document: HelpDocument) -> None: ...


class ConsoleTransport:
    """Writes replies to a text stream, one block per reply."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def send_text(self, channel, text: str) -> None:
        self.stream.write(text + '\n')
        self.stream.flush()

    def send_rich_document(self, channel, document: HelpDocument) -> None:
        self.send_text(channel, document.to_text())


class WebhookTransport:
    """
    Posts replies to a Discord-style webhook URL.

    Failed posts are logged and dropped; there is no retry.
    """

    def __init__(self, url: str, timeout: float = 10.0, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, payload: dict) -> None:
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f'Webhook post failed: {e}')

    def send_text(self, channel, text: str) -> None:
        self._post({'content': text})

    def send_rich_document(self, channel, document: HelpDocument) -> None:
        self._post({'embeds': [document.to_embed()]})
