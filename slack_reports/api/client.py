"""
Slack Delivery Client

Serializes Messages and posts them to the Slack Web API with bounded retry.
"""

import json
import logging
import threading
from typing import Dict, Optional, Union

import requests

from ..config import SlackConfig
from ..exceptions import (
    ApplicationError,
    InvalidInputError,
    TransportError,
)
from ..messages import Message, MessageBuilder
from ..monitoring import add_breadcrumb
from ..templates import MessageTemplate, TemplateFunction
from .retry import RetryStrategy
from .types import SlackResponse

logger = logging.getLogger(__name__)


class SlackClient:
    """
    Sends Block Kit messages through chat.postMessage.

    Usage:
        config = SlackConfig.from_env()
        client = SlackClient(config)

        message = client.create_message().add_header("Hello").build()
        client.send_message(message)

    Every send either returns the SlackResponse of a delivered message or
    raises a DeliveryError subclass. Sends may run concurrently from several
    threads; each thread posts through its own requests.Session unless one
    is passed in.
    """

    def __init__(
        self,
        config: Optional[SlackConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize Slack client.

        Args:
            config: SlackConfig with token, default channel and retry policy
            session: requests session shared by every send (omit it to get
                one session per calling thread)
        """
        self.config = config or SlackConfig.from_env()
        self._session = session
        self._local = threading.local()
        self._retry = RetryStrategy(
            max_attempts=self.config.retry_attempts,
            delay=self.config.retry_delay_seconds,
            exponential_backoff=False,
            retryable_exceptions=[TransportError, ApplicationError],
        )

    def send_simple_message(self, text: str, channel: Optional[str] = None) -> SlackResponse:
        """
        Send a plain markdown message.

        Args:
            text: Message text (also used as the notification fallback)
            channel: Target channel (default channel if omitted)

        Returns:
            SlackResponse of the delivered message
        """
        message = MessageBuilder.create(channel).text(text).add_section(text).build()
        return self.send_message(message, channel)

    def send_template(
        self,
        template: Union[MessageTemplate, TemplateFunction],
        channel: Optional[str] = None,
    ) -> SlackResponse:
        """
        Build a message from a template and send it.

        Args:
            template: Zero-argument callable returning a Message, or an
                object with a build_message() method
            channel: Target channel (default channel if omitted)

        Returns:
            SlackResponse of the delivered message
        """
        build = getattr(template, "build_message", template)
        return self.send_message(build(), channel)

    def create_message(self, channel: Optional[str] = None) -> MessageBuilder:
        """Start a builder addressed to channel, or the default channel."""
        return MessageBuilder.create(channel or self.config.default_channel_id)

    def send_message(
        self,
        message: Optional[Message],
        channel: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> SlackResponse:
        """
        Send a message, retrying transient failures.

        Args:
            message: Message to send
            channel: Target channel (default channel if omitted)
            cancel_event: Optional event checked before each attempt and
                during the delay between attempts

        Returns:
            SlackResponse of the delivered message

        Raises:
            InvalidInputError: Missing message, channel or token (no request made)
            RetriesExhaustedError: Every attempt failed
            DeliveryInterruptedError: cancel_event was set
        """
        target = channel if channel is not None else self.config.default_channel_id
        self._validate_inputs(message, target)

        outgoing = message.with_channel(target)
        payload_json = json.dumps(outgoing.to_payload(self.config.fallback_text), ensure_ascii=False)
        logger.debug("Slack request payload: %s", payload_json)
        body = payload_json.encode("utf-8")

        attempts = 0

        def attempt() -> SlackResponse:
            nonlocal attempts
            attempts += 1
            logger.info("Sending Slack message to %s, attempt %d", target, attempts)
            add_breadcrumb(
                message=f"chat.postMessage attempt {attempts}",
                data={"channel": target, "blocks": len(outgoing.blocks)},
            )
            return self._post(body)

        response = self._retry.execute(
            attempt,
            on_retry=self._log_retry,
            cancel_event=cancel_event,
        )
        logger.info("Slack message sent successfully (ts=%s)", response.ts)
        return response

    def _validate_inputs(self, message: Optional[Message], channel: Optional[str]) -> None:
        if message is None:
            raise InvalidInputError("Message cannot be None")
        if not channel or not channel.strip():
            raise InvalidInputError("Channel ID cannot be empty")
        if not self.config.bot_token or not self.config.bot_token.strip():
            raise InvalidInputError("Bot token is not configured")

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": f"Bearer {self.config.bot_token}",
        }

    def _get_session(self) -> requests.Session:
        """Return the injected session, or the one owned by the calling thread."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def _post(self, body: bytes) -> SlackResponse:
        """
        Perform a single HTTP request and interpret the response.

        Raises:
            TransportError: Network failure or timeout
            ApplicationError: HTTP error status, non-JSON body or ok=false
        """
        # 0 means no timeout
        timeout = self.config.timeout_seconds or None

        try:
            response = self._get_session().post(
                self.config.api_url,
                data=body,
                headers=self._headers(),
                timeout=timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to Slack failed: {e}") from e

        status = response.status_code
        logger.debug("Slack API response %d: %s", status, response.text)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not 200 <= status < 300:
            error_code = data.get("error") if isinstance(data, dict) else None
            raise ApplicationError(
                f"HTTP error {status}",
                error_code=error_code,
                http_status=status,
            )

        if not isinstance(data, dict):
            raise ApplicationError(
                "Slack returned a non-JSON response",
                error_code="invalid_response",
                http_status=status,
            )

        result = SlackResponse.from_dict(data, status_code=status)
        if not result.is_successful:
            raise ApplicationError(
                f"Slack API returned error: {result.error_message}",
                error_code=result.error_message,
                http_status=status,
            )

        if result.warning:
            logger.warning("Slack API warning: %s", result.warning)
        return result

    def _log_retry(self, attempt: int, error: Exception) -> None:
        logger.warning(
            "Error sending Slack message (attempt %d): %s; retrying in %dms",
            attempt,
            error,
            self.config.retry_delay_ms,
        )
