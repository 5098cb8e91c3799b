"""Topic and subscription provisioning followed by a publish, per button press."""

import logging
from typing import Any, Dict, Optional

from .config import ProvisioningConfig
from .models import EMAIL_PROTOCOL, ButtonEvent, NotificationMessage, Subscription
from .notification_client import NotificationClient
from .state_machine import (
    ERROR,
    PUBLISHED,
    START,
    SUBSCRIPTION_ENSURED,
    TOPIC_RESOLVED,
    is_terminal,
    validate_transition,
)

logger = logging.getLogger(__name__)


class Provisioner:
    """
    Runs one invocation: resolve topic, ensure the email subscription, publish.

    Build a new instance per invocation; the state it tracks belongs to that
    invocation only.
    """

    def __init__(self, client: NotificationClient, config: ProvisioningConfig):
        self.client = client
        self.config = config
        self.state = START
        self.topic_arn: Optional[str] = None

    def _advance(self, new_state: str) -> None:
        validate_transition(self.state, new_state)
        logger.debug(f"Invocation state {self.state} -> {new_state}")
        self.state = new_state

    def resolve_topic(self) -> str:
        """
        Create the configured topic, or get it back if it already exists.

        Returns:
            The topic ARN.
        """
        topic_arn = self.client.create_topic(self.config.topic_name)
        logger.info(f"Created topic: {topic_arn}")
        return topic_arn

    def find_existing_subscription(self, topic_arn: str) -> Optional[Subscription]:
        """
        Scan every page of the topic's subscriptions for the configured email.

        Matching is exact on protocol and endpoint. Stops at the first match.

        Args:
            topic_arn: Topic to scan.

        Returns:
            The matching subscription, or None if no page contains one.
        """
        next_token = None
        while True:
            page = self.client.list_subscriptions_by_topic(topic_arn, next_token)
            for subscription in page.subscriptions:
                if subscription.matches(EMAIL_PROTOCOL, self.config.email):
                    return subscription
            if not page.next_token:
                return None
            next_token = page.next_token

    def ensure_subscription(self, topic_arn: str) -> Optional[str]:
        """
        Subscribe the configured email to the topic unless already subscribed.

        The subscription still needs confirmation by its recipient; that is
        not waited for here.

        Returns:
            The new subscription handle, or None if one already existed.
        """
        existing = self.find_existing_subscription(topic_arn)
        if existing is not None:
            logger.info(f"{self.config.email} is already subscribed to {topic_arn}.")
            return None

        subscription_arn = self.client.subscribe(topic_arn, EMAIL_PROTOCOL, self.config.email)
        logger.info(f"Subscribed {self.config.email} to {topic_arn}.")
        return subscription_arn

    def publish(self, topic_arn: str, event: ButtonEvent) -> Dict[str, Any]:
        """Publish the button press message and return the acknowledgment as-is."""
        message = NotificationMessage.for_button_event(topic_arn, event)
        return self.client.publish(message.topic_arn, message.subject, message.body)

    def handle(self, event: ButtonEvent) -> Dict[str, Any]:
        """
        Run the full invocation for one button press.

        Args:
            event: The button press.

        Returns:
            The publish acknowledgment, unchanged.

        Raises:
            Whatever the notification client raised, unchanged. Earlier steps
            are not undone.
        """
        if is_terminal(self.state):
            raise RuntimeError(f"Provisioner already used (state {self.state})")

        logger.info(f"Received event: {event.click_type}")
        step = "create topic"
        try:
            topic_arn = self.resolve_topic()
            self.topic_arn = topic_arn
            self._advance(TOPIC_RESOLVED)

            step = "ensure subscription"
            logger.info("Creating subscriptions.")
            self.ensure_subscription(topic_arn)
            self._advance(SUBSCRIPTION_ENSURED)
            logger.info("Topic setup complete.")

            step = "publish"
            logger.info(f"Publishing to topic {topic_arn}")
            response = self.publish(topic_arn, event)
            self._advance(PUBLISHED)
        except Exception as e:
            logger.error(f"Invocation failed at step '{step}': {e}")
            self._advance(ERROR)
            raise

        return response
