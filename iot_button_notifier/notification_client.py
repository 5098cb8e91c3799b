"""Abstract notification service client interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .models import SubscriptionPage


class NotificationClient(ABC):
    """Abstract base class for pub/sub notification clients."""

    @abstractmethod
    def create_topic(self, name: str) -> str:
        """
        Create a topic, or return the existing one with the same name.

        Args:
            name: Topic name.

        Returns:
            The topic identifier (ARN).
        """
        pass

    @abstractmethod
    def list_subscriptions_by_topic(
        self,
        topic_arn: str,
        next_token: Optional[str] = None
    ) -> SubscriptionPage:
        """
        Fetch one page of subscriptions for a topic.

        Args:
            topic_arn: Topic identifier.
            next_token: Continuation token from the previous page, or None for the first page.

        Returns:
            The page, with next_token set when more pages remain.
        """
        pass

    @abstractmethod
    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> str:
        """Subscribe an endpoint to a topic and return the subscription handle."""
        pass

    @abstractmethod
    def publish(self, topic_arn: str, subject: str, message: str) -> Dict[str, Any]:
        """Publish a message and return the service acknowledgment unchanged."""
        pass
