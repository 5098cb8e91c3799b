"""Amazon SNS implementation of the notification client."""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import AWSConfig
from .models import Subscription, SubscriptionPage
from .notification_client import NotificationClient

logger = logging.getLogger(__name__)

SNS_API_VERSION = "2010-03-31"


def build_sns_client(config: AWSConfig):
    """Create a boto3 SNS client for the configured region and endpoint."""
    kwargs = {
        "region_name": config.region,
        "api_version": SNS_API_VERSION,
    }
    if config.endpoint_url:
        kwargs["endpoint_url"] = config.endpoint_url
    return boto3.client("sns", **kwargs)


class SNSNotificationClient(NotificationClient):
    """Notification client backed by a boto3 SNS client."""

    def __init__(self, client):
        """
        Args:
            client: A boto3 SNS client (see build_sns_client).
        """
        self.client = client

    def create_topic(self, name: str) -> str:
        try:
            response = self.client.create_topic(Name=name)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Creating topic failed. {e}")
            raise
        return response["TopicArn"]

    def list_subscriptions_by_topic(
        self,
        topic_arn: str,
        next_token: Optional[str] = None
    ) -> SubscriptionPage:
        params = {"TopicArn": topic_arn}
        # SNS rejects an explicit null token, so only send it when paging
        if next_token:
            params["NextToken"] = next_token

        try:
            response = self.client.list_subscriptions_by_topic(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error listing subscriptions. {e}")
            raise

        subscriptions = [
            Subscription(
                protocol=item.get("Protocol", ""),
                endpoint=item.get("Endpoint", ""),
                subscription_arn=item.get("SubscriptionArn"),
                topic_arn=item.get("TopicArn"),
            )
            for item in response.get("Subscriptions", [])
        ]
        return SubscriptionPage(
            subscriptions=subscriptions,
            next_token=response.get("NextToken") or None,
        )

    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> str:
        try:
            response = self.client.subscribe(
                TopicArn=topic_arn,
                Protocol=protocol,
                Endpoint=endpoint,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error setting up {protocol} subscription. {e}")
            raise
        return response.get("SubscriptionArn", "")

    def publish(self, topic_arn: str, subject: str, message: str) -> Dict[str, Any]:
        try:
            response = self.client.publish(
                TopicArn=topic_arn,
                Subject=subject,
                Message=message,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error publishing to {topic_arn}. {e}")
            raise
        logger.info(f"Published message {response.get('MessageId')} to {topic_arn}")
        return response
