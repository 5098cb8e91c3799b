"""Shared fixtures: an in-memory notification client and event payloads."""

import importlib.util
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from botocore.exceptions import ClientError

from iot_button_notifier.config import ProvisioningConfig
from iot_button_notifier.models import Subscription, SubscriptionPage
from iot_button_notifier.notification_client import NotificationClient

TARGET_EMAIL = "a@b.com"
TOPIC_NAME = "aws-iot-button-sns-topic"
HANDLER_PATH = Path(__file__).resolve().parent.parent / "lambda-functions" / "iot-button-email" / "handler.py"


def client_error(operation: str, code: str = "AuthorizationError") -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": f"{operation} denied"}},
        operation,
    )


def make_pages(*pages: List[Subscription]) -> List[SubscriptionPage]:
    """Chain subscription lists into pages linked by continuation tokens."""
    result = []
    for index, subscriptions in enumerate(pages):
        next_token = f"token-{index + 1}" if index + 1 < len(pages) else None
        result.append(SubscriptionPage(subscriptions=list(subscriptions), next_token=next_token))
    return result


class FakeNotificationClient(NotificationClient):
    """Records calls in order. create_topic is idempotent by name, like SNS."""

    def __init__(
        self,
        pages: Optional[List[SubscriptionPage]] = None,
        failures: Optional[Dict[str, Exception]] = None,
        existing_topics: Optional[List[str]] = None,
    ):
        self.pages = pages if pages is not None else [SubscriptionPage()]
        self.failures = failures or {}
        self.topics: Dict[str, str] = {
            name: self._arn(name) for name in (existing_topics or [])
        }
        self.created_topics: List[str] = []
        self.calls: List[tuple] = []
        self.published: List[Dict[str, str]] = []

    @staticmethod
    def _arn(name: str) -> str:
        return f"arn:aws:sns:us-east-1:123456789012:{name}"

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if call[0] in self.failures:
            raise self.failures[call[0]]

    def operations(self) -> List[str]:
        return [call[0] for call in self.calls]

    def create_topic(self, name: str) -> str:
        self._record("create_topic", name)
        if name not in self.topics:
            self.topics[name] = self._arn(name)
            self.created_topics.append(name)
        return self.topics[name]

    def list_subscriptions_by_topic(self, topic_arn: str, next_token: Optional[str] = None) -> SubscriptionPage:
        self._record("list_subscriptions_by_topic", topic_arn, next_token)
        index = 0 if next_token is None else int(next_token.split("-")[1])
        return self.pages[index]

    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> str:
        self._record("subscribe", topic_arn, protocol, endpoint)
        return "pending confirmation"

    def publish(self, topic_arn: str, subject: str, message: str) -> Dict[str, Any]:
        self._record("publish", topic_arn, subject, message)
        self.published.append({"TopicArn": topic_arn, "Subject": subject, "Message": message})
        return {"MessageId": f"message-{len(self.published)}"}


@pytest.fixture
def provisioning_config():
    return ProvisioningConfig(topic_name=TOPIC_NAME, email=TARGET_EMAIL)


@pytest.fixture
def button_payload():
    return {
        "serialNumber": "G030PM1234567890",
        "batteryVoltage": "1034mV",
        "clickType": "SINGLE",
    }


def load_handler():
    """Load the Lambda handler from its deployment directory."""
    spec = importlib.util.spec_from_file_location("iot_button_email_handler", HANDLER_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def handler_module(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.delenv("SNS_ENDPOINT_URL", raising=False)
    return load_handler()
