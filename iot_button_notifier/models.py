"""Data models for button events and notifications."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# A "LONG" click is sent when the first press lasts longer than 1.5 seconds.
CLICK_TYPES = ("SINGLE", "DOUBLE", "LONG")

EMAIL_PROTOCOL = "email"


@dataclass(frozen=True)
class ButtonEvent:
    """Represents a single IoT button press."""
    serial_number: str     # e.g. "G030PM1234567890"
    battery_voltage: str   # e.g. "1034mV"
    click_type: str        # one of CLICK_TYPES

    @classmethod
    def from_event(cls, payload: Dict[str, Any]) -> "ButtonEvent":
        """
        Build a ButtonEvent from the raw trigger payload.

        Args:
            payload: Dict with serialNumber, batteryVoltage and clickType keys.

        Returns:
            The parsed ButtonEvent.

        Raises:
            ValueError: If the payload is not a dict, a key is missing, a value
                is not a string, or the click type is unknown.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Button event must be a JSON object, got {type(payload).__name__}")

        keys = ("serialNumber", "batteryVoltage", "clickType")
        missing = [key for key in keys if key not in payload]
        if missing:
            raise ValueError(f"Button event is missing fields: {', '.join(missing)}")

        not_strings = [key for key in keys if not isinstance(payload[key], str)]
        if not_strings:
            raise ValueError(f"Button event fields must be strings: {', '.join(not_strings)}")

        click_type = payload["clickType"]
        if click_type not in CLICK_TYPES:
            raise ValueError(
                f"Unknown clickType {click_type!r}; expected one of {', '.join(CLICK_TYPES)}"
            )

        return cls(
            serial_number=payload["serialNumber"],
            battery_voltage=payload["batteryVoltage"],
            click_type=click_type,
        )


@dataclass
class Subscription:
    """Represents one endpoint subscribed to a topic."""
    protocol: str
    endpoint: str
    subscription_arn: Optional[str] = None  # "PendingConfirmation" until confirmed
    topic_arn: Optional[str] = None

    def matches(self, protocol: str, endpoint: str) -> bool:
        """Exact comparison; no case folding or whitespace trimming."""
        return self.protocol == protocol and self.endpoint == endpoint


@dataclass
class SubscriptionPage:
    """One page of a subscription listing."""
    subscriptions: List[Subscription] = field(default_factory=list)
    next_token: Optional[str] = None


@dataclass
class NotificationMessage:
    """Outbound message for a button press."""
    topic_arn: str
    subject: str
    body: str

    @classmethod
    def for_button_event(cls, topic_arn: str, event: ButtonEvent) -> "NotificationMessage":
        return cls(
            topic_arn=topic_arn,
            subject=f"Hello from your IoT Button {event.serial_number}: {event.click_type}",
            body=(
                f"{event.serial_number} -- processed by Lambda\n"
                f"Battery voltage: {event.battery_voltage}"
            ),
        )
