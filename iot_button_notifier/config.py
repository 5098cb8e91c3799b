"""Configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TOPIC_NAME = "aws-iot-button-sns-topic"
DEFAULT_REGION = "us-east-1"


@dataclass
class ProvisioningConfig:
    """Topic and subscription settings."""
    topic_name: str
    email: str      # used verbatim; matching against existing subscriptions is exact


@dataclass
class AWSConfig:
    """AWS client settings."""
    region: str
    endpoint_url: Optional[str] = None  # e.g. a local SNS emulator


@dataclass
class AppConfig:
    """Complete application configuration."""
    provisioning: ProvisioningConfig
    aws: AWSConfig
    log_level: str = "INFO"


def load_aws_config() -> AWSConfig:
    """Load AWS client settings; none of them are required."""
    return AWSConfig(
        region=os.getenv("AWS_REGION", DEFAULT_REGION),
        endpoint_url=os.getenv("SNS_ENDPOINT_URL") or None,
    )


def load_config() -> AppConfig:
    """
    Load configuration from environment variables.

    Raises:
        ValueError: If required configuration values are missing.
    """
    # Provisioning
    email = os.getenv("NOTIFICATION_EMAIL")
    topic_name = os.getenv("SNS_TOPIC_NAME", DEFAULT_TOPIC_NAME)

    # Applied by the CLI; the Lambda runtime keeps INFO
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    # Validate required fields
    missing = []
    if not email:
        missing.append("NOTIFICATION_EMAIL")
    if not topic_name:
        missing.append("SNS_TOPIC_NAME")

    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    return AppConfig(
        provisioning=ProvisioningConfig(
            topic_name=topic_name,
            email=email,
        ),
        aws=load_aws_config(),
        log_level=log_level,
    )
