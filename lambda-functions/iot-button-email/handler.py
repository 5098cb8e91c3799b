"""
Lambda function that emails a notification on each IoT button press.
Triggered by an AWS IoT rule with the button payload:

{
    "serialNumber": "GXXXXXXXXXXXXXXXXX",
    "batteryVoltage": "xxmV",
    "clickType": "SINGLE" | "DOUBLE" | "LONG"
}

The SNS topic and the email subscription are provisioned on every call.
The execution role needs sns:CreateTopic, sns:ListSubscriptionsByTopic,
sns:Subscribe and sns:Publish.
"""

import logging
from typing import Dict, Any

from iot_button_notifier.config import load_aws_config, load_config
from iot_button_notifier.models import ButtonEvent
from iot_button_notifier.provisioner import Provisioner
from iot_button_notifier.sns_client import SNSNotificationClient, build_sns_client

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Initialize AWS clients
notification_client = SNSNotificationClient(build_sns_client(load_aws_config()))


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Provision the topic and subscription, then publish the button press.
    Returns the SNS publish response; errors propagate to the runtime.
    """
    try:
        config = load_config()
        button_event = ButtonEvent.from_event(event)
        provisioner = Provisioner(notification_client, config.provisioning)
        return provisioner.handle(button_event)
    except Exception as e:
        logger.error(f"Error handling button press: {str(e)}", exc_info=True)
        raise
