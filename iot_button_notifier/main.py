"""Command-line entry point that simulates an IoT button press."""

import argparse
import logging
import os
import sys

from .config import load_config
from .models import CLICK_TYPES, ButtonEvent
from .provisioner import Provisioner
from .sns_client import SNSNotificationClient, build_sns_client

# Configure logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def run_once(args) -> None:
    """Run a single simulated button press against SNS."""
    try:
        logger.info("Loading configuration...")
        config = load_config()
        logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))

        event = ButtonEvent.from_event({
            "serialNumber": args.serial_number,
            "batteryVoltage": args.battery_voltage,
            "clickType": args.click_type,
        })

        client = SNSNotificationClient(build_sns_client(config.aws))
        provisioner = Provisioner(client, config.provisioning)
        response = provisioner.handle(event)

        print(response.get("MessageId", ""))
        logger.info("Run completed successfully.")

    except Exception as e:
        logger.error(f"Fatal error in run_once: {e}", exc_info=True)
        sys.exit(1)


def main(argv=None):
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description="Simulate an IoT button press: provision the SNS topic and email subscription, then publish"
    )
    parser.add_argument(
        "--serial-number",
        required=True,
        help="Button serial number, e.g. G030PM1234567890"
    )
    parser.add_argument(
        "--battery-voltage",
        default="1500mV",
        help="Battery voltage reading (default: 1500mV)"
    )
    parser.add_argument(
        "--click-type",
        choices=CLICK_TYPES,
        default="SINGLE",
        help="Click type (default: SINGLE)"
    )
    parser.add_argument(
        "--email",
        type=str,
        default=None,
        help="Email address to subscribe (overrides NOTIFICATION_EMAIL env var)"
    )
    parser.add_argument(
        "--topic-name",
        type=str,
        default=None,
        help="SNS topic name (overrides SNS_TOPIC_NAME env var)"
    )

    args = parser.parse_args(argv)

    if args.email:
        os.environ["NOTIFICATION_EMAIL"] = args.email

    if args.topic_name:
        os.environ["SNS_TOPIC_NAME"] = args.topic_name

    run_once(args)


if __name__ == "__main__":
    main()
