"""Background tasks for notifications and outbound communications."""

import logging

import httpx

from app import config
from app.schemas import BugRecord

logger = logging.getLogger(__name__)


def build_bug_created_message(bug: BugRecord) -> dict:
    """Slack block payload announcing a new bug."""
    fields = [
        {"type": "mrkdwn", "text": f"*Title:*\n{bug.title or '_Untitled_'}"},
        {"type": "mrkdwn", "text": f"*Priority:*\n{bug.priority.value}"},
    ]
    if bug.screenshot_url:
        fields.append({"type": "mrkdwn", "text": f"*Screenshot:*\n{bug.screenshot_url}"})

    return {
        "blocks": [
            {
                "type": "header",
                "text": {
                    "type": "plain_text",
                    "text": f"New Bug #{bug.id} Reported",
                },
            },
            {
                "type": "section",
                "fields": fields,
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": f"*Description:*\n{bug.description or '_No description provided_'}",
                },
            },
        ]
    }


def notify_bug_creation(bug: BugRecord) -> None:
    """Send a Slack notification when a new bug is reported.

    Runs as a FastAPI BackgroundTask after the response is sent, so failures
    are logged and never reach the client.

    Args:
        bug: The stored bug to announce
    """
    slack_webhook_url = config.SLACK_WEBHOOK_URL
    if not slack_webhook_url:
        logger.warning("SLACK_WEBHOOK_URL not set, skipping notification")
        return

    try:
        with httpx.Client(timeout=5.0) as client:
            response = client.post(slack_webhook_url, json=build_bug_created_message(bug))
            response.raise_for_status()

        logger.info(
            "Slack notification sent successfully",
            extra={"bug_id": bug.id},
        )

    except httpx.HTTPError:
        logger.exception(
            "Failed to send Slack notification",
            extra={"bug_id": bug.id},
        )
