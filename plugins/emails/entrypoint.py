# plugins/emails/entrypoint.py
from __future__ import annotations

import logging

from terminal import ExecutionError, command
from terminal.interface import question
from terminal.ui import info, success, warn

logger = logging.getLogger("terminal.plugins.emails")


def register(context) -> None:
    out = context.stdout

    @command(
        signature="emails:send",
        description="Send an email to a recipient",
        example="emails:send alice@example.com \"Quarterly report\"",
    )
    def send(recipient: str = "", subject: str = "No subject") -> None:
        if not recipient:
            if question("No recipient given. Send to every subscriber?", file=out) == 0:
                warn("Nothing sent.", file=out)
                return
            recipient = "all subscribers"
        elif "@" not in recipient:
            raise ExecutionError(f"Invalid recipient: {recipient}")

        logger.info("Queueing '%s' for %s", subject, recipient)
        success(f"Email '{subject}' queued for {recipient}.", file=out)

    @command(signature="emails:birthday", description="Send birthday emails to users")
    def birthday() -> None:
        logger.info("Sending birthday emails...")
        info("Birthday emails sent!", file=out)

    for command_obj in (send, birthday):
        context.registry.register(command_obj)


def schedule(scheduler) -> None:
    scheduler.command("emails:birthday").daily()
