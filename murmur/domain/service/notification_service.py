"""Email notification domain service."""

import html
import time
from enum import Enum

import logfire
from pydantic import BaseModel

from murmur.config import AdminEmailMap
from murmur.domain.model.comment import Comment, CommentAuthor
from murmur.domain.value import normalize_email

from .base import Service


class EmailMessage(BaseModel):
    """Outbound email."""

    to: str
    subject: str
    html: str
    text: str
    sender_name: str
    headers: dict[str, str] = {}


class EmailSender:
    """Generic outbound email delivery interface."""

    async def send(self, message: EmailMessage) -> bool:
        """Deliver an email.

        Args:
            message: Message to deliver

        Returns:
            True if the delivery service accepted the message
        """
        raise NotImplementedError


class RecipientType(str, Enum):
    """Why a recipient is notified."""

    ADMIN = "admin"
    AUTHOR = "author"


class Recipient(BaseModel):
    """Notification recipient."""

    email: str
    name: str
    type: RecipientType


class NotificationService(Service):
    """Sends login codes and new-comment notifications."""

    def __init__(
        self,
        email_sender: EmailSender,
        admin_emails: AdminEmailMap,
        sender_name: str,
    ) -> None:
        """Initialize notification service.

        Args:
            email_sender: Email delivery implementation
            admin_emails: Admin recipients per site
            sender_name: Display name of outgoing mail
        """
        self.email_sender = email_sender
        self.admin_emails = admin_emails
        self.sender_name = sender_name

    async def send_login_code(self, email: str, code: str, ttl_minutes: int) -> bool:
        """Email a one-time login code.

        Returns:
            True if the delivery service accepted the message
        """
        message = EmailMessage(
            to=email,
            subject="Your Login Code",
            html=(
                f"Your login verification code is: <strong>{code}</strong><br>"
                f"It expires in {ttl_minutes} minutes.<br><br>"
                "If you did not request this, please ignore this email."
            ),
            text=f"Your login verification code is: {code}",
            sender_name="Admin Login",
        )
        return await self.email_sender.send(message)

    def recipients_for(
        self, comment: Comment, parent_author: CommentAuthor | None
    ) -> list[Recipient]:
        """Work out who hears about a new comment.

        The parent's author (for replies) comes first, then the site's
        admins. Duplicates and the commenter's own address are dropped.
        """
        recipients: list[Recipient] = []
        seen: set[str] = set()
        commenter = normalize_email(comment.email) if comment.email else None

        def add(email: str, name: str, recipient_type: RecipientType) -> None:
            key = normalize_email(email)
            if not key or key in seen or key == commenter:
                return
            seen.add(key)
            recipients.append(Recipient(email=email, name=name, type=recipient_type))

        if parent_author is not None and parent_author.email:
            add(parent_author.email, parent_author.author_name, RecipientType.AUTHOR)

        for admin in self.admin_emails.for_site(comment.site_id):
            add(admin, "Admin", RecipientType.ADMIN)

        return recipients

    def build_message(self, comment: Comment, recipient: Recipient) -> EmailMessage:
        """Render the notification for one recipient."""
        site_id = comment.site_id
        link = (
            f"{comment.context_url}#comment-{comment.id}"
            if comment.context_url
            else f"(Site ID: {site_id})"
        )

        if recipient.type is RecipientType.AUTHOR:
            subject = f"Re: {site_id} - New reply to your comment"
            heading = "New Reply to Your Comment"
        else:
            subject = f"[Admin] New Comment on {site_id}"
            heading = "New Comment Received"

        author = html.escape(comment.author_name)
        content = html.escape(comment.content)
        href = html.escape(link, quote=True)
        html_body = f"""
<div style="font-family: sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #eee; border-radius: 8px;">
    <h2 style="color: #333;">{heading}</h2>
    <p style="color: #666;"><strong>{author}</strong> wrote:</p>
    <blockquote style="background: #f9fafb; padding: 16px; border-left: 4px solid #3b82f6; margin: 16px 0; color: #374151;">
        {content}
    </blockquote>
    <p style="margin-top: 24px;">
        <a href="{href}" style="background-color: #2563eb; color: white; padding: 10px 20px; text-decoration: none; border-radius: 6px; display: inline-block;">View Comment</a>
    </p>
</div>
"""
        text_body = (
            f"New comment from {comment.author_name}:\n\n{comment.content}\n\n"
            f"View here: {link}"
        )

        return EmailMessage(
            to=recipient.email,
            subject=subject,
            html=html_body,
            text=text_body,
            sender_name=self.sender_name,
            headers={
                "Message-ID": f"<{comment.id}.{int(time.time() * 1000)}@{site_id}.comments>",
                "X-Entity-Ref-ID": str(comment.id),
            },
        )

    async def notify_new_comment(
        self, comment: Comment, parent_author: CommentAuthor | None
    ) -> int:
        """Email the parent author and site admins about a new comment.

        Delivery failures are logged and skipped.

        Returns:
            Number of messages accepted by the delivery service
        """
        with logfire.span(
            "notification_service.notify_new_comment",
            comment_id=comment.id,
            site_id=comment.site_id,
        ):
            recipients = self.recipients_for(comment, parent_author)
            delivered = 0
            for recipient in recipients:
                message = self.build_message(comment, recipient)
                if await self.email_sender.send(message):
                    delivered += 1
                else:
                    logfire.warn(
                        "Notification not delivered",
                        comment_id=comment.id,
                        recipient_type=recipient.type.value,
                    )

            logfire.info(
                "Comment notifications sent",
                comment_id=comment.id,
                recipients=len(recipients),
                delivered=delivered,
            )
            return delivered
