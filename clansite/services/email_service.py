# clansite/services/email_service.py
"""Clan Site - Email Service via SendGrid"""

import logging
import threading
from flask import current_app
from markupsafe import escape
from ..errors import DeliveryError

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = """
<div dir="rtl" style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #4f46e5;">Message from {site_name}</h2>
  <div style="background-color: #f9fafb; padding: 20px; border-radius: 8px; margin-top: 20px;">
    {body}
  </div>
  <p style="margin-top: 30px; color: #6b7280; font-size: 14px;">
    This message was sent by the {site_name} system - please do not reply to this email
  </p>
</div>
"""


def render_message(message, site_name):
    """Fixed HTML template with the message body; newlines become <br>."""
    body = str(escape(message)).replace('\r\n', '\n').replace('\n', '<br>')
    return MESSAGE_TEMPLATE.format(site_name=escape(site_name), body=body)


class EmailService:
    """Outbound email used for admin-initiated messages to players."""

    def __init__(self, api_key=None, default_sender=None, sender_name=None):
        self.api_key = api_key
        self.default_sender = default_sender
        self.sender_name = sender_name

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get('SENDGRID_API_KEY'),
            default_sender=config.get('MAIL_DEFAULT_SENDER'),
            sender_name=config.get('MAIL_SENDER_NAME'),
        )

    def send_email(self, to_email, subject, html_content, sender_name=None):
        """
        Send email via SendGrid.

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_content: HTML email body
            sender_name: Display name for the From header (optional)

        Raises:
            DeliveryError: not configured, rejected by SendGrid or transport failure
        """
        import sendgrid
        from sendgrid.helpers.mail import Mail, From

        if not self.api_key:
            raise DeliveryError('SENDGRID_API_KEY not configured - email not sent')

        sg = sendgrid.SendGridAPIClient(api_key=self.api_key)

        try:
            message = Mail(
                from_email=From(self.default_sender, sender_name or self.sender_name),
                to_emails=to_email,
                subject=subject,
                html_content=html_content
            )
            response = sg.send(message)
        except Exception as e:
            raise DeliveryError(f'Failed to send email: {e}') from e

        if response.status_code not in (200, 201, 202):
            raise DeliveryError(f'SendGrid error: {response.status_code} - {response.body}')

        logger.info(f"Email sent to {to_email}: {subject}")

    def send_player_message(self, to_email, message, sender_name=None):
        """
        Dispatch an admin message without waiting for delivery.

        Returns:
            threading.Thread: the detached sender (callers never join it in requests)
        """
        sender_name = sender_name or self.sender_name
        subject = f'Message from {self.sender_name}'
        html_content = render_message(message, self.sender_name)
        app = current_app._get_current_object()

        def _deliver():
            with app.app_context():
                try:
                    self.send_email(to_email, subject, html_content, sender_name=sender_name)
                except DeliveryError as e:
                    app.logger.error(f"Email sending error to {to_email}: {e.message}")
                except Exception as e:
                    app.logger.error(f"Email sending error to {to_email}: {e}", exc_info=True)

        thread = threading.Thread(target=_deliver, name='email-dispatch', daemon=True)
        thread.start()
        return thread
