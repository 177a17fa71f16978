"""
Support email service.

Sends admin replies to contact-support messages over SMTP with aiosmtplib.
A reply is a multipart/alternative message with a plain-text and an HTML
part; user-provided text is HTML-escaped before it is placed in the HTML part.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

import aiosmtplib

from mindpulse.core.logging_config import get_logger
from mindpulse.server.core.config import SMTPConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReplyEmailData:
    to: str
    from_name: str
    original_subject: str
    original_message: str
    reply_message: str


def _html_block(text: str) -> str:
    return html.escape(text).replace("\n", "<br>")


def render_reply_html(data: ReplyEmailData) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Reply from MindPulse Support</title>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 20px; border-radius: 8px 8px 0 0; }}
    .content {{ background: #f9f9f9; padding: 20px; }}
    .original-message {{ background: #e9ecef; padding: 15px; border-left: 4px solid #667eea; margin: 20px 0; }}
    .reply-message {{ background: white; padding: 15px; border-left: 4px solid #28a745; margin: 20px 0; }}
    .footer {{ background: #f8f9fa; padding: 15px; text-align: center; font-size: 12px; color: #6c757d; border-radius: 0 0 8px 8px; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>MindPulse Support</h1>
      <p>Thank you for contacting us</p>
    </div>
    <div class="content">
      <p>Dear {html.escape(data.from_name)},</p>
      <p>Thank you for reaching out to MindPulse support. We have received your message and are responding to your inquiry.</p>
      <div class="original-message">
        <h4>Your Original Message:</h4>
        <p><strong>Subject:</strong> {html.escape(data.original_subject)}</p>
        <p>{_html_block(data.original_message)}</p>
      </div>
      <div class="reply-message">
        <h4>Our Response:</h4>
        <p>{_html_block(data.reply_message)}</p>
      </div>
      <p>If you have any further questions or need additional assistance, please don't hesitate to contact us again.</p>
      <p>Best regards,<br>The MindPulse Support Team</p>
    </div>
    <div class="footer">
      <p>This is an automated response from MindPulse Support</p>
    </div>
  </div>
</body>
</html>
"""


def render_reply_text(data: ReplyEmailData) -> str:
    return f"""MindPulse Support - Response to Your Inquiry

Dear {data.from_name},

Thank you for reaching out to MindPulse support. We have received your message and are responding to your inquiry.

Your Original Message:
Subject: {data.original_subject}
{data.original_message}

Our Response:
{data.reply_message}

If you have any further questions or need additional assistance, please don't hesitate to contact us again.

Best regards,
The MindPulse Support Team

---
This is an automated response from MindPulse Support
"""


class EmailService:
    """SMTP sender for support replies.

    Args:
        config: SMTP settings; without a host every send is skipped and reported as failed.
    """

    def __init__(self, config: SMTPConfig) -> None:
        self.config = config

    def build_reply_message(self, data: ReplyEmailData) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = formataddr((self.config.from_name, self.config.from_address))
        msg["To"] = data.to
        msg["Subject"] = f"Re: {data.original_subject}"
        msg.attach(MIMEText(render_reply_text(data), "plain", "utf-8"))
        msg.attach(MIMEText(render_reply_html(data), "html", "utf-8"))
        return msg

    async def send_reply_email(self, data: ReplyEmailData) -> bool:
        """Send a reply; returns False instead of raising when sending is impossible or fails."""
        if not self.config.configured:
            logger.error("SMTP is not configured (SMTP_HOST unset); reply email not sent")
            return False

        try:
            await aiosmtplib.send(
                self.build_reply_message(data),
                hostname=self.config.host,
                port=self.config.port,
                username=self.config.username,
                password=self.config.password,
                use_tls=self.config.use_tls,
                timeout=self.config.timeout,
            )
        except Exception as e:
            logger.error(f"Failed to send reply email to {data.to}: {e}")
            return False

        logger.info(f"Reply email sent to {data.to}")
        return True

    async def test_connection(self) -> bool:
        """Open and close an SMTP session with the configured server."""
        if not self.config.configured:
            return False

        client = aiosmtplib.SMTP(
            hostname=self.config.host,
            port=self.config.port,
            use_tls=self.config.use_tls,
            timeout=self.config.timeout,
        )
        try:
            await client.connect()
            if self.config.username and self.config.password:
                await client.login(self.config.username, self.config.password)
            await client.quit()
        except Exception as e:
            logger.error(f"Email connection test failed: {e}")
            return False
        finally:
            # release the transport even when login fails
            client.close()
        return True
