"""SMTP mail transport."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

from meetsynth.domain.delivery import MailMessage
from meetsynth.errors import ServiceMisconfiguredError

logger = logging.getLogger(__name__)


class SMTPMailTransport:
    """Send single messages over SMTP with STARTTLS.

    smtplib is blocking, so each send runs in a worker thread with its own
    connection. Concurrent sends therefore never share an SMTP session.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str | None = None,
        use_tls: bool = True,
        timeout_seconds: int = 30,
    ) -> None:
        """Initialize the transport.

        Args:
            host: SMTP server hostname
            port: SMTP server port (587 for STARTTLS)
            username: SMTP login
            password: SMTP password (an app password for Gmail)
            sender: From address, defaults to the username
            use_tls: Upgrade the connection with STARTTLS
            timeout_seconds: Socket timeout per connection
        """
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.use_tls = use_tls
        self.timeout_seconds = timeout_seconds

        if host == "smtp.gmail.com" and username and not password:
            logger.warning("Gmail requires an App Password (not your regular password)")

    @property
    def is_configured(self) -> bool:
        """Check that login credentials are present."""
        return bool(self.username and self.password)

    def _build_message(self, message: MailMessage) -> EmailMessage:
        """Build a multipart/alternative message with text and HTML parts."""
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = message.recipient
        msg["Subject"] = message.subject
        msg["Message-ID"] = make_msgid()
        msg.set_content(message.text_body)
        msg.add_alternative(message.html_body, subtype="html")
        return msg

    def _send_sync(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds) as server:
            if self.use_tls:
                server.starttls()
            server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, message: MailMessage) -> str:
        """Send one message and return its Message-ID.

        Raises:
            ServiceMisconfiguredError: If credentials are missing
            OSError: If delivery fails (smtplib.SMTPException is an OSError)
        """
        if not self.is_configured:
            raise ServiceMisconfiguredError("Email credentials are not configured")

        msg = self._build_message(message)
        await asyncio.to_thread(self._send_sync, msg)
        logger.info(f"Email sent successfully to {message.recipient}")
        return msg["Message-ID"]
