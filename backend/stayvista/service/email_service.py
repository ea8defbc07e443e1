# stayvista/service/email_service.py
import logging
import smtplib
from email.message import EmailMessage

from stayvista.core.config import settings

logger = logging.getLogger(__name__)


def send_email(to_email: str, subject: str, html_body: str):
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = f'"StayVista" <{settings.SMTP_USER}>'
    msg["To"] = to_email
    msg.set_content(html_body, subtype="html")

    with smtplib.SMTP_SSL(settings.SMTP_SERVER, settings.SMTP_PORT) as smtp:
        smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
        smtp.send_message(msg)
    logger.info("Email sent to %s", to_email)
