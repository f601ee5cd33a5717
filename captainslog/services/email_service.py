"""Email delivery service for maintenance alert digests."""

from __future__ import annotations

import html
import logging
import smtplib
from dataclasses import dataclass
from email.header import Header
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from captainslog.config import get_settings
from captainslog.schemas.alerts import Severity
from captainslog.services.alerts.severity import severity_color

logger = logging.getLogger(__name__)


@dataclass
class EmailResult:
    """Outcome of one send. Delivery problems never raise."""

    success: bool
    error: str | None = None


@dataclass
class DigestItem:
    """One row of a digest email."""

    id: str
    title: str
    boat_name: str
    due_text: str
    type: str
    severity: Severity
    link: str


def digest_subject(count: int) -> str:
    plural = "s" if count != 1 else ""
    return f"⚓ {count} maintenance alert{plural} - Captain's Log"


def build_digest_html(items: list[DigestItem], base_url: str) -> str:
    """Build the HTML digest body: one table row per item, badge coloured by severity."""
    rows = ""
    for item in items:
        rows += (
            "<tr>"
            '<td style="padding:12px;border-bottom:1px solid #e5e7eb">'
            f'<a href="{html.escape(item.link)}" style="font-weight:500;color:#111827;'
            f'text-decoration:none">{html.escape(item.title)}</a>'
            f'<div style="font-size:14px;color:#6b7280">{html.escape(item.boat_name)}</div>'
            "</td>"
            '<td style="padding:12px;border-bottom:1px solid #e5e7eb;text-align:right">'
            f'<span style="display:inline-block;padding:4px 8px;'
            f"background:{severity_color(item.severity)};color:white;border-radius:4px;"
            f'font-size:12px">{html.escape(item.due_text)}</span>'
            "</td>"
            "</tr>"
        )

    base = html.escape(base_url)
    return (
        "<html><body style=\"margin:0;padding:0;font-family:-apple-system,Segoe UI,"
        'Roboto,Arial,sans-serif;background-color:#f3f4f6">'
        '<div style="max-width:600px;margin:0 auto;padding:20px">'
        '<div style="background:#0d9488;border-radius:12px 12px 0 0;padding:24px;'
        'text-align:center">'
        '<h1 style="margin:0;color:white;font-size:24px">&#9875; Captain&#39;s Log</h1>'
        '<p style="margin:8px 0 0;color:rgba(255,255,255,0.8);font-size:14px">'
        "Maintenance Alerts</p></div>"
        '<div style="background:white;padding:24px;border-radius:0 0 12px 12px">'
        '<p style="margin:0 0 16px;color:#374151">'
        "You have upcoming maintenance items that need attention:</p>"
        '<table style="width:100%;border-collapse:collapse">'
        '<tr style="background:#f9fafb">'
        '<th style="padding:12px;text-align:left;color:#6b7280;font-size:12px">ITEM</th>'
        '<th style="padding:12px;text-align:right;color:#6b7280;font-size:12px">DUE</th>'
        "</tr>"
        f"{rows}"
        "</table>"
        f'<div style="margin-top:24px;text-align:center"><a href="{base}" '
        'style="display:inline-block;padding:12px 24px;background:#0d9488;color:white;'
        'text-decoration:none;border-radius:8px">View in Captain&#39;s Log</a></div>'
        "</div>"
        '<div style="text-align:center;padding:16px;color:#9ca3af;font-size:12px">'
        "<p style=\"margin:0\">You're receiving this because you enabled email notifications.</p>"
        f'<p style="margin:4px 0 0"><a href="{base}/settings" style="color:#0d9488">'
        "Manage preferences</a></p>"
        "</div></div></body></html>"
    )


def build_digest_text(items: list[DigestItem], base_url: str) -> str:
    """Build the plain-text digest body."""
    lines = ["Captain's Log - Maintenance Alerts", "", "You have upcoming maintenance items:", ""]
    for item in items:
        lines.append(f"• {item.title} ({item.boat_name}) - {item.due_text}")
    lines.append("")
    lines.append(f"View details: {base_url}")
    lines.append("")
    lines.append(f"Manage notifications: {base_url}/settings")
    return "\n".join(lines)


def send_email(
    to: str,
    subject: str,
    html_body: str,
    text_body: str | None = None,
    settings=None,
) -> EmailResult:
    """Send one email over SMTP.

    Returns EmailResult(success=False, error=...) on any failure, including
    missing SMTP configuration.
    """
    if settings is None:
        settings = get_settings()

    if not to:
        logger.warning("email_send_skipped: no recipient")
        return EmailResult(success=False, error="No recipient")

    smtp_host = getattr(settings, "smtp_host", "")
    if not smtp_host:
        logger.warning("email_send_skipped: SMTP host not configured")
        return EmailResult(success=False, error="Email service not configured")

    msg = MIMEMultipart("alternative")
    msg["Subject"] = Header(subject, "utf-8")
    msg["From"] = getattr(settings, "smtp_from", "")
    msg["To"] = to
    if text_body:
        msg.attach(MIMEText(text_body, "plain", "utf-8"))
    msg.attach(MIMEText(html_body, "html", "utf-8"))

    try:
        with smtplib.SMTP(smtp_host, getattr(settings, "smtp_port", 587)) as server:
            server.starttls()
            smtp_user = getattr(settings, "smtp_user", "")
            smtp_password = getattr(settings, "smtp_password", "")
            if smtp_user:
                server.login(smtp_user, smtp_password)
            server.sendmail(msg["From"], [to], msg.as_string())
        logger.info("email_sent: recipient=%s subject=%r", to, subject)
        return EmailResult(success=True)
    except smtplib.SMTPAuthenticationError:
        logger.error("email_auth_failed: could not authenticate with SMTP server")
        return EmailResult(success=False, error="SMTP authentication failed")
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("email_send_failed: recipient=%s error=%s", to, exc)
        return EmailResult(success=False, error="Failed to send email")
