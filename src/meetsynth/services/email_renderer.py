"""Jinja2 rendering of summary email bodies."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from meetsynth.domain.summary import Summary

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

DEFAULT_MESSAGE = "Please find the summary below."
TEST_SUBJECT = "MeetSynth - Test Email"
TEST_TEXT = "This is a test email to verify your email configuration is working correctly."

_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


@dataclass
class RenderedEmail:
    """Subject and both bodies of one outgoing email."""

    subject: str
    html_body: str
    text_body: str


def format_timestamp(value: datetime | None) -> str:
    """Format a timestamp for email bodies."""
    if value is None:
        return "unknown"
    return value.strftime("%Y-%m-%d %H:%M UTC")


def default_subject(sent_at: datetime) -> str:
    """Subject used when a dispatch does not supply one."""
    return f"Meeting Summary - {sent_at:%Y-%m-%d}"


def render_summary_email(
    summary: Summary,
    sent_at: datetime,
    subject: str | None = None,
    message: str | None = None,
) -> RenderedEmail:
    """Render the HTML and plain-text bodies for a summary dispatch.

    The body always carries the effective summary, so an edit is what
    recipients see.
    """
    context = {
        "summary_text": summary.effective_summary,
        "custom_prompt": summary.custom_prompt,
        "created_at": format_timestamp(summary.created_at),
        "sent_at": format_timestamp(sent_at),
        "message": message or DEFAULT_MESSAGE,
    }
    return RenderedEmail(
        subject=subject or default_subject(sent_at),
        html_body=_env.get_template("summary_email.html").render(context),
        text_body=_env.get_template("summary_email.txt").render(context),
    )


def render_test_email() -> RenderedEmail:
    """Render the configuration test email."""
    return RenderedEmail(
        subject=TEST_SUBJECT,
        html_body=_env.get_template("test_email.html").render(text=TEST_TEXT),
        text_body=TEST_TEXT,
    )
