import html
import re
from datetime import datetime, timezone

from models.article import parse_timestamp

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")
TRAILING_PARTIAL_WORD = re.compile(r"\s+\S*\Z")
ELLIPSIS = "..."


def escape_html(text: str) -> str:
    return html.escape(text or "", quote=True)


def escape_json_string(text: str) -> str:
    """
    Escape a value for use inside a double-quoted JSON-LD string.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def truncate(text: str, length: int) -> str:
    """
    Shorten text to at most `length` characters plus an ellipsis, backing off to the last
    whitespace so no word is split.
    """
    if len(text) <= length:
        return text
    return TRAILING_PARTIAL_WORD.sub("", text[:length]) + ELLIPSIS


def describe(content: str, length: int) -> str:
    return truncate(content.replace("\n", " "), length)


def content_to_html(content: str) -> str:
    """
    Turn blank-line separated plain text into escaped <p> elements.
    """
    paragraphs = [chunk.strip() for chunk in content.split("\n\n") if chunk.strip()]
    return "\n        ".join(
        f"<p>{escape_html(paragraph).replace(chr(10), '<br>')}</p>" for paragraph in paragraphs
    )


def fill_template(template: str, values: dict) -> str:
    """
    Replace {{name}} tokens found in `values`; anything else is left untouched.
    """
    def _replace(match):
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return str(values[name])

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def format_date(value: str) -> str:
    moment = parse_timestamp(value)
    return f"{moment:%B} {moment.day}, {moment.year}"


def iso_timestamp(value: str) -> str:
    moment = parse_timestamp(value)
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()
