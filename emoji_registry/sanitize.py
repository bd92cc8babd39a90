# emoji_registry/sanitize.py
# Markup stripping for user-supplied emoji names and file locators.

from bs4 import BeautifulSoup


def strip_tags(text: str) -> str:
    """
    Return the text content of `text` with all HTML tags removed.
    Entities are decoded ("&amp;" -> "&"); plain strings pass through unchanged.
    """
    if not text:
        return ""
    if "<" not in text and "&" not in text:
        return text
    return BeautifulSoup(text, "html.parser").get_text()


def noop(text: str) -> str:
    """Sanitizer that stores values exactly as the loader produced them."""
    return text
