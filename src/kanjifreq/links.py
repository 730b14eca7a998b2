"""Anchor extraction and child link filtering."""

from selectolax.lexbor import LexborHTMLParser


def extract_hrefs(html: str) -> list[str]:
    """Return the ``href`` value of every anchor in document order."""
    tree = LexborHTMLParser(html)
    hrefs = []
    for node in tree.css("a[href]"):
        href = node.attributes.get("href")
        if href is not None:
            hrefs.append(href)
    return hrefs


def is_followable(href: str) -> bool:
    """Check whether an href is a relative ``.html`` link worth following.

    Absolute links are skipped, including links back into the same site.
    """
    if not href:
        return False
    if href.startswith(("http", "#", "..")):
        return False
    return href.endswith(".html")


def child_links(page_url: str, html: str) -> list[str]:
    """Followable child URLs of a page, deduplicated within the page."""
    links: dict[str, None] = {}
    for href in extract_hrefs(html):
        if is_followable(href):
            links[page_url + "/" + href] = None
    return list(links)
