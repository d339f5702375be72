from __future__ import annotations

from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup


class ScrapeError(RuntimeError):
    """Raised when a page cannot be fetched or parsed."""


@dataclass
class ScrapedPage:
    url: str
    title: str
    text: str


def airline_from_url(url: str) -> str:
    if "delta.com" in url:
        return "Delta"
    if "united.com" in url:
        return "United"
    return "Unknown"


def truncate(text: str, limit: int) -> str:
    return text[: max(limit, 0)]


def parse_page(url: str, html: str) -> ScrapedPage:
    soup = BeautifulSoup(html, "html.parser")
    title = soup.title.get_text(strip=True) if soup.title else ""
    body = soup.body or soup
    for tag in body(["script", "style", "noscript"]):
        tag.decompose()
    text = " ".join(body.get_text(" ", strip=True).split())
    return ScrapedPage(url=url, title=title, text=text)


def fetch_page(url: str, timeout: float = 30.0, user_agent: str = "") -> ScrapedPage:
    headers = {"User-Agent": user_agent} if user_agent else {}
    try:
        with httpx.Client(timeout=timeout, headers=headers, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
    except httpx.HTTPError as exc:
        raise ScrapeError(f"Fetching {url} failed: {exc}") from exc

    return parse_page(url, html)
