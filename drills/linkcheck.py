"""A multi-threaded checker for broken links on a web site."""

from __future__ import annotations

import argparse
import ipaddress
import queue
import threading
from dataclasses import dataclass, field
from pprint import pformat
from typing import Optional, Union
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup


class BadResponse(Exception):
    """The server answered with a status other than success."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether the links on it should be followed."""

    url: str
    extract_links: bool


def _normalize(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme in ("http", "https") and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


def _domain(url: str) -> Optional[str]:
    """Return the host name of ``url``, or ``None`` for IP addresses or no host."""
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


class CrawlState:
    """Tracks the crawled domain and the pages already seen."""

    def __init__(self, start_url: str) -> None:
        start_url = _normalize(start_url)
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url!r}")
        self.domain = domain
        self.visited_pages: set[str] = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Return whether links within the given page should be extracted."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark ``url`` as visited; return ``False`` if it already was."""
        url = _normalize(url)
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch a page and return the absolute URLs of its links.

    Raises :class:`BadResponse` for a non-success status and
    :class:`requests.RequestException` when the request fails.
    """
    print(f"Checking {command.url}")
    response = session.get(command.url)
    if not 200 <= response.status_code < 300:
        raise BadResponse(f"{response.status_code} {response.reason or ''}".strip())
    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    link_urls = []
    for anchor in document.find_all("a", href=True):
        href = anchor["href"]
        try:
            link_urls.append(_normalize(urljoin(base_url, href)))
        except ValueError as err:
            print(f"On {base_url}: ignored unparsable {href!r}: {err}")
    return link_urls


@dataclass
class _Outcome:
    links: list[str] = field(default_factory=list)
    url: str = ""
    error: Union[BadResponse, requests.RequestException, None] = None


def _crawl_worker(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while (command := commands.get()) is not None:
            try:
                results.put(_Outcome(links=visit_page(session, command)))
            except (BadResponse, requests.RequestException) as err:
                results.put(_Outcome(url=command.url, error=err))


def _describe(error: Union[BadResponse, requests.RequestException]) -> str:
    if isinstance(error, BadResponse):
        return str(error)
    return f"request error: {error}"


def check_links(start_url: str, thread_count: int = 16) -> list[str]:
    """Crawl the site at ``start_url`` and return the URLs that failed."""
    if thread_count < 1:
        raise ValueError("at least one crawler thread is needed")
    state = CrawlState(start_url)
    commands: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    workers = [
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()

    bad_urls = []
    try:
        commands.put(CrawlCommand(_normalize(start_url), extract_links=True))
        pending = 1
        while pending > 0:
            outcome: _Outcome = results.get()
            pending -= 1
            if outcome.error is not None:
                bad_urls.append(outcome.url)
                print(f"Got crawling error: {_describe(outcome.error)}")
                continue
            for url in outcome.links:
                if state.mark_visited(url):
                    commands.put(CrawlCommand(url, state.should_extract_links(url)))
                    pending += 1
    finally:
        for _ in workers:
            commands.put(None)
    return bad_urls


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find broken links on a web site.")
    parser.add_argument("start_url", help="page to start crawling from")
    parser.add_argument("--threads", type=int, default=16)
    args = parser.parse_args(argv)
    bad_urls = check_links(args.start_url, args.threads)
    print(f"Bad URLs: {pformat(bad_urls)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())