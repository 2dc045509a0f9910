"""
Drugs.com Locate Module

Resolves a medicine name to its page on drugs.com, falling back to the
site search when the guessed URL cannot be fetched.
"""

import logging
import re
from typing import Optional

import requests

from app.utils.drugscom import session as transport
from app.utils.drugscom.document import HtmlNode
from app.utils.drugscom.models import DocumentNotFound, NoSearchResults, ResolvedDocument, TransportError

# Setup logging
logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r'[^a-z0-9]+')
PROFILE_PATH = "/pro/"


def slugify(name: str) -> str:
    """Lowercase and replace every run of non-alphanumerics with a hyphen."""
    return SLUG_PATTERN.sub('-', name.lower())


def pick_result_link(results: HtmlNode) -> Optional[str]:
    """
    Choose the result link from a search results page.

    Professional monograph links win; otherwise the first root-relative
    link that is not itself a search link.
    """
    hrefs = [anchor.attr('href') or '' for anchor in results.select('a[href]')]

    for href in hrefs:
        if PROFILE_PATH in href:
            return href

    for href in hrefs:
        if href.startswith('/') and 'search' not in href:
            return href

    return None


def absolute_url(link: str) -> str:
    """Prefix root-relative links with the site origin."""
    if link.startswith('/'):
        return f"{transport.BASE_URL}{link}"
    return link


def is_not_found_page(document: HtmlNode) -> bool:
    """Detect error pages served with a success status."""
    if document.select_one('.error404') is not None:
        return True
    return any('404' in heading.text() for heading in document.select('h1'))


def locate_medicine(name: str, session: Optional[requests.Session] = None) -> ResolvedDocument:
    """
    Resolve a medicine name to a parsed drugs.com page.

    Args:
        name: Free-text medicine name
        session: Optional session; a fresh one is created and closed otherwise

    Returns:
        ResolvedDocument with the parsed page and the URL it came from

    Raises:
        TransportError: If the search step or the result page cannot be fetched
        NoSearchResults: If the search page has no usable link
        DocumentNotFound: If the final page is an error page
    """
    if session is None:
        with transport.create_session() as own_session:
            return locate_medicine(name, own_session)

    slug = slugify(name)
    url = f"{transport.BASE_URL}/{slug}.html"

    try:
        logger.info(f"Fetching medicine page directly: {url}")
        document = transport.fetch_document(session, url)
    except TransportError as direct_error:
        logger.info(f"Direct lookup failed for '{slug}', falling back to search: {direct_error}")
        results = transport.fetch_document(session, transport.SEARCH_URL, params={"searchterm": slug})

        link = pick_result_link(results)
        if not link:
            logger.warning(f"No search results found for '{slug}'")
            raise NoSearchResults("No search results found",
                                  attempted_url=f"{transport.SEARCH_URL}?searchterm={slug}")

        url = absolute_url(link)
        logger.info(f"Search for '{slug}' resolved to {url}")
        document = transport.fetch_document(session, url)

    if is_not_found_page(document):
        logger.warning(f"Page not found at {url}")
        raise DocumentNotFound("Page not found", attempted_url=url)

    return ResolvedDocument(document=document, url=url)
