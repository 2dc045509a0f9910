"""
Drugs.com Session Management

Handles HTTP session setup and page fetching for drugs.com access.
"""

import logging
import os
from typing import Dict, Optional

import requests

from app.utils.drugscom.document import HtmlNode, parse_html
from app.utils.drugscom.models import TransportError

# Setup logging
logger = logging.getLogger(__name__)

# Constants
BASE_URL = os.environ.get("DRUGS_BASE_URL", "https://www.drugs.com").rstrip("/")
SEARCH_URL = f"{BASE_URL}/search.php"
DEFAULT_TIMEOUT = float(os.environ.get("DRUGS_REQUEST_TIMEOUT", "10"))  # seconds

DEFAULT_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36',
    'Accept': 'text/html,application/xhtml+xml,application/xml',
    'Accept-Language': 'en-US,en;q=0.9',
    'Accept-Encoding': 'gzip, deflate',
}


def create_session() -> requests.Session:
    """Create a requests session with browser-like headers and no retries."""
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


def fetch_document(session: requests.Session, url: str,
                   params: Optional[Dict[str, str]] = None,
                   timeout: float = DEFAULT_TIMEOUT) -> HtmlNode:
    """
    Fetch a page and parse it.

    Args:
        session: Session to send the request with
        url: Page URL
        params: Optional query parameters
        timeout: Request timeout in seconds

    Returns:
        Parsed document root

    Raises:
        TransportError: On connection errors, timeouts and non-2xx responses
    """
    try:
        response = session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.info(f"Fetch failed for {url}: {str(e)}")
        raise TransportError(f"Error fetching {url}: {str(e)}", attempted_url=url) from e

    logger.debug(f"Fetched {url} ({len(response.text)} characters)")
    return parse_html(response.text)
