"""
Drugs.com Section Extraction Module

Pulls the text of one named section out of a medicine page. Page layouts
vary, so each section is tried against an ordered list of strategies and the
first one that produces text wins.
"""

import logging
from typing import Callable, Iterable, List, Optional, Union

from app.utils.drugscom.document import HEADING_TAGS, HtmlNode, clean_text
from app.utils.drugscom.models import SECTION_LANDMARKS, ExtractionResult, ResolvedDocument, SectionId

logger = logging.getLogger(__name__)

MAX_SECTION_LENGTH = 2000

CONTENT_BOX_CLASSES = ('contentBox', 'drug-content')
CONTENT_TAGS = ('p', 'ul', 'ol', 'table')
NON_CONTENT_SELECTOR = 'h1, h2, h3, h4, .more-resources, .references, .footnotes, script, style'
SIBLING_FALLBACK_LIMIT = 5

LANDMARK_IDS = frozenset(section.value for section in SECTION_LANDMARKS)

Strategy = Callable[[HtmlNode, SectionId], Optional[str]]


def is_content_box(node: HtmlNode) -> bool:
    return node.is_tag('div') and node.has_class(*CONTENT_BOX_CLASSES)


def is_section_boundary(node: HtmlNode) -> bool:
    """Headings and other section landmarks end a section."""
    return node.is_tag(*HEADING_TAGS) or node.id in LANDMARK_IDS


def truncate(text: str, limit: int = MAX_SECTION_LENGTH) -> str:
    return text[:limit]


def adjacent_content_box(landmark: HtmlNode) -> Optional[HtmlNode]:
    sibling = landmark.next_sibling()
    if sibling is not None and is_content_box(sibling):
        return sibling
    return None


def enclosing_content_box(landmark: HtmlNode) -> Optional[HtmlNode]:
    return landmark.closest(is_content_box)


def dosage_table_text(box: HtmlNode) -> str:
    """Join each multi-cell table row as 'cell - cell', one row per line."""
    rows = []
    for row in box.select('table tr'):
        cells = [cell.text().strip() for cell in row.select('td')]
        if len(cells) > 1:
            rows.append(' - '.join(cells))
    return '\n'.join(rows)


# Strategies, in cascade order

def from_enclosing_container(landmark: HtmlNode, section: SectionId) -> Optional[str]:
    """Landmark sits inside a content box: scrub a copy and take its text."""
    if adjacent_content_box(landmark) is not None:
        return None

    container = enclosing_content_box(landmark)
    if container is None:
        return None

    scrubbed = container.clone()
    scrubbed.remove(NON_CONTENT_SELECTOR)
    return clean_text(scrubbed.text())


def from_following_siblings(landmark: HtmlNode, section: SectionId) -> Optional[str]:
    """Flat layout: collect content elements up to the next heading or landmark."""
    if adjacent_content_box(landmark) is not None or enclosing_content_box(landmark) is not None:
        return None

    pieces = []
    for sibling in landmark.following_siblings():
        if is_section_boundary(sibling):
            break
        if sibling.is_tag(*CONTENT_TAGS):
            text = clean_text(sibling.text())
            if text:
                pieces.append(text)

    return truncate(' '.join(pieces))


def from_adjacent_box(landmark: HtmlNode, section: SectionId) -> Optional[str]:
    """Content box right after the landmark. Dosage tables keep their rows."""
    box = adjacent_content_box(landmark)
    if box is None:
        return None

    if section is SectionId.DOSAGE:
        rows = dosage_table_text(box)
        if rows:
            return truncate(rows)

    return truncate(clean_text(box.text()))


def from_nearby_siblings(landmark: HtmlNode, section: SectionId) -> Optional[str]:
    """Last resort: the first few content-like siblings on either side."""
    siblings = [
        sibling for sibling in landmark.siblings()
        if sibling.is_tag(*CONTENT_TAGS) or (sibling.is_tag('div') and not is_content_box(sibling))
    ][:SIBLING_FALLBACK_LIMIT]

    return truncate(clean_text(' '.join(sibling.text() for sibling in siblings)))


STRATEGIES: List[Strategy] = [
    from_enclosing_container,
    from_following_siblings,
    from_adjacent_box,
    from_nearby_siblings,
]


def first_text(landmark: HtmlNode, section: SectionId,
               strategies: Iterable[Strategy] = STRATEGIES) -> Optional[str]:
    """Run strategies in order and return the first non-empty text."""
    for strategy in strategies:
        text = strategy(landmark, section)
        if text:
            logger.debug(f"Section '{section.value}' extracted by {strategy.__name__}")
            return text
        logger.debug(f"Section '{section.value}': {strategy.__name__} found nothing")
    return None


def extract_section(page: Union[ResolvedDocument, HtmlNode],
                    section: Union[SectionId, str]) -> ExtractionResult:
    """
    Extract the text of one section from a medicine page.

    Args:
        page: Resolved document or parsed page root
        section: Section identifier, e.g. SectionId.DOSAGE or "side-effects"

    Returns:
        ExtractionResult with the section text, or unavailable. Extraction
        errors are logged and reported as unavailable, never raised.

    Raises:
        ValueError: If section is not a known section identifier
    """
    section = SectionId(section)
    document = page.document if isinstance(page, ResolvedDocument) else page

    try:
        landmark = document.find_by_id(section.value)
        if landmark is None:
            logger.debug(f"No landmark for section '{section.value}'")
            return ExtractionResult.missing()

        text = first_text(landmark, section)
    except Exception as e:
        logger.error(f"Error extracting {section.value}: {str(e)}")
        return ExtractionResult.failed(str(e))

    if not text:
        return ExtractionResult.missing()
    return ExtractionResult.found(text)
