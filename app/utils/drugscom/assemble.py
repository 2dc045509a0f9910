"""
Drugs.com Assembly Module

Builds a MedicineRecord from a located page: title, subtitle metadata and
the six clinical sections.
"""

import logging
from typing import Optional

import requests

from app.utils.drugscom.document import HtmlNode, clean_text
from app.utils.drugscom.extract import extract_section
from app.utils.drugscom.locate import locate_medicine
from app.utils.drugscom.models import MedicineRecord, SectionId

logger = logging.getLogger(__name__)

GENERIC_LABEL = "Generic name:"
BRAND_LABEL = "Brand names:"
DRUG_CLASS_LABEL = "Drug class:"
METADATA_LABELS = (GENERIC_LABEL, BRAND_LABEL, DRUG_CLASS_LABEL)


def value_after_label(text: str, label: str) -> str:
    """Text following label, up to the next known metadata label."""
    if label not in text:
        return ""
    value = text.split(label, 1)[1]
    for other in METADATA_LABELS:
        if other != label and other in value:
            value = value.split(other, 1)[0]
    return clean_text(value)


def labeled_value(document: HtmlNode, label: str, selector: str = '.drug-subtitle') -> str:
    """Value for label from the first matching element that mentions it."""
    for element in document.select(selector):
        value = value_after_label(element.text(), label)
        if value:
            return value
    return ""


def extract_title(document: HtmlNode) -> str:
    heading = document.select_one('h1')
    return clean_text(heading.text()) if heading is not None else ""


def assemble_medicine(name: str, session: Optional[requests.Session] = None) -> MedicineRecord:
    """
    Look up a medicine and extract its information.

    Args:
        name: Free-text medicine name, e.g. "Ibuprofen 200mg"
        session: Optional session for the page fetches

    Returns:
        MedicineRecord; sections that could not be found read
        "Information not available"

    Raises:
        MedicineLookupError: If no page could be resolved for the name
    """
    resolved = locate_medicine(name, session)
    document = resolved.document

    drug_class = labeled_value(document, DRUG_CLASS_LABEL)
    if not drug_class:
        drug_class = labeled_value(document, DRUG_CLASS_LABEL, selector='p')

    sections = {section: extract_section(resolved, section) for section in (
        SectionId.USES,
        SectionId.WARNINGS,
        SectionId.DOSAGE,
        SectionId.SIDE_EFFECTS,
        SectionId.INTERACTIONS,
        SectionId.PRECAUTIONS,
    )}

    if not sections[SectionId.USES].available:
        logger.info(f"No uses section at {resolved.url}, trying monograph")
        sections[SectionId.USES] = extract_section(resolved, SectionId.MONOGRAPH)

    for section, result in sections.items():
        if not result.available:
            logger.info(f"Section '{section.value}' at {resolved.url}: {result.describe()}")

    return MedicineRecord(
        name=extract_title(document),
        generic=labeled_value(document, GENERIC_LABEL),
        brand_names=labeled_value(document, BRAND_LABEL),
        drug_class=drug_class,
        uses=sections[SectionId.USES].render(),
        warnings=sections[SectionId.WARNINGS].render(),
        dosage=sections[SectionId.DOSAGE].render(),
        side_effects=sections[SectionId.SIDE_EFFECTS].render(),
        interactions=sections[SectionId.INTERACTIONS].render(),
        precautions=sections[SectionId.PRECAUTIONS].render(),
        source=resolved.url,
    )
