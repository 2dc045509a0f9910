"""
Drugs.com Client

High-level interface for medicine lookups.
"""

import logging
from typing import Callable, Union

import requests

from app.utils.drugscom.assemble import assemble_medicine
from app.utils.drugscom.extract import extract_section
from app.utils.drugscom.locate import locate_medicine
from app.utils.drugscom.models import ExtractionResult, MedicineRecord, ResolvedDocument, SectionId
from app.utils.drugscom.session import create_session

# Setup logging
logger = logging.getLogger(__name__)


class MedicineClient:
    """High-level client for drugs.com lookups.

    Every call opens its own session, so one client can be shared between
    concurrent requests.
    """

    def __init__(self, session_factory: Callable[[], requests.Session] = create_session):
        self.session_factory = session_factory

    def locate(self, name: str) -> ResolvedDocument:
        """
        Resolve a medicine name to its page.

        Args:
            name: Free-text medicine name

        Returns:
            Resolved page and its URL
        """
        logger.info(f"Locating medicine: {name}")
        with self.session_factory() as session:
            return locate_medicine(name, session)

    def extract_section(self, resolved: ResolvedDocument,
                        section: Union[SectionId, str]) -> ExtractionResult:
        """Extract one section from an already resolved page."""
        return extract_section(resolved, section)

    def get_medicine(self, name: str) -> MedicineRecord:
        """
        Look up a medicine and assemble its record.

        Args:
            name: Free-text medicine name

        Returns:
            Assembled medicine record
        """
        logger.info(f"Getting medicine by name: {name}")
        with self.session_factory() as session:
            return assemble_medicine(name, session)
