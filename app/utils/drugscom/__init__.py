"""
Drugs.com Client Package

A modular package for resolving medicine pages on drugs.com and extracting
their sections.
"""

from app.utils.drugscom.client import MedicineClient
from app.utils.drugscom.models import (
    DocumentNotFound,
    ExtractionResult,
    MedicineLookupError,
    MedicineRecord,
    NoSearchResults,
    ResolvedDocument,
    SectionId,
    TransportError,
)
from app.utils.drugscom.locate import locate_medicine, slugify
from app.utils.drugscom.extract import extract_section
from app.utils.drugscom.assemble import assemble_medicine

__all__ = [
    'MedicineClient',
    'MedicineRecord',
    'ExtractionResult',
    'ResolvedDocument',
    'SectionId',
    'MedicineLookupError',
    'TransportError',
    'NoSearchResults',
    'DocumentNotFound',
    'locate_medicine',
    'slugify',
    'extract_section',
    'assemble_medicine',
]
