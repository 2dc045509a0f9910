"""
Drugs.com Data Models

Defines data classes and errors for structured medicine information.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from app.utils.drugscom.document import HtmlNode

NOT_AVAILABLE = "Information not available"
CONTENT_UNAVAILABLE = "Content unavailable"


class SectionId(str, Enum):
    """Element ids marking the start of a section on a medicine page."""
    USES = "uses"
    WARNINGS = "warnings"
    DOSAGE = "dosage"
    SIDE_EFFECTS = "side-effects"
    INTERACTIONS = "interactions"
    PRECAUTIONS = "precautions"
    # Only used as a fallback for USES
    MONOGRAPH = "monograph"


SECTION_LANDMARKS = (
    SectionId.USES,
    SectionId.WARNINGS,
    SectionId.DOSAGE,
    SectionId.SIDE_EFFECTS,
    SectionId.INTERACTIONS,
    SectionId.PRECAUTIONS,
)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting one section: either text or unavailable."""
    text: Optional[str] = None
    reason: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def found(cls, text: str) -> 'ExtractionResult':
        return cls(text=text)

    @classmethod
    def missing(cls) -> 'ExtractionResult':
        return cls(reason="missing")

    @classmethod
    def failed(cls, detail: str) -> 'ExtractionResult':
        return cls(reason="error", detail=detail)

    @property
    def available(self) -> bool:
        return bool(self.text)

    def render(self) -> str:
        """Text shown to callers. Both unavailable kinds look the same."""
        return self.text if self.available else NOT_AVAILABLE

    def describe(self) -> str:
        """Text for logs, keeps structural misses and errors apart."""
        if self.available:
            return self.text
        return CONTENT_UNAVAILABLE if self.reason == "error" else NOT_AVAILABLE


@dataclass(frozen=True)
class ResolvedDocument:
    """A parsed medicine page and the URL it was fetched from."""
    document: HtmlNode
    url: str


@dataclass(frozen=True)
class MedicineRecord:
    """Assembled medicine information for one lookup."""
    name: str
    generic: str
    brand_names: str
    drug_class: str
    uses: str
    warnings: str
    dosage: str
    side_effects: str
    interactions: str
    precautions: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the HTTP API."""
        data = asdict(self)
        return {
            "name": data["name"],
            "generic": data["generic"],
            "brandNames": data["brand_names"],
            "drugClass": data["drug_class"],
            "uses": data["uses"],
            "warnings": data["warnings"],
            "dosage": data["dosage"],
            "sideEffects": data["side_effects"],
            "interactions": data["interactions"],
            "precautions": data["precautions"],
            "source": data["source"],
        }


class MedicineLookupError(Exception):
    """Base error for failures that leave no document to extract from."""

    def __init__(self, message: str, attempted_url: Optional[str] = None):
        super().__init__(message)
        self.attempted_url = attempted_url


class TransportError(MedicineLookupError):
    """Network error, timeout or non-2xx response."""


class NoSearchResults(MedicineLookupError):
    """The search page had no usable result link."""


class DocumentNotFound(MedicineLookupError):
    """The fetched page is the site's error page."""
