"""
Integration tests against the live drugs.com site.

These tests make actual network calls and should be run separately:
    pytest -m integration
"""

import pytest

from app.utils.drugscom import SectionId
from app.utils.drugscom.models import NOT_AVAILABLE

# A smaller set of medications for integration testing
INTEGRATION_MEDICINES = [
    "Ibuprofen",     # Common
    "Metformin",     # Common, different layout
    "Omeprazole",    # Brand and generic names
]


@pytest.mark.integration
@pytest.mark.parametrize("medicine", INTEGRATION_MEDICINES)
def test_get_medicine_integration(client, medicine):
    """Test the entire pipeline from name to assembled record."""
    record = client.get_medicine(medicine)

    assert record.name, f"Title missing for {medicine}"
    assert record.source.startswith("https://"), f"Invalid source for {medicine}: {record.source}"

    sections = [record.uses, record.warnings, record.dosage, record.side_effects]
    assert any(text != NOT_AVAILABLE for text in sections), \
        f"No sections extracted for {medicine}"


@pytest.mark.integration
def test_extract_specific_section(client):
    """Dosage information is found for a medicine that certainly has it."""
    resolved = client.locate("Aspirin")

    result = client.extract_section(resolved, SectionId.DOSAGE)

    assert result.available, "Dosage section not found"
    assert len(result.text) <= 2000
