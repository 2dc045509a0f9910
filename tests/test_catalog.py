"""
Unit tests for the popular medicines catalog.
"""

import random

import pytest

from app.utils import catalog


def test_catalog_shape():
    """Ten categories of five medicines each."""
    assert len(catalog.categories()) == 10
    assert all(len(names) == 5 for names in catalog.POPULAR_MEDICINES.values())
    assert len(catalog.all_medicines()) == 50


def test_catalog_is_read_only():
    """The catalog cannot be changed at runtime."""
    with pytest.raises(TypeError):
        catalog.POPULAR_MEDICINES["vitamins"] = ("Vitamin D",)

    copy = catalog.as_dict()
    copy["statins"].append("Pitavastatin")
    assert "Pitavastatin" not in catalog.POPULAR_MEDICINES["statins"]


def test_category_of():
    """Medicines map back to their category."""
    assert catalog.category_of("Metformin") == "diabetesMedications"
    assert catalog.category_of("Unobtainium") is None


def test_random_medicine():
    """Random picks come from the catalog with a matching category."""
    medicine, category = catalog.random_medicine(random.Random(42))

    assert medicine in catalog.all_medicines()
    assert medicine in catalog.POPULAR_MEDICINES[category]


def test_search_catalog():
    """Search is a case-insensitive substring match grouped by category."""
    assert catalog.search_catalog("PRIL") == {"antihypertensives": ["Lisinopril"]}
    assert catalog.search_catalog("zole") == {
        "gastrointestinalMedications": ["Omeprazole", "Esomeprazole", "Pantoprazole"],
    }
    assert catalog.search_catalog("xyz") == {}
