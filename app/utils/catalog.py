"""
Popular Medicines Catalog

Read-only reference table of common medicines grouped by category. Built
once at import time and never modified.
"""

import random
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

POPULAR_MEDICINES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "painRelievers": ("Aspirin", "Ibuprofen", "Acetaminophen", "Naproxen", "Celecoxib"),
    "antihistamines": ("Cetirizine", "Loratadine", "Diphenhydramine", "Fexofenadine", "Desloratadine"),
    "antibiotics": ("Amoxicillin", "Azithromycin", "Ciprofloxacin", "Doxycycline", "Cephalexin"),
    "antidepressants": ("Sertraline", "Fluoxetine", "Escitalopram", "Venlafaxine", "Bupropion"),
    "statins": ("Atorvastatin", "Simvastatin", "Rosuvastatin", "Pravastatin", "Lovastatin"),
    "antihypertensives": ("Lisinopril", "Amlodipine", "Losartan", "Metoprolol", "Hydrochlorothiazide"),
    "diabetesMedications": ("Metformin", "Glipizide", "Insulin", "Empagliflozin", "Sitagliptin"),
    "anxiolytics": ("Alprazolam", "Diazepam", "Lorazepam", "Buspirone", "Clonazepam"),
    "gastrointestinalMedications": ("Omeprazole", "Famotidine", "Esomeprazole", "Pantoprazole", "Ranitidine"),
    "respiratoryMedications": ("Albuterol", "Fluticasone", "Montelukast", "Tiotropium", "Budesonide"),
})


def categories() -> List[str]:
    return list(POPULAR_MEDICINES.keys())


def as_dict() -> Dict[str, List[str]]:
    """Plain JSON-friendly copy of the catalog."""
    return {category: list(names) for category, names in POPULAR_MEDICINES.items()}


def all_medicines() -> List[str]:
    """Every medicine name, in category order."""
    return [name for names in POPULAR_MEDICINES.values() for name in names]


def category_of(medicine: str) -> Optional[str]:
    for category, names in POPULAR_MEDICINES.items():
        if medicine in names:
            return category
    return None


def random_medicine(rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """Pick a random medicine. Returns (name, category)."""
    medicine = (rng or random).choice(all_medicines())
    return medicine, category_of(medicine)


def search_catalog(query: str) -> Dict[str, List[str]]:
    """
    Case-insensitive substring search over medicine names.

    Args:
        query: Text to look for

    Returns:
        Matching names keyed by category; categories without matches are left out
    """
    query = query.lower()
    results = {}
    for category, names in POPULAR_MEDICINES.items():
        matches = [name for name in names if query in name.lower()]
        if matches:
            results[category] = matches
    return results
