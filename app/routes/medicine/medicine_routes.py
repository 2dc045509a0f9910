"""app/routes/medicine/medicine_routes.py - medicine lookup backed by drugs.com pages"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.utils.drugscom import DocumentNotFound, MedicineClient

router = APIRouter()
logger = logging.getLogger("app.routes.medicine")

API_VERSION = "1.2.0"

TROUBLESHOOTING = [
    "Try both brand and generic names (e.g., /medicine/ibuprofen)",
    "Check spelling and special characters",
    "Example working endpoints:",
    "/medicine/aspirin",
    "/medicine/omeprazole",
    "/medicine/metformin",
]

client = MedicineClient()


class MedicineInfo(BaseModel):
    """Medicine information extracted from a drugs.com page"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Ibuprofen",
                "generic": "ibuprofen",
                "brandNames": "Advil, Motrin IB",
                "drugClass": "Nonsteroidal anti-inflammatory drugs",
                "uses": "Ibuprofen is a nonsteroidal anti-inflammatory drug (NSAID)...",
                "warnings": "Ibuprofen can increase your risk of fatal heart attack or stroke...",
                "dosage": "Information not available",
                "sideEffects": "Get emergency medical help if you have signs of an allergic reaction...",
                "interactions": "Ask a doctor or pharmacist if it is safe for you to use ibuprofen...",
                "precautions": "Information not available",
                "source": "https://www.drugs.com/ibuprofen.html",
            }
        },
    )

    name: str
    generic: str
    brand_names: str = Field(alias="brandNames")
    drug_class: str = Field(alias="drugClass")
    uses: str
    warnings: str
    dosage: str
    side_effects: str = Field(alias="sideEffects")
    interactions: str
    precautions: str
    source: str


@router.get("/medicine/{name}",
    response_model=MedicineInfo,
    summary="Get medicine information",
    description="Resolve a medicine name to its drugs.com page and extract "
                "uses, warnings, dosage, side effects, interactions and precautions.")
def get_medicine(name: str = Path(..., description="Brand or generic medicine name")):
    """
    Look up a medicine by name.

    Blocking I/O, so this is a plain def and runs in the threadpool.
    """
    try:
        record = client.get_medicine(name)
    except DocumentNotFound as e:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Page not found",
                "attemptedUrl": e.attempted_url,
                "suggestion": "Try different medication name",
            },
        )
    except Exception as e:
        logger.error(f"Error looking up medicine {name}: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to retrieve information",
                "details": str(e),
                "attemptedUrl": getattr(e, "attempted_url", None),
                "troubleshooting": TROUBLESHOOTING,
            },
        )

    return MedicineInfo(**record.to_dict())


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "active",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }
