from fastapi import APIRouter

# Create a medicine router
router = APIRouter()

# Import all medicine-related routes
from .medicine_routes import router as medicine_lookup_router
from .catalog_routes import router as catalog_router

# Include routers
router.include_router(medicine_lookup_router, tags=["Medicine"])
router.include_router(catalog_router, tags=["Catalog"])
