from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn
import importlib
import os
from fastapi.responses import JSONResponse

# Setup logging first so we can log import errors
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Define routers to be imported
router_modules = {
    "medicine_router": "app.routes.medicine",
}

# Import routers safely with error handling
routers = {}
for router_name, module_path in router_modules.items():
    try:
        module = importlib.import_module(module_path)
        routers[router_name] = getattr(module, 'router')
        logger.info(f"Successfully imported {router_name} from {module_path}")
    except (ImportError, AttributeError) as e:
        logger.error(f"Failed to import {router_name} from {module_path}: {str(e)}")

# Create FastAPI application
app = FastAPI(
    title="Medicine Information API",
    description="Medicine information extracted from drugs.com pages, plus a catalog of popular medicines",
    version="1.2.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "message": str(exc),
                "code": "internal_error",
                "type": "server_error"
            }
        }
    )

# Include routers with error handling
if "medicine_router" in routers:
    app.include_router(routers["medicine_router"])
    logger.info("Included medicine_router")

if __name__ == "__main__":
    port = int(os.environ.get("PORT", "5000"))
    logger.info(f"Medicine API Server running on port {port}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=port)
