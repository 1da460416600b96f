"""FastAPI main application."""

import logging
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from ..bootstrap import build_service
from config.settings import API_SETTINGS, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize service
service = build_service()


# Request/Response models
class RecommendationRequest(BaseModel):
    """Request model for recommendation."""

    region: str = Field(..., description="Governorate name (e.g., 'Giza')")
    month: int = Field(..., ge=1, le=12, description="Month number (1 = January)")


class CropMatch(BaseModel):
    """A recommended crop."""

    crop_id: str
    name: str
    score: int
    temperature_matched: bool
    month_matched: bool
    ideal_range_display: str
    region_temperature: Optional[float] = None
    water_need: str
    soils_display: str


class RecommendationResponse(BaseModel):
    """Response model for recommendation."""

    region: str
    known_region: bool
    zone: Optional[str] = None
    month: int
    month_name: str
    region_temperature: Optional[float] = None
    matches: List[CropMatch]
    advice: str


class RegionResponse(BaseModel):
    name: str
    zone: str


class CropCard(BaseModel):
    id: str
    name: str
    ideal_range_display: str
    soils_display: str
    water_need: str
    best_months: List[str]


# API endpoints
@app.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint."""
    return {
        "message": "Crop Advisor API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "recommend": "/recommend",
            "regions": "/regions",
            "crops": "/crops",
            "rules": "/rules",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/regions", response_model=List[RegionResponse])
async def regions():
    """List governorates for the region selector."""
    return service.list_regions()


@app.get("/crops", response_model=List[CropCard])
async def crops():
    """Crop reference cards."""
    return service.crop_reference()


@app.get("/rules")
async def rules():
    """Editable prediction rules as plain text."""
    return {"rules": service.rules_text()}


@app.post("/recommend", response_model=RecommendationResponse)
async def recommend(request: RecommendationRequest) -> RecommendationResponse:
    """
    Recommend crops for a governorate and month.

    Args:
        request: Recommendation request with region name and month

    Returns:
        Ranked crop matches; an unknown region returns known_region=false
        and no matches rather than an error
    """
    try:
        result = service.recommend(region_name=request.region, month=request.month)
    except ValueError as e:
        logger.warning(f"Rejected recommendation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Recommendation error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return RecommendationResponse(**result)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
