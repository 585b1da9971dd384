from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class Review(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user: str
    comment: str
    rating: int = Field(..., ge=1, le=5)

class Place(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # "google-<place_id>", "global-N" or "local-N"
    name: str
    category: str
    tranquility: int = Field(..., ge=1, le=5)
    rating: float = Field(..., ge=0, le=10)
    lat: float
    lng: float
    distance_meters: int = 0
    address: str = "Address not available"
    image_url: Optional[str] = None
    reviews: Optional[List[Review]] = None
    is_showcase: bool = False
    country: Optional[str] = None
    description: Optional[str] = None

class PlacesResponse(BaseModel):
    success: bool
    message: str
    places: List[Place] = []
    error: Optional[str] = None

class PlaceDetailsResponse(BaseModel):
    success: bool
    place: Optional[Place] = None
    error: Optional[str] = None

class PlacePhotoResponse(BaseModel):
    success: bool
    image_url: Optional[str] = None
    message: str
