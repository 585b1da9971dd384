from fastapi import FastAPI
from sweetspott.routes.places_route import router as places_router
from sweetspott.routes.showcase_route import router as showcase_router

app = FastAPI(title="Sweet Spott")
app.include_router(places_router)
app.include_router(showcase_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Sweet Spott API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "places": "/places",
            "place_details": "/place-details",
            "place_photo": "/place-photo",
            "global_places": "/global-places",
            "global_places_photos": "/global-places-photos",
            "local_places": "/local-places",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Sweet Spott"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("sweetspott.main:app", host="0.0.0.0", port=8000, reload=True)
