from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Google Places credential (shorter than 10 chars is treated as missing)
    GOOGLE_MAPS_API_KEY: str = ""
    GOOGLE_PLACES_BASE_URL: str = "https://maps.googleapis.com/maps/api/place"

    # Search behaviour
    SEARCH_RADIUS_METERS: int = 5000
    SEARCH_PACING_SECONDS: float = 0.1
    HTTP_TIMEOUT_SECONDS: float = 10.0
    MAX_RESULTS: int = 20

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
