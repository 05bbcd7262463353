"""Cafe Finder settings, read from the environment or a ``.env`` file.

Every field names its variable through ``validation_alias``, so the
environment keys (CAFE_SEARCH_URL, DATABASE_URL, USER_LATITUDE, ...) are
spelled out here rather than derived from field names.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Remote cafe search
    cafe_search_url: str = Field(
        default="https://cafe-finder-backend.onrender.com/search",
        validation_alias="CAFE_SEARCH_URL",
    )
    search_timeout_seconds: float = Field(default=10.0, validation_alias="SEARCH_TIMEOUT_SECONDS")
    http_user_agent: str = Field(default="cafe-finder", validation_alias="HTTP_USER_AGENT")

    # Favorites persistence
    database_url: str = Field(default="sqlite:///cafe_finder.db", validation_alias="DATABASE_URL")
    favorites_storage_key: str = Field(default="favorites", validation_alias="FAVORITES_STORAGE_KEY")

    # Map defaults (Paris)
    default_center_lat: float = Field(default=48.8566, validation_alias="DEFAULT_CENTER_LAT")
    default_center_lon: float = Field(default=2.3522, validation_alias="DEFAULT_CENTER_LON")
    map_zoom: int = Field(default=14, validation_alias="MAP_ZOOM")

    # Geolocation: a fixed position wins over the IP lookup; neither means "denied"
    user_latitude: float | None = Field(default=None, validation_alias="USER_LATITUDE")
    user_longitude: float | None = Field(default=None, validation_alias="USER_LONGITUDE")
    ip_geolocation_url: str = Field(default="", validation_alias="IP_GEOLOCATION_URL")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
