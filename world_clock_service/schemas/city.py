from pydantic import BaseModel, ConfigDict, Field


class City(BaseModel):
    city_id: str = Field(..., min_length=1)
    name: str
    english_name: str
    country: str
    zone_id: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = ConfigDict(frozen=True)
