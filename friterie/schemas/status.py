"""Restaurant open/closed status schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RestaurantStatus(BaseModel):
    """Singleton status persisted as a flat JSON file."""

    is_open: bool = Field(alias="isOpen")
    message: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(populate_by_name=True)


class StatusUpdateResponse(BaseModel):
    success: bool = True
    status: RestaurantStatus
