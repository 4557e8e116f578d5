"""Menu category and item API schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

IMAGE_PREFIX = "/images/"


def _check_image_path(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    if not value.startswith(IMAGE_PREFIX) or ".." in value:
        raise ValueError("Invalid image path")
    return value


class CategoryCreate(BaseModel):
    label: str = Field(min_length=1, max_length=200)

    model_config = ConfigDict(str_strip_whitespace=True)


class CategoryUpdate(BaseModel):
    label: str | None = Field(default=None, min_length=1, max_length=200)

    model_config = ConfigDict(str_strip_whitespace=True)


class MenuItemCreate(BaseModel):
    """Payload for a new dish; ``image`` must be a public ``/images/...`` path."""

    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=1000)
    price: str = Field(min_length=1, max_length=50)
    image: str | None = Field(default=None, max_length=500)
    highlight: bool = False

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: str | None) -> str | None:
        return _check_image_path(value)


class MenuItemUpdate(BaseModel):
    """Partial update; an explicit ``image: null`` removes the picture."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=1000)
    price: str | None = Field(default=None, min_length=1, max_length=50)
    image: str | None = Field(default=None, max_length=500)
    highlight: bool | None = None

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: str | None) -> str | None:
        return _check_image_path(value)


class MenuItemRead(BaseModel):
    id: int
    category_id: str
    name: str
    description: str
    price: str
    image: str | None
    highlight: bool
    order: int

    model_config = ConfigDict(from_attributes=True)


class CategoryRead(BaseModel):
    id: str
    label: str
    order: int

    model_config = ConfigDict(from_attributes=True)


class CategoryWithItems(CategoryRead):
    items: list[MenuItemRead] = []


class ReorderRequest(BaseModel):
    """Either ``{"type": "categories", "ids": [...]}`` or items of one category."""

    type: Literal["categories", "items"]
    category_id: str | None = Field(default=None, alias="categoryId")
    ids: list[str | int] = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_items_target(self) -> "ReorderRequest":
        if self.type == "items":
            if not self.category_id:
                raise ValueError("categoryId is required when reordering items")
            try:
                self.ids = [int(value) for value in self.ids]
            except (TypeError, ValueError) as exc:
                raise ValueError("Invalid item ids") from exc
        else:
            self.ids = [str(value) for value in self.ids]
        return self


class SuccessResponse(BaseModel):
    success: bool = True
