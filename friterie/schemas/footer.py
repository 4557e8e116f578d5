"""Footer entry API schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

LINK_PREFIXES: tuple[str, ...] = ("/", "http://", "https://", "mailto:", "tel:")


def _check_link(value: str | None) -> str | None:
    if not value:
        return None
    if not value.startswith(LINK_PREFIXES):
        raise ValueError("Invalid link format")
    return value


class FooterItemCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=500)
    icon: str | None = Field(default=None, max_length=100)
    link: str | None = Field(default=None, max_length=500)
    menu_item_name: str | None = Field(default=None, max_length=200)
    menu_category_id: str | None = Field(default=None, max_length=64)
    visible: bool = True

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("link")
    @classmethod
    def validate_link(cls, value: str | None) -> str | None:
        return _check_link(value)


class FooterItemUpdate(BaseModel):
    """Partial update; only fields present in the body are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=500)
    icon: str | None = Field(default=None, max_length=100)
    link: str | None = Field(default=None, max_length=500)
    menu_item_name: str | None = Field(default=None, max_length=200)
    menu_category_id: str | None = Field(default=None, max_length=64)
    visible: bool | None = None

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("link")
    @classmethod
    def validate_link(cls, value: str | None) -> str | None:
        return _check_link(value)


class FooterItemRead(BaseModel):
    id: int
    title: str
    description: str | None
    icon: str | None
    link: str | None
    menu_item_name: str | None
    menu_category_id: str | None
    order: int
    visible: bool

    model_config = ConfigDict(from_attributes=True)


class FooterReorderRequest(BaseModel):
    ids: list[int] = Field(min_length=1)
