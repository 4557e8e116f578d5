"""Admin authentication API schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Credentials posted by the admin login form."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=500)
    remember_me: bool = Field(default=False, alias="rememberMe")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        """Trim the username only; passwords are compared byte for byte."""
        return value.strip()


class LoginResponse(BaseModel):
    success: bool = True
    username: str


class VerifyResponse(BaseModel):
    authenticated: bool
    username: str | None = None


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(min_length=1, max_length=500, alias="currentPassword")
    new_password: str = Field(min_length=1, max_length=500, alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)


class ResetRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1, max_length=200)
    new_password: str = Field(min_length=1, max_length=500, alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    success: bool = True
    message: str
