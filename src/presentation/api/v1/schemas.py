"""
Pydantic v2 request/response schemas for the Todo Platform API.

Payload shape is validated here, before any service runs; business rules
(empty usernames, id mismatches, ownership) are enforced by the services and
reported as RFC 9457 Problem Details.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
)

from domain.models import ColourSetting, ColourTheme, encode_colours

# ---------------------------------------------------------------------------
# Base / shared
# ---------------------------------------------------------------------------


class _ApiModel(BaseModel):
    """Base model: snake_case fields, ORM/dataclass friendly."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={"$schema": "https://json-schema.org/draft/2020-12/schema"},
    )


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_ApiModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.todo-platform.example/problems/user-not-found"],
    )
    title: str = Field(..., examples=["User Not Found"])
    status: int = Field(..., examples=[404])
    detail: str = Field(..., examples=["User not found."])
    instance: Optional[str] = Field(default=None, examples=["/api/v1/admin/users"])
    errors: Optional[list[dict[str, Any]]] = Field(
        default=None,
        description="Validation error details (when status is 422).",
    )


# ---------------------------------------------------------------------------
# Auth schemas
# ---------------------------------------------------------------------------


class UserRegister(_ApiModel):
    """Request body for registering a new user."""

    username: str = Field(..., max_length=50, examples=["testuser"])
    password: SecretStr = Field(..., max_length=128)


class UserLogin(_ApiModel):
    """Request body for logging in."""

    username: str = Field(..., examples=["testuser"])
    password: SecretStr


class TokenResponse(_ApiModel):
    """Access token returned after login."""

    token: str = Field(..., description="Signed JWT access token.")
    token_type: str = Field(default="Bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds.", examples=[3600])


class CallerResponse(_ApiModel):
    """The identity resolved from the bearer token."""

    id: Optional[int] = None
    username: Optional[str] = None
    is_admin: bool = False


# ---------------------------------------------------------------------------
# Admin schemas
# ---------------------------------------------------------------------------


class UserResponse(_ApiModel):
    """Public user record (never includes password material)."""

    id: int = Field(..., examples=[1])
    username: str = Field(..., examples=["AdminUser"])
    is_admin: bool = False


class UserDelete(_ApiModel):
    """Request body for deleting a user by username."""

    username: str = Field(default="", examples=["AdminUser"])


class UserUpdate(_ApiModel):
    """Request body for overwriting a user's username and admin flag."""

    username: str = Field(default="", examples=["RenamedUser"])
    is_admin: bool = False


# ---------------------------------------------------------------------------
# Colour theme schemas
# ---------------------------------------------------------------------------


class ColourSettingSchema(_ApiModel):
    """One ``{property, value}`` pair of a theme's colour data."""

    colour_property: str = Field(..., alias="colourProperty", examples=["--button-bgcolour"])
    colour_value: str = Field(..., alias="colourValue", examples=["#00796b"])


class ColourThemeIn(_ApiModel):
    """Full colour theme record sent on create and replace.

    ``colours`` accepts either the encoded string or a list of colour
    settings, which is encoded before it reaches the service.
    """

    id: Optional[int] = Field(default=None, description="Must match the path id on replace.")
    name: str = Field(..., max_length=100, examples=["Custom Theme"])
    colours: Union[str, list[ColourSettingSchema]] = Field(default="")
    sys_defined: bool = False
    is_default: bool = False
    is_active: bool = False
    user_id: Optional[int] = None

    def to_domain(self) -> ColourTheme:
        colours = self.colours
        if not isinstance(colours, str):
            colours = encode_colours(
                ColourSetting(colour_property=c.colour_property, colour_value=c.colour_value)
                for c in colours
            )
        return ColourTheme(
            id=self.id,
            name=self.name,
            colours=colours,
            sys_defined=self.sys_defined,
            is_default=self.is_default,
            is_active=self.is_active,
            user_id=self.user_id,
        )


class ColourThemeResponse(_ApiModel):
    """Colour theme as returned by the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Default Theme"])
    colours: str
    colour_settings: list[ColourSettingSchema] = Field(
        default_factory=list,
        description="``colours`` decoded into property/value pairs; empty when it is not structured.",
    )
    sys_defined: bool
    is_default: bool
    is_active: bool
    user_id: Optional[int] = None
