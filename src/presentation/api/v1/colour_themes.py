"""Colour theme API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from application.services.colour_theme_service import ColourThemeService
from domain.models import AuthenticatedCaller, ColourTheme, decode_colours
from infrastructure.container import get_colour_theme_service

from ...middleware.caller_context import get_current_caller
from .schemas import ColourSettingSchema, ColourThemeIn, ColourThemeResponse, ErrorResponse

router = APIRouter(prefix="/colour-themes", tags=["Colour Themes"])

ThemeID = Annotated[int, Path(description="Numeric colour theme identifier.")]


def _theme_to_response(theme: ColourTheme) -> ColourThemeResponse:
    return ColourThemeResponse(
        id=theme.id,
        name=theme.name,
        colours=theme.colours,
        colour_settings=[
            ColourSettingSchema(colour_property=s.colour_property, colour_value=s.colour_value)
            for s in decode_colours(theme.colours)
        ],
        sys_defined=theme.sys_defined,
        is_default=theme.is_default,
        is_active=theme.is_active,
        user_id=theme.user_id,
    )


@router.get(
    "",
    response_model=list[ColourThemeResponse],
    summary="List all colour themes",
    responses={401: {"description": "Not authenticated.", "model": ErrorResponse}},
)
def list_colour_themes(
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: ColourThemeService = Depends(get_colour_theme_service),
) -> list[ColourThemeResponse]:
    return [_theme_to_response(t) for t in service.list_themes(caller)]


@router.get(
    "/{theme_id}",
    response_model=ColourThemeResponse,
    name="get_colour_theme",
    summary="Get a colour theme",
    responses={404: {"description": "Theme not found.", "model": ErrorResponse}},
)
def get_colour_theme(
    theme_id: ThemeID,
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: ColourThemeService = Depends(get_colour_theme_service),
) -> ColourThemeResponse:
    return _theme_to_response(service.get_theme(caller, theme_id))


@router.post(
    "",
    response_model=ColourThemeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a colour theme",
    responses={
        201: {"description": "Theme created; Location points at it."},
        400: {"description": "Invalid theme.", "model": ErrorResponse},
    },
)
def create_colour_theme(
    body: ColourThemeIn,
    request: Request,
    response: Response,
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: ColourThemeService = Depends(get_colour_theme_service),
) -> ColourThemeResponse:
    theme = service.create_theme(caller, body.to_domain())
    response.headers["Location"] = str(request.url_for("get_colour_theme", theme_id=theme.id))
    return _theme_to_response(theme)


@router.put(
    "/{theme_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a colour theme",
    response_class=Response,
    responses={
        204: {"description": "Theme replaced."},
        400: {"description": "Body id does not match path id.", "model": ErrorResponse},
        404: {"description": "Theme not found.", "model": ErrorResponse},
    },
)
def replace_colour_theme(
    theme_id: ThemeID,
    body: ColourThemeIn,
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: ColourThemeService = Depends(get_colour_theme_service),
) -> Response:
    service.replace_theme(caller, theme_id, body.to_domain())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{theme_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a colour theme",
    response_class=Response,
    responses={
        204: {"description": "Theme deleted."},
        404: {"description": "Theme not found.", "model": ErrorResponse},
    },
)
def delete_colour_theme(
    theme_id: ThemeID,
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: ColourThemeService = Depends(get_colour_theme_service),
) -> Response:
    service.delete_theme(caller, theme_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
