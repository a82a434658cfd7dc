"""Avatar delivery routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from murmur.application.usecase.avatar import GetAvatarUseCase
from murmur.domain.error import NotFoundError

router = APIRouter(prefix="/api/avatar", tags=["avatar"], route_class=DishkaRoute)

AVATAR_CACHE_CONTROL = "public, max-age=604800"


@router.get("/{avatar_id}")
async def get_avatar(
    avatar_id: str,
    get_avatar_use_case: FromDishka[GetAvatarUseCase],
) -> Response:
    """Serve a cached avatar image.

    Unknown avatars are an empty 404; the widget falls back to its
    placeholder.
    """
    try:
        image = await get_avatar_use_case.execute(avatar_id)
    except NotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return Response(
        content=image,
        media_type="image/png",
        headers={"Cache-Control": AVATAR_CACHE_CONTROL},
    )
