"""CRUD routes shared by every admin data category.

``build_crud_router`` produces the same five endpoints for any
``TableService``: list, get, create, partial update and delete. All of
them require a signed-in admin.
"""

# No `from __future__ import annotations` here: FastAPI resolves the body
# types of the nested endpoints at definition time.

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Path, status
from pydantic import BaseModel

from devfolio.api.dependencies import get_current_user
from devfolio.schemas.education import EducationCreate, EducationResponse, EducationUpdate
from devfolio.schemas.experience import ExperienceCreate, ExperienceResponse, ExperienceUpdate
from devfolio.schemas.skills import SkillCreate, SkillResponse, SkillUpdate
from devfolio.services.auth import AuthUser
from devfolio.services.crud import TableService, UpdateError
from devfolio.services.education import education_service
from devfolio.services.experience import experience_service
from devfolio.services.skills import skills_service


def build_crud_router(
    prefix: str,
    noun: str,
    service: TableService,
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
) -> APIRouter:
    """Build list/get/create/update/delete routes for one table."""
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    def _not_found(row_id: int) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{noun.capitalize()} {row_id} not found",
        )

    @router.get("", response_model=list[response_model])
    def list_rows(
        _user: Annotated[AuthUser, Depends(get_current_user)],
    ) -> list[Any]:
        rows = service.list_all()
        if rows is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not load {noun} data",
            )
        return [response_model(**row) for row in rows]

    @router.get("/{row_id}", response_model=response_model)
    def get_row(
        row_id: Annotated[int, Path(description=f"{noun} id")],
        _user: Annotated[AuthUser, Depends(get_current_user)],
    ) -> Any:
        row = service.get(row_id)
        if row is None:
            raise _not_found(row_id)
        return response_model(**row)

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    def create_row(
        data: create_model,  # type: ignore[valid-type]
        user: Annotated[AuthUser, Depends(get_current_user)],
    ) -> Any:
        row = service.create(data.model_dump(exclude_unset=True), user_id=user.id)
        if row is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed to save {noun}"
            )
        return response_model(**row)

    @router.patch("/{row_id}", response_model=response_model)
    def update_row(
        row_id: Annotated[int, Path(description=f"{noun} id")],
        data: update_model,  # type: ignore[valid-type]
        _user: Annotated[AuthUser, Depends(get_current_user)],
    ) -> Any:
        """Update an entry. Only provided fields are written."""
        row, error = service.try_update(row_id, data.model_dump(exclude_unset=True))
        if error is UpdateError.NOT_FOUND:
            raise _not_found(row_id)
        if row is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed to save {noun}"
            )
        return response_model(**row)

    @router.delete("/{row_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_row(
        row_id: Annotated[int, Path(description=f"{noun} id")],
        _user: Annotated[AuthUser, Depends(get_current_user)],
    ) -> None:
        if not service.delete(row_id):
            raise _not_found(row_id)

    return router


experience_router = build_crud_router(
    "/experience",
    "experience",
    experience_service,
    ExperienceCreate,
    ExperienceUpdate,
    ExperienceResponse,
)
education_router = build_crud_router(
    "/education",
    "education",
    education_service,
    EducationCreate,
    EducationUpdate,
    EducationResponse,
)
skills_router = build_crud_router(
    "/skills", "skill", skills_service, SkillCreate, SkillUpdate, SkillResponse
)
