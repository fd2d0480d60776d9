"""Project endpoints - every route requires a bearer token."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.tracker.api.dependencies import Authz, ProjectServiceDep, get_current_user
from src.tracker.schemas import (
    ApiResponse,
    MessageResponse,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Missing, invalid or expired token"}},
)


@router.post(
    "",
    response_model=ApiResponse[ProjectRead],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid project data"}},
)
async def create_project(
    request: ProjectCreate,
    authz: Authz,
    service: ProjectServiceDep,
) -> ApiResponse[ProjectRead]:
    """Create a project owned by the caller."""
    project = await service.create(request, owner_id=authz.user.id)
    return ApiResponse(message="Project created successfully", data=project)


@router.get("", response_model=ApiResponse[list[ProjectRead]])
async def list_projects(authz: Authz, service: ProjectServiceDep) -> ApiResponse[list[ProjectRead]]:
    """Admins see every project; members see their own. Newest first."""
    projects = await service.list_all(authz.user.id, is_admin=authz.privileged)
    return ApiResponse(data=projects)


@router.get(
    "/{project_id}",
    response_model=ApiResponse[ProjectRead],
    responses={
        403: {"description": "Not the owner"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    authz: Authz,
    service: ProjectServiceDep,
) -> ApiResponse[ProjectRead]:
    project = await service.get_by_id(project_id)
    authz.ensure_can_access(project.owner.id, action="access this project")
    return ApiResponse(data=project)


@router.put(
    "/{project_id}",
    response_model=ApiResponse[ProjectRead],
    responses={
        403: {"description": "Not the owner"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID,
    request: ProjectUpdate,
    authz: Authz,
    service: ProjectServiceDep,
) -> ApiResponse[ProjectRead]:
    """Update the allow-listed fields of a project."""
    project = await service.update(project_id, request, authz.user.id, is_admin=authz.privileged)
    return ApiResponse(message="Project updated successfully", data=project)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    responses={
        403: {"description": "Not the owner"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID,
    authz: Authz,
    service: ProjectServiceDep,
) -> MessageResponse:
    message = await service.delete(project_id, authz.user.id, is_admin=authz.privileged)
    return MessageResponse(message=message)
