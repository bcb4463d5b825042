"""Endpoints for projects, their members, activity feed, tasks and messages."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from synergysphere.application.use_cases.activities import list_project_activities
from synergysphere.application.use_cases.messages import list_messages, post_message
from synergysphere.application.use_cases.projects import (
    change_member_role,
    create_project,
    get_project,
    invite_member,
    list_members,
    list_projects,
    remove_member,
    update_project,
)
from synergysphere.application.use_cases.tasks import create_task, list_tasks
from synergysphere.config import Settings
from synergysphere.domain.entities import (
    Activity,
    Project,
    ProjectMember,
    ProjectMessage,
    Task,
    User,
    render_activity,
)
from synergysphere.infrastructure.database import get_db
from synergysphere.interfaces.api.dependencies import get_app_settings, get_current_user
from synergysphere.interfaces.api.schemas import (
    ActivityRead,
    MemberInvite,
    MemberRoleUpdate,
    MessageCreate,
    MessageRead,
    ProjectCreate,
    ProjectMemberRead,
    ProjectRead,
    ProjectUpdate,
    TaskCreate,
    TaskRead,
)

router = APIRouter(prefix="/projects", tags=["projects"])


def _project_to_schema(project: Project) -> ProjectRead:
    return ProjectRead.model_validate(project)


def _member_to_schema(member: ProjectMember) -> ProjectMemberRead:
    return ProjectMemberRead(
        id=member.id or 0,
        project_id=member.project_id,
        user_id=member.user_id,
        role=member.role.value,
        joined_at=member.joined_at,
    )


def _activity_to_schema(activity: Activity) -> ActivityRead:
    activity_type = getattr(activity.activity_type, "value", activity.activity_type)
    return ActivityRead(
        id=activity.id or 0,
        project_id=activity.project_id,
        user_id=activity.user_id,
        actor_name=activity.actor_name,
        activity_type=activity_type,
        activity_data=activity.activity_data,
        message=render_activity(activity),
        icon=activity.icon,
        created_at=activity.created_at,
    )


def task_to_schema(task: Task) -> TaskRead:
    return TaskRead(
        id=task.id or 0,
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        priority=task.priority.value,
        status=task.status.value,
        deadline=task.deadline,
        tags=task.tags,
        assignee_id=task.assignee_id,
        created_by=task.created_by,
        created_at=task.created_at,
        updated_at=task.updated_at,
        completed_at=task.completed_at,
    )


def _message_to_schema(message: ProjectMessage) -> MessageRead:
    return MessageRead.model_validate(message)


@router.get("/", response_model=list[ProjectRead])
def read_projects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ProjectRead]:
    return [_project_to_schema(project) for project in list_projects(db, user=current_user)]


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project_endpoint(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectRead:
    project = create_project(
        db, owner=current_user, name=payload.name, description=payload.description
    )
    return _project_to_schema(project)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectRead:
    return _project_to_schema(get_project(db, project_id=project_id, user=current_user))


@router.patch("/{project_id}", response_model=ProjectRead)
def update_project_endpoint(
    project_id: int,
    payload: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectRead:
    project = update_project(
        db,
        project_id=project_id,
        user=current_user,
        name=payload.name,
        description=payload.description,
    )
    return _project_to_schema(project)


@router.get("/{project_id}/members", response_model=list[ProjectMemberRead])
def read_members(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ProjectMemberRead]:
    members = list_members(db, project_id=project_id, user=current_user)
    return [_member_to_schema(member) for member in members]


@router.post(
    "/{project_id}/members",
    response_model=ProjectMemberRead,
    status_code=status.HTTP_201_CREATED,
)
def invite_member_endpoint(
    project_id: int,
    payload: MemberInvite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectMemberRead:
    """Add an existing user to the project; they receive an invitation notification."""

    member = invite_member(
        db,
        project_id=project_id,
        inviter=current_user,
        email=payload.email,
        role=payload.role,
    )
    return _member_to_schema(member)


@router.patch("/{project_id}/members/{user_id}", response_model=ProjectMemberRead)
def change_member_role_endpoint(
    project_id: int,
    user_id: int,
    payload: MemberRoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectMemberRead:
    """Promote or demote a member; only owners and admins may do this."""

    member = change_member_role(
        db,
        project_id=project_id,
        actor=current_user,
        member_user_id=user_id,
        role=payload.role,
    )
    return _member_to_schema(member)


@router.delete("/{project_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_member_endpoint(
    project_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    remove_member(db, project_id=project_id, actor=current_user, member_user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/activities", response_model=list[ActivityRead])
def read_activities(
    project_id: int,
    limit: int | None = Query(None, ge=1, le=200, description="Maximum entries to return"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
) -> list[ActivityRead]:
    """Return the newest entries of the project's activity feed."""

    activities = list_project_activities(
        db,
        project_id=project_id,
        user_id=current_user.id,
        limit=limit or settings.activity_list_limit,
    )
    return [_activity_to_schema(activity) for activity in activities]


@router.get("/{project_id}/tasks", response_model=list[TaskRead])
def read_tasks(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TaskRead]:
    return [task_to_schema(task) for task in list_tasks(db, project_id=project_id, user=current_user)]


@router.post(
    "/{project_id}/tasks",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
)
def create_task_endpoint(
    project_id: int,
    payload: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    task = create_task(
        db,
        project_id=project_id,
        actor=current_user,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
        deadline=payload.deadline,
        tags=payload.tags,
        assignee_id=payload.assignee_id,
    )
    return task_to_schema(task)


@router.get("/{project_id}/messages", response_model=list[MessageRead])
def read_messages(
    project_id: int,
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MessageRead]:
    messages = list_messages(db, project_id=project_id, user=current_user, limit=limit)
    return [_message_to_schema(message) for message in messages]


@router.post(
    "/{project_id}/messages",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
)
def post_message_endpoint(
    project_id: int,
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageRead:
    message = post_message(
        db,
        project_id=project_id,
        author=current_user,
        content=payload.content,
        parent_id=payload.parent_id,
    )
    return _message_to_schema(message)


__all__ = ["router", "task_to_schema"]
