from fastapi import APIRouter, Depends

from taskboard.routers.deps import get_store
from taskboard.schemas.project import ProjectIn
from taskboard.schemas.task import TaskCreate
from taskboard.store import Store

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
def list_projects(store: Store = Depends(get_store)):
    return {"projects": store.projects.list_projects()}


@router.post("", status_code=201)
def create_project(body: ProjectIn, store: Store = Depends(get_store)):
    return {"project": store.projects.create_project(body.name, body.color)}


@router.get("/{project_id}")
def get_project(project_id: int, store: Store = Depends(get_store)):
    return {"project": store.projects.get_project(project_id)}


@router.put("/{project_id}")
def update_project(project_id: int, body: ProjectIn, store: Store = Depends(get_store)):
    return {"project": store.projects.update_project(project_id, body.name, body.color)}


@router.delete("/{project_id}")
def delete_project(project_id: int, store: Store = Depends(get_store)):
    store.projects.delete_project(project_id)
    return {"status": "deleted"}


@router.get("/{project_id}/tasks")
def list_tasks(project_id: int, store: Store = Depends(get_store)):
    """Tasks of one project grouped by status, then by position.

    A project that does not exist simply has no tasks.
    """
    return {"tasks": store.tasks.list_tasks(project_id)}


@router.post("/{project_id}/tasks", status_code=201)
def create_task(project_id: int, body: TaskCreate, store: Store = Depends(get_store)):
    task = store.tasks.create_task(project_id, body.title, body.description, body.status)
    return {"task": task}
