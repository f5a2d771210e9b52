from fastapi import APIRouter, Depends

from taskboard.routers.deps import get_store
from taskboard.schemas.task import TaskUpdate
from taskboard.store import Store

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("/{task_id}")
def get_task(task_id: int, store: Store = Depends(get_store)):
    return {"task": store.tasks.get_task(task_id)}


@router.put("/{task_id}")
def update_task(task_id: int, changes: TaskUpdate, store: Store = Depends(get_store)):
    """Patch title, description and/or status.

    Moving to another status appends the task to the end of that column.
    """
    return {"task": store.tasks.update_task(task_id, changes)}


@router.delete("/{task_id}")
def delete_task(task_id: int, store: Store = Depends(get_store)):
    store.tasks.delete_task(task_id)
    return {"status": "deleted"}
