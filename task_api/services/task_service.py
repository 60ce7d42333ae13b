"""Task service"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Query, Session
from sqlalchemy.orm.exc import StaleDataError

from task_api.models.task import Task, TaskStatus, utcnow
from task_api.schemas.task import PagedResult, TaskCreate, TaskQueryParameters, TaskSummary, TaskUpdate

logger = logging.getLogger(__name__)

# colonnes triables (clé en minuscules), tout le reste retombe sur l'id
SORT_COLUMNS = {
    "duedate": Task.due_date,
    "title": Task.title,
}


def to_summary(task: Task) -> TaskSummary:
    return TaskSummary(
        title=task.title,
        status=task.status,
        description=task.description,
        closed_date=task.due_date,
        start_date=task.created_at,
        last_change_date=task.updated_at,
    )


def filter_tasks(db: Session, params: TaskQueryParameters) -> Query:
    query = db.query(Task)

    if params.status is not None:
        query = query.filter(Task.status == int(params.status))

    # NB: une tâche sans due_date ne passe jamais ce filtre (NULL <= x est faux)
    if params.due_before is not None:
        query = query.filter(Task.due_date <= params.due_before)

    return query


def sort_tasks(query: Query, sort_by: Optional[str], sort_order: Optional[str]) -> Query:
    column = SORT_COLUMNS.get((sort_by or "").lower())
    if column is None:
        # tri par id croissant, quel que soit sort_order
        return query.order_by(Task.id.asc())

    descending = (sort_order or "").lower() == "desc"
    return query.order_by(column.desc() if descending else column.asc(), Task.id.asc())


def list_tasks(db: Session, params: TaskQueryParameters) -> PagedResult[TaskSummary]:
    """Filtre, trie, pagine puis projette les tâches.

    total_count est calculé sur l'ensemble filtré, avant pagination.
    Les valeurs de pagination hors bornes ne lèvent jamais d'erreur:
    un offset négatif ne saute rien, une taille de page <= 0 ou un offset
    au-delà du total donnent une page vide.
    """
    query = filter_tasks(db, params)
    total_count = query.count()

    rows: List[Task] = []
    offset = max((params.page_number - 1) * params.page_size, 0)
    # au-delà du total la page est vide: rien de hors bornes n'atteint le driver
    if params.page_size > 0 and offset < total_count:
        limit = min(params.page_size, total_count)
        rows = sort_tasks(query, params.sort_by, params.sort_order).offset(offset).limit(limit).all()

    return PagedResult[TaskSummary](
        total_count=total_count,
        page_number=params.page_number,
        page_size=params.page_size,
        data=[to_summary(t) for t in rows],
    )


def get_task(db: Session, task_id: int) -> Optional[Task]:
    return db.get(Task, task_id)


def task_exists(db: Session, task_id: int) -> bool:
    return db.query(Task.id).filter(Task.id == task_id).first() is not None


def create_task(db: Session, data: TaskCreate) -> Task:
    now = utcnow()
    task = Task(
        title=data.title,
        description=data.description,
        due_date=data.due_date,
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info(f"Task {task.id} created")
    return task


def update_task(db: Session, task_id: int, data: TaskUpdate) -> Optional[Task]:
    """Remplace tous les champs modifiables de la tâche.

    Retourne None si la tâche n'existe pas ou a disparu entre lecture et écriture.
    Tout autre conflit d'écriture est propagé.
    """
    task = db.get(Task, task_id)
    if task is None:
        return None

    task.title = data.title
    task.description = data.description
    task.status = int(data.status)
    task.due_date = data.due_date
    task.updated_at = max(utcnow(), task.created_at)

    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        if not task_exists(db, task_id):
            logger.warning(f"Task {task_id} vanished before update was written")
            return None
        logger.error(f"Write conflict while updating task {task_id}")
        raise

    db.refresh(task)
    logger.info(f"Task {task_id} updated")
    return task


def delete_task(db: Session, task_id: int) -> bool:
    task = db.get(Task, task_id)
    if task is None:
        return False

    db.delete(task)
    db.commit()
    logger.info(f"Task {task_id} deleted")
    return True
