from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from datetime import date

from unitflow.core.database import get_db
from unitflow.core.targets import TargetStore, get_target_store
from unitflow.schemas.dashboard import DateRange
from unitflow.schemas.target import Target, TargetCreate, TargetUpdate, TargetProgress
from unitflow.services import metrics
from unitflow.api.endpoints.dashboard import load_sales

router = APIRouter(prefix="/targets", tags=["Targets"])


@router.get("", response_model=List[Target])
def list_targets(store: TargetStore = Depends(get_target_store)):
    return store.list_targets()


@router.get("/progress", response_model=List[TargetProgress])
def get_target_progress(
    date_range: DateRange = DateRange.MONTH,
    include_completed: bool = False,
    db: Session = Depends(get_db),
    store: TargetStore = Depends(get_target_store)
):
    """Progress of each target against the sales stats for the selected range"""
    today = date.today()
    stats = metrics.summary_stats(load_sales(db, date_range, today))

    return [
        metrics.target_progress(t, stats, today)
        for t in store.list_targets()
        if include_completed or not t.completed
    ]


@router.post("", response_model=Target, status_code=status.HTTP_201_CREATED)
def create_target(
    target_data: TargetCreate,
    store: TargetStore = Depends(get_target_store)
):
    return store.create(target_data)


@router.put("/{target_id}", response_model=Target)
def update_target(
    target_id: str,
    target_data: TargetUpdate,
    store: TargetStore = Depends(get_target_store)
):
    target = store.update(target_id, target_data)
    if not target:
        raise HTTPException(status_code=404, detail="Target not found")
    return target


@router.delete("/{target_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_target(
    target_id: str,
    store: TargetStore = Depends(get_target_store)
):
    if not store.delete(target_id):
        raise HTTPException(status_code=404, detail="Target not found")
