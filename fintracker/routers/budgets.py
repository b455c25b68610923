"""
Budgets Router
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from fintracker.deps import get_db, get_user_id
from fintracker.models.budget import BudgetCreate, BudgetUpdate
from fintracker.services.firestore_service import FirestoreService
from fintracker.use_cases.budget_vs_actual import BudgetVsActualUseCase
from fintracker.use_cases.create_budget import CreateBudgetUseCase
from fintracker.use_cases.delete_budget import DeleteBudgetUseCase
from fintracker.use_cases.get_budget import GetBudgetUseCase
from fintracker.use_cases.get_budget_by_category import GetBudgetByCategoryUseCase
from fintracker.use_cases.list_budgets import ListBudgetsUseCase
from fintracker.use_cases.update_budget import UpdateBudgetUseCase

router = APIRouter(prefix="/api/v1/budgets", tags=["budgets"])


@router.get("")
def list_budgets(user_id: str = Depends(get_user_id), db: FirestoreService = Depends(get_db)):
    """Lists budgets with their progress over the current period"""
    return {"budgets": ListBudgetsUseCase(db).execute(user_id)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_budget(
    payload: BudgetCreate,
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
):
    """Creates a budget for a category"""
    return {"budget": CreateBudgetUseCase(db).execute(user_id, payload)}


@router.get("/vs-actual")
def budget_vs_actual(
    period: Optional[str] = "month",
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
):
    """Budgeted vs actual spending per category for month, quarter or year"""
    return BudgetVsActualUseCase(db).execute(user_id, period)


@router.get("/category/{category}")
def get_budget_by_category(
    category: str,
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
):
    return {"budget": GetBudgetByCategoryUseCase(db).execute(user_id, category)}


@router.get("/{budget_id}")
def get_budget(budget_id: str, user_id: str = Depends(get_user_id), db: FirestoreService = Depends(get_db)):
    return {"budget": GetBudgetUseCase(db).execute(user_id, budget_id)}


@router.patch("/{budget_id}")
def update_budget(
    budget_id: str,
    payload: BudgetUpdate,
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
):
    return {"budget": UpdateBudgetUseCase(db).execute(user_id, budget_id, payload)}


@router.delete("/{budget_id}")
def delete_budget(budget_id: str, user_id: str = Depends(get_user_id), db: FirestoreService = Depends(get_db)):
    return DeleteBudgetUseCase(db).execute(user_id, budget_id)
