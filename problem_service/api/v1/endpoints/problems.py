from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from problem_service.core.config import settings
from problem_service.core.database import get_db
from problem_service.core.repository import DB_INT_MIN, DB_INT_MAX
from problem_service.services.problem_service import ProblemManager
from problem_service.schemas.problem import (
    ProblemCreate, ProblemUpdate, Problem as ProblemSchema, ProblemInDB,
    ProblemList, MaskedProblem, ShortResponse
)

router = APIRouter()


def get_problem_manager(db: Session = Depends(get_db)) -> ProblemManager:
    return ProblemManager(db)


@router.get("/", response_model=ProblemList)
def get_problems(
    page: int = Query(1, ge=1, le=DB_INT_MAX),
    limit: Optional[int] = Query(None, ge=1),
    manager: ProblemManager = Depends(get_problem_manager)
):
    """問題一覧取得（解答は含めない）"""
    limit = min(limit or settings.DEFAULT_PAGE_LIMIT, settings.MAX_PAGE_LIMIT)
    return {"problems": manager.get_all(page, limit)}


@router.get("/{problem_id}", response_model=ProblemSchema)
def get_problem(
    problem_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    manager: ProblemManager = Depends(get_problem_manager)
):
    """問題詳細取得"""
    return manager.get_one(problem_id)


@router.get("/{problem_id}/masked", response_model=MaskedProblem)
def get_masked_problem(
    problem_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    manager: ProblemManager = Depends(get_problem_manager)
):
    """解答を伏せた問題取得（解答者向け）"""
    return manager.get_one_masked(problem_id)


@router.post("/", response_model=ProblemInDB, status_code=status.HTTP_201_CREATED)
def create_problem(
    problem_data: ProblemCreate,
    manager: ProblemManager = Depends(get_problem_manager)
):
    """問題作成"""
    return manager.create(problem_data)


@router.patch("/{problem_id}", response_model=ShortResponse)
def update_problem(
    problem_update: ProblemUpdate,
    problem_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    manager: ProblemManager = Depends(get_problem_manager)
):
    """問題更新（指定されたフィールドのみ）"""
    return manager.update(problem_id, problem_update)


@router.delete("/{problem_id}", response_model=ShortResponse)
def delete_problem(
    problem_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    manager: ProblemManager = Depends(get_problem_manager)
):
    """問題削除"""
    return manager.delete(problem_id)
