from fastapi import APIRouter
from problem_service.api.v1.endpoints import problems, topics

api_router = APIRouter()

# 各エンドポイントを登録
api_router.include_router(topics.router, prefix="/topics", tags=["トピック"])
api_router.include_router(problems.router, prefix="/problems", tags=["問題"])
