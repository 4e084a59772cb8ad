from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Annotated, Any, List, Optional, Union

from problem_service.core.repository import DB_INT_MIN, DB_INT_MAX

DbInt = Annotated[int, Field(ge=DB_INT_MIN, le=DB_INT_MAX)]


class CamelModel(BaseModel):
    """JSON は camelCase、Python 側は snake_case"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class AnswerField(CamelModel):
    index: Union[int, float]
    value: Union[str, int, float]


class Answer(CamelModel):
    fields: List[AnswerField]


class ProblemCreate(CamelModel):
    topic_id: DbInt
    order: DbInt
    # 形式チェックは ProblemManager 側で行う（不正なら 400）
    answer: Any = None


class ProblemUpdate(CamelModel):
    topic_id: Optional[DbInt] = None
    order: Optional[DbInt] = None
    answer: Optional[Any] = None


class Problem(CamelModel):
    id: int
    topic_id: int
    order: int
    answer: Answer


class ProblemInDB(Problem):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProblemSummary(CamelModel):
    """一覧表示用（解答は含めない）"""
    id: int
    topic_id: int
    order: int


class ProblemList(CamelModel):
    problems: List[ProblemSummary]


class MaskedAnswerField(CamelModel):
    index: Union[int, float]
    value: str


class MaskedAnswer(CamelModel):
    fields: List[MaskedAnswerField]


class MaskedProblem(CamelModel):
    """解答を伏せた問題（解答者向け）"""
    id: int
    topic_id: int
    order: int
    answer: MaskedAnswer


class ShortResponse(BaseModel):
    status: str
    message: str
