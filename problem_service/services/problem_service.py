"""
問題管理クラス
Problem の取得、作成、更新、削除と解答形式のチェックを管理
"""
import logging
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, load_only

from problem_service.core.config import settings
from problem_service.core.exceptions import InvalidInputError, NotFoundError
from problem_service.core.repository import DB_INT_MAX, find_or_fail, fits_db_int
from problem_service.models.problem import Problem
from problem_service.models.topic import Topic
from problem_service.schemas.problem import ProblemCreate, ProblemUpdate

logger = logging.getLogger(__name__)

PROBLEM_NOT_FOUND = 'Problem is not found'
TOPIC_NOT_FOUND = 'Topic is not found'
INVALID_ANSWER = 'Invalid answer format'
INVALID_PLACEMENT = 'Invalid topicId or order'
INVALID_PAGE = 'Invalid page or limit'

# 一意制約違反をメッセージから見分ける（PostgreSQL / SQLite）
_PLACEMENT_CONSTRAINT_MARKERS = (
    'uq_problems_topic_id_order',
    'problems.topic_id, problems.order',
)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _lookup(obj, key):
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def is_valid_problem_answer(answer):
    """解答が {fields: [{index: number, value: str | number}]} の形か判定"""
    if not answer:
        return False

    fields = _lookup(answer, 'fields')
    if not isinstance(fields, (list, tuple)):
        return False

    for field in fields:
        if field is None:
            return False
        value = _lookup(field, 'value')
        if not _is_number(_lookup(field, 'index')):
            return False
        if not (isinstance(value, str) or _is_number(value)):
            return False
    return True


def mask_problem(problem, placeholder=None):
    """解答の値をプレースホルダに置き換えた問題を返す（index は保持）"""
    placeholder = placeholder if placeholder is not None else settings.MASK_PLACEHOLDER
    fields = _lookup(problem.answer, 'fields') or []
    return {
        'id': problem.id,
        'order': problem.order,
        'topic_id': problem.topic_id,
        'answer': {
            'fields': [
                {'index': _lookup(field, 'index'), 'value': placeholder}
                for field in fields
            ]
        },
    }


class ProblemManager:
    """問題管理クラス"""

    def __init__(self, db: Session):
        self.db = db

    def get_one(self, problem_id):
        if not fits_db_int(problem_id):
            raise NotFoundError(PROBLEM_NOT_FOUND)

        problem = (
            self.db.query(Problem)
            .options(load_only(Problem.id, Problem.order, Problem.answer, Problem.topic_id))
            .filter(Problem.id == problem_id)
            .first()
        )
        if problem is None:
            raise NotFoundError(PROBLEM_NOT_FOUND)
        return problem

    def get_one_masked(self, problem_id):
        """解答者向けに解答を伏せて取得"""
        return mask_problem(self.get_one(problem_id))

    def get_all(self, page, limit):
        """topicId, order の昇順でページ単位に取得（範囲外のページは空リスト）"""
        if page < 1 or limit < 1:
            raise InvalidInputError(INVALID_PAGE)

        offset = (page - 1) * limit
        if offset > DB_INT_MAX:
            return []

        return (
            self.db.query(Problem)
            .options(load_only(Problem.id, Problem.topic_id, Problem.order))
            .order_by(Problem.topic_id.asc(), Problem.order.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def create(self, data: ProblemCreate):
        find_or_fail(self.db, Topic, data.topic_id, TOPIC_NOT_FOUND)

        if not is_valid_problem_answer(data.answer):
            logger.warning("Rejected problem for topic %s: invalid answer format", data.topic_id)
            raise InvalidInputError(INVALID_ANSWER)

        if self._placement_taken(data.topic_id, data.order):
            logger.warning("Rejected problem: topic %s already has order %s", data.topic_id, data.order)
            raise InvalidInputError(INVALID_PLACEMENT)

        problem = Problem(topic_id=data.topic_id, order=data.order, answer=data.answer)
        self.db.add(problem)
        self._commit()
        self.db.refresh(problem)

        logger.info("Created problem %s (topic=%s, order=%s)", problem.id, problem.topic_id, problem.order)
        return problem

    def update(self, problem_id, data: ProblemUpdate):
        problem = find_or_fail(self.db, Problem, problem_id, f'Problem with ID {problem_id} is not found')
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        if 'topic_id' in changes:
            find_or_fail(self.db, Topic, changes['topic_id'], TOPIC_NOT_FOUND)

        if 'answer' in changes and not is_valid_problem_answer(changes['answer']):
            logger.warning("Rejected update of problem %s: invalid answer format", problem_id)
            raise InvalidInputError(INVALID_ANSWER)

        topic_id = changes.get('topic_id', problem.topic_id)
        order = changes.get('order', problem.order)
        if ('topic_id' in changes or 'order' in changes) and self._placement_taken(
            topic_id, order, exclude_id=problem.id
        ):
            logger.warning(
                "Rejected update of problem %s: topic %s already has order %s",
                problem_id, topic_id, order,
            )
            raise InvalidInputError(INVALID_PLACEMENT)

        # 指定されたフィールドだけを反映
        if 'topic_id' in changes:
            problem.topic_id = changes['topic_id']
        if 'order' in changes:
            problem.order = changes['order']
        if 'answer' in changes:
            problem.answer = changes['answer']

        self._commit()
        logger.info("Updated problem %s (%s)", problem_id, ', '.join(sorted(changes)) or 'no changes')

        return {
            'status': 'success',
            'message': 'Problem has been updated successfully',
        }

    def delete(self, problem_id):
        problem = find_or_fail(self.db, Problem, problem_id, f'Problem with ID {problem_id} is not found')

        self.db.delete(problem)
        self.db.commit()
        logger.info("Deleted problem %s", problem_id)

        return {
            'status': 'success',
            'message': 'Problem has been deleted successfully',
        }

    def _placement_taken(self, topic_id, order, exclude_id=None):
        query = self.db.query(Problem.id).filter(Problem.topic_id == topic_id, Problem.order == order)
        if exclude_id is not None:
            query = query.filter(Problem.id != exclude_id)
        with self.db.no_autoflush:
            return query.first() is not None

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if any(marker in str(e.orig) for marker in _PLACEMENT_CONSTRAINT_MARKERS):
                logger.warning("Unique (topic_id, order) constraint rejected write: %s", e.orig)
                raise InvalidInputError(INVALID_PLACEMENT) from e
            raise
