from typing import Any, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from problem_service.core.exceptions import NotFoundError

ModelType = TypeVar("ModelType")

# DB の INTEGER (64bit) に収まる範囲
DB_INT_MIN = -2 ** 63
DB_INT_MAX = 2 ** 63 - 1


def fits_db_int(value: Any) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        return DB_INT_MIN <= value <= DB_INT_MAX
    return True


def find_or_fail(db: Session, model: Type[ModelType], record_id: Any, message: Optional[str] = None) -> ModelType:
    """主キーでレコードを取得し、なければ NotFoundError を送出"""
    # 範囲外の ID は DB に渡すとドライバがエラーになる
    record = db.get(model, record_id) if fits_db_int(record_id) else None
    if record is None:
        raise NotFoundError(message or f"{model.__name__} is not found")
    return record
