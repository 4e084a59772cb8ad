from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from problem_service.core.config import settings
import logging

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # SQLite はスレッド間で接続を共有できないためチェックを外す
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# SQLAlchemy設定
engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# データベース依存性
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# テーブル作成
def create_tables(bind=None):
    """モデルに対応するテーブルを作成"""
    # モデルを Base.metadata に登録する
    from problem_service.models import problem, topic  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Tables ready on %s", bind.url.render_as_string(hide_password=True))
