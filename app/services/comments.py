# app/services/comments.py
# Комментарии к товарам: создание и чтение.
import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from app.db.base import new_id
from app.models.comment import Comment
from app.schemas.comment import CommentCreateRequest
from app.services.products import get_product_or_404

logger = logging.getLogger(__name__)


def create_comment(db: Session, payload: CommentCreateRequest) -> Comment:
    # Нет товара: 404, и комментарий не создаётся
    get_product_or_404(db, payload.product_id)
    comment = Comment(
        id=new_id(),
        email=payload.email,
        text=payload.text,
        product_id=payload.product_id,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(f"Comment created: {comment.id} for product {comment.product_id}")
    return comment


def list_comments_by_product(db: Session, product_id: str) -> List[Comment]:
    get_product_or_404(db, product_id)
    return (
        db.query(Comment)
        .filter(Comment.product_id == product_id)
        .order_by(Comment.created_at.desc())
        .all()
    )


def list_comments(db: Session) -> List[Comment]:
    return (
        db.query(Comment)
        .options(joinedload(Comment.product))
        .order_by(Comment.created_at.desc())
        .all()
    )
