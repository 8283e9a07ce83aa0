# app/api/comments.py
# Админские роуты комментариев (только создание и чтение).
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core import security
from app.schemas.comment import CommentCreateRequest, CommentOut, CommentWithProduct
from app.schemas.common import success
from app.services import comments

router = APIRouter(dependencies=[Depends(security.get_current_admin)])

@router.post("/comment/create", status_code=status.HTTP_201_CREATED)
def create_comment(payload: CommentCreateRequest, db: Session = Depends(security.get_db)):
    comment = comments.create_comment(db, payload)
    return success(CommentOut.model_validate(comment))

@router.get("/comments/get/by/productId/{product_id}")
def get_comments_by_product(product_id: str, db: Session = Depends(security.get_db)):
    items = comments.list_comments_by_product(db, product_id)
    return success([CommentOut.model_validate(c) for c in items])

@router.get("/comments/get/all")
def get_all_comments(db: Session = Depends(security.get_db)):
    """Комментарии с краткой информацией о товаре (id, title, description)."""
    return success([CommentWithProduct.model_validate(c) for c in comments.list_comments(db)])
