from datetime import timedelta, timezone

from app.db.base import utcnow
from app.models.product import Product


def test_utcnow_is_timezone_aware():
    now = utcnow()

    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert now.tzinfo == timezone.utc


def test_timestamp_columns_keep_timezone():
    columns = Product.__table__.c

    assert columns.created_at.type.timezone is True
    assert columns.updated_at.type.timezone is True


def test_new_rows_get_aware_timestamps(db):
    product = Product(title="Tea", description="Green", amount=1, image="tea.png")
    db.add(product)
    db.flush()

    assert product.created_at.tzinfo is not None
    assert product.updated_at >= product.created_at
