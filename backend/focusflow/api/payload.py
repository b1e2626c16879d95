"""Shapes shared by the RPC routers."""
from pydantic import BaseModel

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class RecordRef(BaseModel):
    id: int


class SuccessOut(BaseModel):
    success: bool


def set_fields(body: BaseModel, exclude=("id",), nullable=()) -> dict:
    """Fields the caller actually sent.

    An explicit null is kept only for nullable columns; for the others it
    means "leave unchanged".
    """
    sent = body.model_dump(exclude_unset=True, exclude=set(exclude))
    return {k: v for k, v in sent.items() if v is not None or k in nullable}
