from pydantic import BaseModel


class DeleteStatus(BaseModel):
    """Outcome of a delete-one/delete-many call"""
    acknowledged: bool = True
    deleted_count: int
