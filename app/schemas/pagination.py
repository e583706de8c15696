"""Pagination metadata shared by paged listings."""

from pydantic import BaseModel, ConfigDict


class PaginationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_items: int
    page_number: int
    page_size: int
    total_pages: int
