from pydantic import BaseModel

class BookSummary(BaseModel):
    book_id: int
    title: str

    class Config:
        from_attributes = True
