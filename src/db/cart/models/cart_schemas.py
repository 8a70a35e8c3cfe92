from pydantic import BaseModel
from typing import Optional

# Cart schemas
class CartAddRequest(BaseModel):
    user_id: Optional[int] = None
    book_id: Optional[int] = None
    quantity: Optional[int] = None

class CartRemoveRequest(BaseModel):
    user_id: Optional[int] = None
    book_id: Optional[int] = None

class CartLine(BaseModel):
    cart_id: int
    title: str
    book_id: int
    quantity: int
