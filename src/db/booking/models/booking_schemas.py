from pydantic import BaseModel
from typing import Optional

class BookingRequest(BaseModel):
    user_id: Optional[int] = None
