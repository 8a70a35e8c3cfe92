from pydantic import BaseModel
from typing import Optional

# Request schemas: các trường đều Optional, kiểm tra bắt buộc nằm ở service
# để lỗi thiếu trường trả về 400 thay vì 422
class SignupRequest(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    contact: Optional[str] = None
    user_password: Optional[str] = None

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

# Response schemas
class SignupResponse(BaseModel):
    message: str
    success: bool
    user_id: int

class LoginResponse(BaseModel):
    message: str
    success: bool
    user_id: int
    userEmail: str

class Profile(BaseModel):
    full_name: str
    email: str
    contact: str

    class Config:
        from_attributes = True

class AuthenticatedUser(BaseModel):
    """Kết quả login thành công: chỉ là định danh, không phải token"""
    user_id: int
    email: str
