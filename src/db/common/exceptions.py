"""
Exceptions nghiệp vụ của hệ thống.

Services raise các lỗi này, main.py chuyển chúng thành HTTP response
theo ``status_code`` của từng lớp.
"""


class LibraryError(Exception):
    """Base exception for all business logic errors."""

    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(LibraryError):
    """Thiếu hoặc rỗng trường bắt buộc"""

    status_code = 400

    def __init__(self, message: str = "All fields are required"):
        super().__init__(message)


class ConflictError(LibraryError):
    """Vi phạm ràng buộc duy nhất (email đã tồn tại)"""

    status_code = 400

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


class AuthenticationError(LibraryError):
    """Sai email hoặc mật khẩu. Không phân biệt hai trường hợp."""

    status_code = 401

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class NotFoundError(LibraryError):
    """Raised when a requested resource doesn't exist."""

    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class PersistenceError(LibraryError):
    """Lỗi tầng database. Message cố định, không chứa lỗi gốc của driver."""

    status_code = 500


def require_fields(*values, message: str = "All fields are required") -> None:
    """Raise ValidationError nếu có giá trị None hoặc chuỗi rỗng"""
    for value in values:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)
