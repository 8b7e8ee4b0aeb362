from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES: machine-readable constants for API clients
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR        = "VALIDATION_ERROR"
    INVALID_ARGUMENT        = "INVALID_ARGUMENT"
    NOT_FOUND               = "NOT_FOUND"
    CONFLICT                = "CONFLICT"
    DUPLICATE_ENTRY         = "DUPLICATE_ENTRY"
    INTERNAL_SERVER_ERROR   = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base exception for all application-level errors.
    Carries a machine-readable error_code for client handling.
    """
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str,
        details: list | None = None,
        field: str | None = None,
    ):
        super().__init__(status_code=status_code, detail={
            "message": message,
            "error": {
                "code": error_code,
                "details": details,
                "field": field,
            }
        })

    @property
    def message(self) -> str:
        return self.detail["message"]

    @property
    def error_code(self) -> str:
        return self.detail["error"]["code"]

    @property
    def field(self) -> str | None:
        return self.detail["error"]["field"]


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class NotFoundException(AppException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found", ErrorCode.NOT_FOUND)


class InvalidArgumentException(AppException):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, ErrorCode.INVALID_ARGUMENT, field=field)


class ConflictException(AppException):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(status.HTTP_409_CONFLICT, message, ErrorCode.CONFLICT, field=field)
