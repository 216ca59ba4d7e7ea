from .service_result import ErrorCode, Result, ServiceError, ServiceResult

__all__ = ["ErrorCode", "Result", "ServiceError", "ServiceResult"]
