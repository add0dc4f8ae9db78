"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from application layer errors.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from customer_hub.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    to_application_error,
)
from customer_hub.core.config import settings
from customer_hub.core.errors import DomainError
from customer_hub.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ApplicationErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_409_CONFLICT,
    ApplicationErrorCode.REQUEST_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
    ApplicationErrorCode.BUSINESS_RULE_VIOLATION: "Business Rule Violation",
    ApplicationErrorCode.REQUEST_FAILED: "Request Failed",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> result = await dispatcher.send(GetCustomerById(customer_id=id), scope)
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_domain_error(
        ...         result.error, request, trace_id
        ...     )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Classify a DomainError and convert it to an RFC 9457 response."""
        return ErrorResponseBuilder.from_application_error(
            to_application_error(error), request, trace_id
        )

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        domain_code = error.domain_error.code.value if error.domain_error else None
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{domain_code or error.code.value}",
            title=_TITLES.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        field_errors = error.field_errors
        if field_errors:
            problem.errors = [
                ErrorDetail(
                    field=e.field or "request",
                    code=e.code.value,
                    message=e.message,
                )
                for e in field_errors
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.NOT_FOUND)
            404
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
