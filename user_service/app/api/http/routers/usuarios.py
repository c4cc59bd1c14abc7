"""User account API router.

Translates HTTP requests into ``UserService`` calls, and service errors and
malformed requests into status codes. Error bodies use the keys ``erro``
and, for failed writes, ``detalhe``.
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from user_service.app.api.http.deps import get_user_service
from user_service.app.core.services import Err, UserError, UserErrorKind, UserService
from user_service.app.entities.core.user import User, UserUpdate

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])

_STATUS_BY_KIND = {
    UserErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    UserErrorKind.INVALID_SELECTOR: status.HTTP_400_BAD_REQUEST,
    UserErrorKind.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    UserErrorKind.UNHANDLED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_WRITE_ERROR_SUMMARIES = {
    "POST": "Não foi possível salvar o usuário",
    "PUT": "Não foi possível atualizar o usuário",
}


def _error_response(error: UserError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_KIND[error.kind],
        content={"erro": error.message},
    )


def _write_error_response(summary: str, error: UserError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"erro": summary, "detalhe": error.message},
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # loc starts with the request part ("body", "query", ...)
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "corpo"
        parts.append(f"{field}: {error.get('msg')}")
    return "; ".join(parts)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed user requests with 400 and the usual error body.

    Write requests get ``{erro, detalhe}``, lookups and deletes ``{erro}``.
    Requests to other routes keep FastAPI's 422 response.
    """
    path = request.url.path
    if path != router.prefix and not path.startswith(f"{router.prefix}/"):
        return await request_validation_exception_handler(request, exc)

    detail = _describe_validation_errors(exc)
    summary = _WRITE_ERROR_SUMMARIES.get(request.method)
    if summary is not None:
        content = {"erro": summary, "detalhe": detail}
    else:
        content = {"erro": f"Requisição inválida: {detail}"}
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    user: User,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Create a user; the password is stored as a digest."""
    result = service.create(user)
    if isinstance(result, Err):
        return _write_error_response(_WRITE_ERROR_SUMMARIES["POST"], result.error)
    return result.value


@router.get("", response_model=User)
def find_user(
    valor: str = Query(..., description="Value to match"),
    tipo: str = Query(..., description="Selector kind: ID, EMAIL or TELEFONE"),
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Find a user by ID, e-mail or phone."""
    result = service.find(valor, tipo)
    if isinstance(result, Err):
        return _error_response(result.error)
    return result.value


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: str,
    changes: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Apply the non-null fields of the body to an existing user."""
    result = service.update(user_id, changes)
    if isinstance(result, Err):
        if result.error.kind is UserErrorKind.DUPLICATE_EMAIL:
            return _write_error_response(_WRITE_ERROR_SUMMARIES["PUT"], result.error)
        return _error_response(result.error)
    return result.value


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    valor: str = Query(..., description="Value to match"),
    tipo: str = Query(..., description="Selector kind: ID, EMAIL or TELEFONE"),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete the user matched by the selector."""
    result = service.delete(valor, tipo)
    if isinstance(result, Err):
        return _error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
