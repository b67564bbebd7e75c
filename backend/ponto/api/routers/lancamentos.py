"""Time-clock entry endpoints (``/api/lancamentos``)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies import (
    get_current_principal,
    get_employee_service,
    get_entry_service,
    get_page_size,
    require_admin,
)
from ...api.schemas import EntryDTO, EntryPage, Envelope
from ...domain.employees import EmployeeService
from ...domain.timeclock import (
    SORTABLE_FIELDS,
    Entry,
    EntryNotFound,
    EntryService,
    EntryType,
    PageRequest,
    SortDirection,
)
from ...domain.timeclock.validation import (
    ValidationErrors,
    parse_local_datetime,
    validate_employee,
    validate_entry_type,
    validate_sort_direction,
    validate_timestamp,
)
from ...infra.logging import get_logger
from ...infra.metrics import EntryMetrics
from ...security import Principal, belongs_to_user

router = APIRouter(prefix="/api/lancamentos", tags=["lancamentos"])
logger = get_logger(__name__)
metrics = EntryMetrics()

# Wire name accepted in ``ord`` -> Entry attribute.
ORDER_FIELDS: dict[str, str] = {
    EntryDTO.model_fields[attribute].alias or attribute: attribute
    for attribute in SORTABLE_FIELDS
}


@router.post(
    "",
    response_model=Envelope[EntryDTO],
    summary="Register a time-clock entry",
)
def create_entry(
    payload: EntryDTO,
    response: Response,
    principal: Principal = Depends(get_current_principal),
    entries: EntryService = Depends(get_entry_service),
    employees: EmployeeService = Depends(get_employee_service),
) -> Envelope[EntryDTO]:
    metrics.request("create")
    errors = ValidationErrors()

    validate_employee(payload.employee_id, employees, errors)
    if payload.employee_id and payload.employee_id.strip():
        if not belongs_to_user(principal, payload.employee_id):
            errors.add(
                "funcionario",
                f"You cannot add entries for employee {payload.employee_id}",
            )
    if payload.id is not None:
        existing = entries.find_by_id(payload.id)
        if existing is not None and not belongs_to_user(
            principal, existing.employee_id
        ):
            errors.add(
                "lancamento", f"You do not have access to entry {payload.id}"
            )
    validate_entry_type(payload.type, errors)
    validate_timestamp(payload.timestamp, errors)

    if errors.has_errors:
        return _reject(response, errors, operation="create", principal=principal)

    entry = _dto_to_entry(payload, entries, errors)
    if errors.has_errors:
        return _reject(response, errors, operation="create", principal=principal)

    saved = entries.persist(entry)
    logger.info(
        "entry_created",
        extra={"entry_id": saved.id, "actor_id": principal.user_id},
    )
    return Envelope[EntryDTO](data=_entry_to_dto(saved))


@router.put(
    "/{entry_id}",
    response_model=Envelope[EntryDTO],
    summary="Replace a time-clock entry (admin only)",
)
def update_entry(
    entry_id: str,
    payload: EntryDTO,
    response: Response,
    principal: Principal = Depends(require_admin),
    entries: EntryService = Depends(get_entry_service),
    employees: EmployeeService = Depends(get_employee_service),
) -> Envelope[EntryDTO]:
    # Ownership is not checked here; the admin guard is the only gate.
    metrics.request("update")
    errors = ValidationErrors()

    if entries.find_by_id(entry_id) is None:
        errors.add("lancamento", f"Entry {entry_id} was not found.")
    if payload.id != entry_id:
        errors.add(
            "lancamento",
            f"The id of the submitted object ({payload.id}) differs from "
            f"the id given as parameter ({entry_id})",
        )
    validate_employee(payload.employee_id, employees, errors)
    validate_entry_type(payload.type, errors)
    validate_timestamp(payload.timestamp, errors)

    if errors.has_errors:
        return _reject(response, errors, operation="update", principal=principal)

    entry = _dto_to_entry(payload, entries, errors)
    if errors.has_errors:
        return _reject(response, errors, operation="update", principal=principal)

    saved = entries.persist(entry)
    logger.info(
        "entry_updated",
        extra={"entry_id": saved.id, "actor_id": principal.user_id},
    )
    return Envelope[EntryDTO](data=_entry_to_dto(saved))


@router.get(
    "/{entry_id}",
    response_model=Envelope[EntryDTO],
    summary="Retrieve a time-clock entry",
)
def get_entry(
    entry_id: str,
    response: Response,
    principal: Principal = Depends(get_current_principal),
    entries: EntryService = Depends(get_entry_service),
) -> Envelope[EntryDTO]:
    metrics.request("get")
    entry = entries.find_by_id(entry_id)
    if entry is None:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return Envelope[EntryDTO](errors=[f"Entry {entry_id} not found"])

    if not belongs_to_user(principal, entry.employee_id):
        _log_access_denied(principal, entry.employee_id, entry_id=entry_id)
        response.status_code = status.HTTP_403_FORBIDDEN
        return Envelope[EntryDTO](
            errors=[f"You do not have access to entry {entry_id}"]
        )

    return Envelope[EntryDTO](data=_entry_to_dto(entry))


@router.get(
    "/funcionario/{employee_id}",
    response_model=Envelope[EntryPage],
    summary="List an employee's time-clock entries",
)
def list_entries_by_employee(
    employee_id: str,
    response: Response,
    page: int = Query(0, alias="pag"),
    order: str = Query("id", alias="ord"),
    direction: str = Query("DESC", alias="dir"),
    principal: Principal = Depends(get_current_principal),
    entries: EntryService = Depends(get_entry_service),
    page_size: int = Depends(get_page_size),
) -> Envelope[EntryPage]:
    metrics.request("list")
    if employee_id.strip() and not belongs_to_user(principal, employee_id):
        _log_access_denied(principal, employee_id)
        response.status_code = status.HTTP_403_FORBIDDEN
        return Envelope[EntryPage](
            errors=[f"You do not have access to the entries of user {employee_id}"]
        )

    normalized_direction = direction.upper()
    direction_error = validate_sort_direction(normalized_direction)
    if direction_error is not None:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return Envelope[EntryPage](errors=[direction_error])

    if order not in ORDER_FIELDS:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return Envelope[EntryPage](
            errors=[
                "Unsupported order field. Supported fields: "
                + ", ".join(ORDER_FIELDS)
            ]
        )
    if page < 0:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return Envelope[EntryPage](errors=["Page index must not be negative"])

    page_request = PageRequest(
        page=page,
        size=page_size,
        direction=SortDirection(normalized_direction),
        sort_by=ORDER_FIELDS[order],
    )
    result = entries.find_by_employee(employee_id, page_request).map(_entry_to_dto)
    return Envelope[EntryPage](
        data=EntryPage(
            content=result.content,
            number=result.number,
            size=result.size,
            total_elements=result.total_elements,
            total_pages=result.total_pages,
        )
    )


@router.delete(
    "/{entry_id}",
    response_model=Envelope[str],
    summary="Remove a time-clock entry (admin only)",
)
def delete_entry(
    entry_id: str,
    response: Response,
    principal: Principal = Depends(require_admin),
    entries: EntryService = Depends(get_entry_service),
) -> Envelope[str]:
    metrics.request("delete")
    not_found = Envelope[str](
        errors=[f"Error removing entry {entry_id}. Record not found"]
    )
    if entries.find_by_id(entry_id) is None:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return not_found

    try:
        entries.delete(entry_id)
    except EntryNotFound:
        # Removed by a concurrent request after the lookup.
        response.status_code = status.HTTP_400_BAD_REQUEST
        return not_found

    logger.info(
        "entry_removed",
        extra={"entry_id": entry_id, "actor_id": principal.user_id},
    )
    return Envelope[str](data=f"Entry {entry_id} was removed successfully.")


def _reject(
    response: Response,
    errors: ValidationErrors,
    *,
    operation: str,
    principal: Principal,
) -> Envelope[EntryDTO]:
    metrics.rejected(operation)
    logger.info(
        "entry_validation_failed",
        extra={
            "operation": operation,
            "actor_id": principal.user_id,
            "fields": sorted({field for field, _ in errors.items}),
            "error_count": len(errors.items),
        },
    )
    response.status_code = status.HTTP_400_BAD_REQUEST
    return Envelope[EntryDTO](errors=errors.messages)


def _log_access_denied(
    principal: Principal, employee_id: str, *, entry_id: str | None = None
) -> None:
    metrics.access_denied()
    logger.warning(
        "entry_access_denied",
        extra={
            "actor_id": principal.user_id,
            "employee_id": employee_id,
            "entry_id": entry_id,
        },
    )


def _dto_to_entry(
    dto: EntryDTO, entries: EntryService, errors: ValidationErrors
) -> Entry:
    """Build the entity from an already validated DTO.

    A DTO id without a stored entry is reported through ``errors``.
    """

    if dto.id is not None and entries.find_by_id(dto.id) is None:
        errors.add("lancamento", "Entry not found.")
    if dto.employee_id is None:
        raise ValueError("employee id is required to build an entry")
    return Entry(
        timestamp=parse_local_datetime(dto.timestamp),
        type=EntryType(dto.type),
        employee_id=dto.employee_id,
        description=dto.description,
        location=dto.location,
        id=dto.id,
    )


def _entry_to_dto(entry: Entry) -> EntryDTO:
    return EntryDTO(
        id=entry.id,
        timestamp=entry.timestamp.isoformat(),
        type=entry.type.value,
        employee_id=entry.employee_id,
        description=entry.description,
        location=entry.location,
    )
