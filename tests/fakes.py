"""In-memory collaborators shared by the tests."""

from collections.abc import Mapping
from typing import Any

from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess, FailureKind
from fleet_sync.domain.models.backend import Backend


def ok(data: Any = None, status: int = 200) -> ApiSuccess:
    return ApiSuccess(status=status, data=data)


def failed(
    kind: FailureKind = FailureKind.VALIDATION,
    status: int | None = 400,
    message: str | None = None,
) -> ApiFailure:
    return ApiFailure(kind=kind, status=status, message=message)


class FakeTransport:
    """Returns canned results per ``(method, path)`` and records every call."""

    def __init__(self, responses: Mapping[tuple[str, str], ApiResult] | None = None) -> None:
        self.responses: dict[tuple[str, str], ApiResult] = dict(responses or {})
        self.calls: list[dict[str, Any]] = []

    async def request(
        self,
        method: str,
        path: str,
        *,
        backend: Backend = Backend.PRIMARY,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        self.calls.append(
            {"method": method, "path": path, "backend": backend, "json": json, "params": params}
        )
        return self.responses.get((method, path), ok())


class FakeCollectionEndpoint:
    """Collection endpoint returning queued results."""

    def __init__(self, label: str = "route", soft_delete: bool = False) -> None:
        self.label = label
        self.soft_delete = soft_delete
        self.list_result: ApiResult = ok([])
        self.create_result: ApiResult = ok()
        self.update_result: ApiResult = ok()
        self.status_result: ApiResult = ok()
        self.delete_result: ApiResult = ok()
        self.calls: list[tuple[Any, ...]] = []

    async def list_records(self, params: Mapping[str, Any] | None = None) -> ApiResult:
        self.calls.append(("list", dict(params or {})))
        return self.list_result

    async def create_record(self, payload: Mapping[str, Any]) -> ApiResult:
        self.calls.append(("create", dict(payload)))
        return self.create_result

    async def update_record(self, record_id: str, fields: Mapping[str, Any]) -> ApiResult:
        self.calls.append(("update", record_id, dict(fields)))
        return self.update_result

    async def set_active(self, record_id: str, is_active: bool) -> ApiResult:
        self.calls.append(("set_active", record_id, is_active))
        return self.status_result

    async def delete_record(self, record_id: str) -> ApiResult:
        self.calls.append(("delete", record_id))
        return self.delete_result


class MemoryPreferenceStore:
    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)
