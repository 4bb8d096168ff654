"""
Location Lambda Handlers

API Gateway (REST) から呼ばれる5つのエントリポイント:
- GET    /locations               → get_locations
- POST   /locations               → create_location
- GET    /locations/{locationId}  → get_location
- PATCH  /locations/{locationId}  → update_location
- DELETE /locations/{locationId}  → delete_location

各ハンドラは全ての例外を自身の境界で捕捉し、統一エンベロープに変換する。
"""
from __future__ import annotations

import asyncio
import functools
from typing import Any, Awaitable, Callable

import structlog

from location_api.application.use_cases.location import (
    CreateLocationInput,
    CreateLocationUseCase,
    DeleteLocationInput,
    DeleteLocationUseCase,
    GetLocationInput,
    GetLocationUseCase,
    ListLocationsUseCase,
    UpdateLocationInput,
    UpdateLocationUseCase,
)
from location_api.application.use_cases.location.common import to_location_id
from location_api.presentation.dependencies import Dependencies, get_dependencies
from location_api.presentation.middleware import (
    OperationMessages,
    bind_invocation_context,
    error_response,
)
from location_api.presentation.requests import (
    CreateLocationRequest,
    get_path_parameter,
    parse_json_body,
)
from location_api.presentation.responses import send_response, success_body

logger = structlog.get_logger()

Handle = Callable[[dict[str, Any], Dependencies], Awaitable[Any]]

LIST_MESSAGES = OperationMessages(
    success="The 'Locations' were successfully retrieved.",
    log="An error occurred while retrieving the locations.",
    user="An error occurred while retrieving the locations. Please try again later.",
)
GET_MESSAGES = OperationMessages(
    success="The 'Location' was successfully retrieved.",
    log="An error occurred while retrieving the location.",
    user="An error occurred while retrieving the location. Please try again later.",
)
CREATE_MESSAGES = OperationMessages(
    success="The 'Location' was successfully created.",
    log="An error occurred while creating the location.",
    user="An error occurred while creating the location. Please try again later.",
)
UPDATE_MESSAGES = OperationMessages(
    success="The 'Location' was successfully updated.",
    log="An error occurred while updating the location.",
    user="An error occurred while updating the location. Please try again later.",
)
DELETE_MESSAGES = OperationMessages(
    success="The 'Location' was successfully deleted.",
    log="An error occurred while deleting the location.",
    user="An error occurred while deleting the location. Please try again later.",
)


def api_handler(
    operation: str,
    messages: OperationMessages,
) -> Callable[[Handle], Callable[..., dict]]:
    """
    Lambda エントリポイントのデコレータ

    依存関係の解決、ログコンテキストの設定、例外 → エンベロープ変換を担う。
    テストでは dependencies を明示的に渡せる。
    """

    def decorator(handle: Handle) -> Callable[..., dict]:
        @functools.wraps(handle)
        def lambda_handler(
            event: dict | None,
            context: Any,
            dependencies: Dependencies | None = None,
        ) -> dict:
            event = event or {}

            try:
                # ログ設定は get_dependencies() 内で行われる
                deps = dependencies if dependencies is not None else get_dependencies()
                bind_invocation_context(event, context, operation)
                logger.info("request_started")
                data = asyncio.run(handle(event, deps))
            except Exception as e:
                return error_response(e, messages)

            logger.info("request_completed", status_code=200)
            return send_response(200, success_body(data, messages.success))

        return lambda_handler

    return decorator


@api_handler("get_locations", LIST_MESSAGES)
async def get_locations(event: dict[str, Any], deps: Dependencies) -> list[dict[str, Any]]:
    """全ロケーションを取得"""
    use_case = ListLocationsUseCase(deps.location_repository)
    result = await use_case.execute()
    return result.items


@api_handler("get_location", GET_MESSAGES)
async def get_location(event: dict[str, Any], deps: Dependencies) -> dict[str, Any]:
    """
    ロケーションを1件取得

    locationId (required | pathParameter | string)
    """
    use_case = GetLocationUseCase(deps.location_repository)
    result = await use_case.execute(
        GetLocationInput(location_id=get_path_parameter(event, "locationId"))
    )
    return result.item


@api_handler("create_location", CREATE_MESSAGES)
async def create_location(event: dict[str, Any], deps: Dependencies) -> dict[str, Any]:
    """
    ロケーションを作成

    country, state, city (required | body | string) で Nominatim を検索し、
    先頭の候補を保存する。format (optional | body | string) [Default: json]
    """
    request = CreateLocationRequest.from_payload(parse_json_body(event))

    use_case = CreateLocationUseCase(deps.location_repository, deps.geocoding_gateway)
    result = await use_case.execute(
        CreateLocationInput(
            country=request.country,
            state=request.state,
            city=request.city,
            format=request.format,
        )
    )
    return result.item


@api_handler("update_location", UPDATE_MESSAGES)
async def update_location(event: dict[str, Any], deps: Dependencies) -> dict[str, Any]:
    """
    ロケーションを部分更新

    locationId (required | pathParameter | string)
    ボディの任意の属性をマージする（locationId は無視される）
    """
    # パスパラメータの検証をボディ解析より先に行う
    location_id = to_location_id(get_path_parameter(event, "locationId"))
    patch = parse_json_body(event)

    use_case = UpdateLocationUseCase(deps.location_repository)
    result = await use_case.execute(
        UpdateLocationInput(location_id=str(location_id), patch=patch)
    )
    return result.item


@api_handler("delete_location", DELETE_MESSAGES)
async def delete_location(event: dict[str, Any], deps: Dependencies) -> dict[str, Any]:
    """
    ロケーションを削除し、削除前のスナップショットを返す

    locationId (required | pathParameter | string)
    """
    use_case = DeleteLocationUseCase(deps.location_repository)
    result = await use_case.execute(
        DeleteLocationInput(location_id=get_path_parameter(event, "locationId"))
    )
    return result.item
