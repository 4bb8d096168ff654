"""Location Use Case Unit Tests"""
import re

import pytest

from conftest import FakeGeocodingGateway, InMemoryLocationRepository
from location_api.application.errors import (
    GeocodingError,
    LocationNotFoundError,
    LocationStoreError,
    ValidationError,
)
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
from location_api.application.use_cases.location.update_location import build_patch

LOS_ANGELES_INPUT = CreateLocationInput(
    country="USA",
    state="California",
    city="Los Angeles",
)


async def _create(repository, geocoder) -> dict:
    use_case = CreateLocationUseCase(repository, geocoder)
    return (await use_case.execute(LOS_ANGELES_INPUT)).item


class TestCreateLocation:
    """CreateLocationUseCase のテスト"""

    async def test_create_stores_first_candidate(self, repository, geocoder):
        """正常: 先頭の候補が保存される"""
        # Arrange
        geocoder.candidates = [
            {"place_id": 12345, "lat": "34.05", "lon": "-118.24"},
            {"place_id": 99999, "lat": "0", "lon": "0"},
        ]

        # Act
        item = await _create(repository, geocoder)

        # Assert
        assert re.fullmatch(r"[0-9a-f]{32}", item["locationId"])
        assert item["placeId"] == "12345"
        assert item["lat"] == "34.05"
        assert item["lon"] == "-118.24"
        assert item["license"] == "Unknown"
        assert repository.items[item["locationId"]] == item

    async def test_create_passes_query_to_geocoder(self, repository, geocoder):
        """正常: ジオコーダーに city/state/country/format が渡される"""
        await _create(repository, geocoder)

        assert geocoder.calls == [
            {
                "city": "Los Angeles",
                "state": "California",
                "country": "USA",
                "format": "json",
            }
        ]

    async def test_create_rereads_after_put(self, repository, geocoder):
        """正常: 書き込み後に再取得する"""
        await _create(repository, geocoder)

        assert repository.calls == ["put", "get"]

    async def test_no_candidates_fails_without_write(self, repository):
        """異常: 候補がなければ書き込まずに失敗"""
        use_case = CreateLocationUseCase(repository, FakeGeocodingGateway(candidates=[]))

        with pytest.raises(GeocodingError):
            await use_case.execute(LOS_ANGELES_INPUT)

        assert repository.items == {}

    async def test_missing_after_put_is_store_error(self, geocoder):
        """異常: 書き込み後に読めなければストアエラー"""

        class LossyRepository(InMemoryLocationRepository):
            async def put(self, item):
                self.calls.append("put")

        with pytest.raises(LocationStoreError):
            await _create(LossyRepository(), geocoder)

    async def test_created_ids_are_unique(self, repository, geocoder):
        """正常: 作成ごとに異なるIDが割り当てられる"""
        ids = {(await _create(repository, geocoder))["locationId"] for _ in range(50)}

        assert len(ids) == 50
        assert len(repository.items) == 50


class TestGetAndListLocations:
    """GetLocationUseCase / ListLocationsUseCase のテスト"""

    async def test_round_trip_create_then_get(self, repository, geocoder):
        """正常: 作成した項目をそのまま取得できる"""
        created = await _create(repository, geocoder)

        result = await GetLocationUseCase(repository).execute(
            GetLocationInput(location_id=created["locationId"])
        )

        assert result.item == created

    async def test_get_missing_raises_not_found(self, repository):
        """異常: 存在しないIDは LocationNotFoundError"""
        with pytest.raises(LocationNotFoundError):
            await GetLocationUseCase(repository).execute(GetLocationInput(location_id="missing"))

    async def test_get_empty_id_fails_before_store_access(self, repository):
        """異常: 空のIDはストアにアクセスせず ValidationError"""
        with pytest.raises(ValidationError):
            await GetLocationUseCase(repository).execute(GetLocationInput(location_id=""))

        assert repository.calls == []

    async def test_list_empty_table(self, repository):
        """正常: 空のテーブルは空リスト"""
        result = await ListLocationsUseCase(repository).execute()

        assert result.items == []

    async def test_reads_are_idempotent(self, repository, geocoder):
        """正常: 変更がなければ読み取り結果は同じ"""
        created = await _create(repository, geocoder)
        await _create(repository, geocoder)
        list_use_case = ListLocationsUseCase(repository)
        get_use_case = GetLocationUseCase(repository)

        first = await list_use_case.execute()
        second = await list_use_case.execute()
        one = await get_use_case.execute(GetLocationInput(location_id=created["locationId"]))
        two = await get_use_case.execute(GetLocationInput(location_id=created["locationId"]))

        assert first.items == second.items
        assert len(first.items) == 2
        assert one.item == two.item


class TestUpdateLocation:
    """UpdateLocationUseCase のテスト"""

    def test_build_patch_drops_location_id(self):
        """正常: パッチから locationId が除外される"""
        assert build_patch({"locationId": "other", "name": "x"}) == {"name": "x"}

    async def test_update_merges_fields(self, repository, geocoder):
        """正常: 指定フィールドのみ更新され、他は変わらない"""
        created = await _create(repository, geocoder)

        result = await UpdateLocationUseCase(repository).execute(
            UpdateLocationInput(
                location_id=created["locationId"],
                patch={"name": "Downtown LA"},
            )
        )

        assert result.item == {**created, "name": "Downtown LA"}

    async def test_update_never_changes_location_id(self, repository, geocoder):
        """正常: パッチに locationId が含まれても変更されない"""
        created = await _create(repository, geocoder)

        result = await UpdateLocationUseCase(repository).execute(
            UpdateLocationInput(
                location_id=created["locationId"],
                patch={"locationId": "f" * 32, "name": "Renamed"},
            )
        )

        assert result.item["locationId"] == created["locationId"]
        assert "f" * 32 not in repository.items

    async def test_update_accepts_fields_outside_schema(self, repository, geocoder):
        """正常: スキーマにないフィールドもマージされる"""
        created = await _create(repository, geocoder)

        result = await UpdateLocationUseCase(repository).execute(
            UpdateLocationInput(location_id=created["locationId"], patch={"nickname": "LA"})
        )

        assert result.item["nickname"] == "LA"

    @pytest.mark.parametrize("patch", [{}, {"locationId": "abc"}])
    async def test_empty_patch_is_validation_error(self, repository, geocoder, patch):
        """異常: 更新するフィールドがなければ ValidationError"""
        created = await _create(repository, geocoder)
        repository.calls.clear()

        with pytest.raises(ValidationError):
            await UpdateLocationUseCase(repository).execute(
                UpdateLocationInput(location_id=created["locationId"], patch=patch)
            )

        assert repository.calls == []

    async def test_update_missing_raises_not_found(self, repository):
        """異常: 存在しないIDの更新は LocationNotFoundError"""
        with pytest.raises(LocationNotFoundError):
            await UpdateLocationUseCase(repository).execute(
                UpdateLocationInput(location_id="missing", patch={"name": "x"})
            )

        assert repository.items == {}


class TestDeleteLocation:
    """DeleteLocationUseCase のテスト"""

    async def test_delete_returns_snapshot(self, repository, geocoder):
        """正常: 削除前のスナップショットが返り、その後は取得できない"""
        created = await _create(repository, geocoder)

        result = await DeleteLocationUseCase(repository).execute(
            DeleteLocationInput(location_id=created["locationId"])
        )

        assert result.item == created
        with pytest.raises(LocationNotFoundError):
            await GetLocationUseCase(repository).execute(
                GetLocationInput(location_id=created["locationId"])
            )

    async def test_delete_missing_raises_not_found(self, repository):
        """異常: 存在しないIDの削除は LocationNotFoundError"""
        with pytest.raises(LocationNotFoundError):
            await DeleteLocationUseCase(repository).execute(
                DeleteLocationInput(location_id="missing")
            )

        assert "delete" not in repository.calls

    async def test_delete_empty_id_fails_before_store_access(self, repository):
        """異常: 空のIDはストアにアクセスせず ValidationError"""
        with pytest.raises(ValidationError):
            await DeleteLocationUseCase(repository).execute(DeleteLocationInput(location_id=""))

        assert repository.calls == []
