import uuid

import pytest

from assetkeeper.core.errors import NotFoundError
from assetkeeper.crud import asset_history as crud
from assetkeeper.schemas.history import AssetHistoryCreate


async def test_empty_history_is_an_empty_list(db, asset):
    assert await crud.get_asset_history(db, asset.id) == []


async def test_history_of_unknown_asset(db):
    missing = uuid.uuid4()
    with pytest.raises(NotFoundError) as exc_info:
        await crud.get_asset_history(db, missing)
    assert str(exc_info.value) == f"Asset with ID {missing} not found"


async def test_create_entry(db, asset, staff):
    entry = await crud.create_asset_history(
        db,
        AssetHistoryCreate(
            asset_id=asset.id,
            changed_by=staff.id,
            change_type="relocated",
            old_value="Lantai 1",
            new_value="Lantai 3",
            description="Moved to the finance floor",
        ),
    )

    fetched = await crud.get_asset_history_by_id(db, entry.id)
    assert fetched.change_type == "relocated"
    assert fetched.changed_by == staff.id
    assert fetched.new_value == "Lantai 3"


async def test_create_entry_checks_references(db, asset):
    asset_id = asset.id
    with pytest.raises(NotFoundError, match="Asset"):
        await crud.create_asset_history(
            db, AssetHistoryCreate(asset_id=uuid.uuid4(), change_type="note")
        )
    with pytest.raises(NotFoundError, match="User"):
        await crud.create_asset_history(
            db, AssetHistoryCreate(asset_id=asset_id, changed_by=uuid.uuid4(), change_type="note")
        )


async def test_get_by_id_returns_none_for_unknown(db):
    assert await crud.get_asset_history_by_id(db, uuid.uuid4()) is None


async def test_log_helpers(db, asset, staff):
    status = await crud.log_status_change(db, asset.id, "good", "broken", changed_by=staff.id)
    assert status.change_type == "status_change"
    assert status.description == "Status changed from good to broken"

    maintenance = await crud.log_maintenance_activity(db, asset.id, "Fan cleaned")
    assert maintenance.change_type == "maintenance"
    assert maintenance.changed_by is None

    complaint_id = uuid.uuid4()
    resolution = await crud.log_complaint_resolution(db, asset.id, complaint_id, changed_by=staff.id)
    assert resolution.change_type == "complaint_resolved"
    assert resolution.new_value == str(complaint_id)
    assert resolution.description == f"Complaint #{complaint_id} resolved"

    history = await crud.get_asset_history(db, asset.id)
    assert [h.id for h in history] == [resolution.id, maintenance.id, status.id]
