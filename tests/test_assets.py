import re
import uuid
from datetime import datetime, timedelta

import pytest
from sqlalchemy import select, func

from assetkeeper.core.errors import NotFoundError, PreconditionFailedError
from assetkeeper.crud import assets as crud
from assetkeeper.crud.asset_history import get_asset_history
from assetkeeper.crud.complaints import create_complaint
from assetkeeper.crud.maintenance import create_maintenance_schedule
from assetkeeper.models.asset import Asset
from assetkeeper.models.audit import AssetHistory
from assetkeeper.models.complaint import Complaint
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.schemas.asset import AssetCreate, AssetUpdate, AssetFilter
from assetkeeper.schemas.complaint import ComplaintCreate
from assetkeeper.schemas.maintenance import MaintenanceScheduleCreate

QR_PATTERN = re.compile(r"^ASSET-\d+-[0-9a-f]{8}$")


def test_generated_qr_codes_are_unique_and_well_formed():
    codes = [Asset.generate_qr_code() for _ in range(1000)]
    assert len(set(codes)) == 1000
    assert all(QR_PATTERN.match(code) for code in codes)


async def test_create_asset(db, monitor_data):
    asset = await crud.create_asset(db, monitor_data)

    assert asset.id is not None
    assert asset.is_archived is False
    assert asset.condition == "new"
    assert QR_PATTERN.match(asset.qr_code)
    assert await crud.get_asset_by_qr_code(db, asset.qr_code) is asset


async def test_condition_defaults_to_new(db):
    asset = await crud.create_asset(
        db, AssetCreate(name="Kursi", category="chair", owner="Ruang Rapat")
    )
    assert asset.condition == "new"


async def test_get_asset_by_id_returns_none_for_unknown(db):
    assert await crud.get_asset_by_id(db, uuid.uuid4()) is None
    assert await crud.get_asset_by_qr_code(db, "ASSET-0-00000000") is None


async def test_list_filters_and_paginates(db):
    for i in range(5):
        await crud.create_asset(
            db, AssetCreate(name=f"Monitor {i}", category="monitor", owner="IT Dept")
        )
    await crud.create_asset(
        db, AssetCreate(name="Router Lantai 2", category="router", owner="Network Team",
                        description="Core switch uplink")
    )

    page = await crud.get_assets(db, AssetFilter(page=1, limit=2))
    assert len(page["assets"]) == 2
    assert page["pagination"].total == 6
    assert page["pagination"].total_pages == 3

    last = await crud.get_assets(db, AssetFilter(page=3, limit=2))
    assert len(last["assets"]) == 2

    routers = await crud.get_assets(db, AssetFilter(category="router"))
    assert [a.name for a in routers["assets"]] == ["Router Lantai 2"]

    by_description = await crud.get_assets(db, AssetFilter(search="UPLINK"))
    assert by_description["pagination"].total == 1

    by_owner = await crud.get_assets(db, AssetFilter(owner="it dept"))
    assert by_owner["pagination"].total == 5


async def test_list_hides_archived_unless_requested(db, asset):
    await crud.delete_asset(db, asset.id)

    active = await crud.get_assets(db)
    assert active["assets"] == []
    assert active["pagination"].total == 0
    assert active["pagination"].total_pages == 0

    archived = await crud.get_assets(db, AssetFilter(is_archived=True))
    assert [a.id for a in archived["assets"]] == [asset.id]


async def test_update_owner_only_writes_no_history(db, asset):
    updated = await crud.update_asset(db, asset.id, AssetUpdate(owner="Jane Roe"))

    assert updated.owner == "Jane Roe"
    assert await get_asset_history(db, asset.id) == []


async def test_update_condition_writes_one_history_row(db, asset):
    await crud.update_asset(db, asset.id, AssetUpdate(condition="good"))
    history = await get_asset_history(db, asset.id)
    assert len(history) == 1

    await crud.update_asset(db, asset.id, AssetUpdate(condition="under-repair"))
    history = await get_asset_history(db, asset.id)
    assert len(history) == 2

    latest = history[0]
    assert latest.change_type == "status_change"
    assert latest.old_value == "good"
    assert latest.new_value == "under-repair"
    assert latest.changed_by is None
    assert latest.description == "Asset condition changed from good to under-repair"


async def test_update_with_same_condition_writes_no_history(db, asset):
    await crud.update_asset(db, asset.id, AssetUpdate(condition="new", name="Monitor LG"))
    assert await get_asset_history(db, asset.id) == []


async def test_update_records_actor(db, asset, staff):
    await crud.update_asset(db, asset.id, AssetUpdate(condition="broken"), changed_by=staff.id)
    history = await get_asset_history(db, asset.id)
    assert history[0].changed_by == staff.id


async def test_update_rejects_unknown_actor(db, asset):
    asset_id = asset.id

    with pytest.raises(NotFoundError, match="User"):
        await crud.update_asset(db, asset_id, AssetUpdate(owner="Siti"), changed_by=uuid.uuid4())

    stored = await crud.get_asset_by_id(db, asset_id)
    assert stored.owner == "John Doe"


async def test_update_unknown_asset(db):
    with pytest.raises(NotFoundError, match="not found"):
        await crud.update_asset(db, uuid.uuid4(), AssetUpdate(owner="Nobody"))


async def test_archive_twice_records_two_rows(db, asset):
    assert await crud.delete_asset(db, asset.id) is True
    assert await crud.delete_asset(db, asset.id) is True

    stored = await crud.get_asset_by_id(db, asset.id)
    assert stored.is_archived is True
    archived_rows = [h for h in await get_asset_history(db, asset.id) if h.change_type == "archived"]
    assert len(archived_rows) == 2


async def test_archive_unknown_asset(db):
    with pytest.raises(NotFoundError):
        await crud.delete_asset(db, uuid.uuid4())


async def test_restore_active_asset_fails(db, asset):
    # A failed operation rolls back and expires loaded rows
    asset_id = asset.id
    with pytest.raises(PreconditionFailedError, match="not archived"):
        await crud.restore_asset(db, asset_id)
    assert await get_asset_history(db, asset_id) == []


async def test_archive_restore_restore(db, monitor_data):
    asset = await crud.create_asset(db, monitor_data)
    asset_id = asset.id
    await crud.delete_asset(db, asset_id)

    restored = await crud.restore_asset(db, asset_id)
    assert restored.is_archived is False

    with pytest.raises(PreconditionFailedError, match="not archived"):
        await crud.restore_asset(db, asset_id)

    history = await get_asset_history(db, asset_id)
    assert sorted(h.change_type for h in history) == ["archived", "restored"]


async def test_archived_listing(db, monitor_data):
    first = await crud.create_asset(db, monitor_data)
    second = await crud.create_asset(db, monitor_data)
    await crud.delete_asset(db, first.id)
    await crud.delete_asset(db, second.id)

    archived = await crud.get_archived_assets(db)
    assert [a.id for a in archived] == [second.id, first.id]


async def test_permanent_delete_requires_archive(db, asset, staff):
    asset_id = asset.id
    await create_complaint(
        db, ComplaintCreate(asset_id=asset_id, sender_name="Budi", description="Layar berkedip")
    )
    await create_maintenance_schedule(
        db,
        MaintenanceScheduleCreate(
            asset_id=asset_id,
            scheduled_by=staff.id,
            title="Ganti kabel",
            scheduled_date=datetime.utcnow() + timedelta(days=5),
        ),
    )
    await crud.update_asset(db, asset_id, AssetUpdate(condition="good"))

    with pytest.raises(PreconditionFailedError, match="must be archived"):
        await crud.permanent_delete_asset(db, asset_id)

    assert await crud.get_asset_by_id(db, asset_id) is not None
    complaints = await db.execute(select(func.count(Complaint.id)))
    assert complaints.scalar() == 1
    schedules = await db.execute(select(func.count(MaintenanceSchedule.id)))
    assert schedules.scalar() == 1
    assert len(await get_asset_history(db, asset_id)) == 1


async def test_permanent_delete_cascades(db, asset, staff):
    asset_id = asset.id
    await create_complaint(
        db, ComplaintCreate(asset_id=asset_id, sender_name="Budi", description="Mati total")
    )
    await create_maintenance_schedule(
        db,
        MaintenanceScheduleCreate(
            asset_id=asset_id,
            scheduled_by=staff.id,
            title="Cek kabel",
            scheduled_date=datetime.utcnow() + timedelta(days=3),
        ),
    )
    await crud.delete_asset(db, asset_id)

    assert await crud.permanent_delete_asset(db, asset_id) is True

    assert await crud.get_asset_by_id(db, asset_id) is None
    for model in (Complaint, MaintenanceSchedule, AssetHistory):
        result = await db.execute(select(func.count(model.id)).where(model.asset_id == asset_id))
        assert result.scalar() == 0

    with pytest.raises(NotFoundError):
        await crud.permanent_delete_asset(db, asset_id)
