import uuid

import pytest

from assetkeeper.core.errors import NotFoundError
from assetkeeper.crud import complaints as crud
from assetkeeper.crud.asset_history import get_asset_history
from assetkeeper.crud.assets import create_asset, delete_asset
from assetkeeper.schemas.complaint import ComplaintCreate, ComplaintUpdate


def _complaint(asset_id, **overrides):
    values = dict(asset_id=asset_id, sender_name="Siti", description="AC bocor")
    values.update(overrides)
    return ComplaintCreate(**values)


async def test_create_and_fetch(db, asset):
    complaint = await crud.create_complaint(db, _complaint(asset.id))

    assert complaint.status == "needs-repair"
    assert complaint.resolved_by is None
    assert await crud.get_complaint_by_id(db, complaint.id) is complaint
    assert [c.id for c in await crud.get_complaints_by_asset_id(db, asset.id)] == [complaint.id]


async def test_create_against_unknown_asset(db):
    with pytest.raises(NotFoundError):
        await crud.create_complaint(db, _complaint(uuid.uuid4()))


async def test_archived_asset_is_hidden_from_complaints(db, monitor_data):
    asset = await create_asset(db, monitor_data)
    asset_id = asset.id
    await crud.create_complaint(db, _complaint(asset_id))
    await delete_asset(db, asset_id)

    with pytest.raises(NotFoundError, match=str(asset_id)):
        await crud.create_complaint(db, _complaint(asset_id, description="Masih rusak"))

    assert len(await crud.get_complaints_by_asset_id(db, asset_id)) == 1


async def test_listing_order_and_pending(db, asset):
    first = await crud.create_complaint(db, _complaint(asset.id))
    second = await crud.create_complaint(db, _complaint(asset.id, status="urgent"))
    third = await crud.create_complaint(db, _complaint(asset.id, status="in-repair"))

    assert [c.id for c in await crud.get_complaints(db)] == [third.id, second.id, first.id]
    assert {c.id for c in await crud.get_pending_complaints(db)} == {first.id, second.id}


async def test_resolution_is_logged(db, asset, staff):
    complaint = await crud.create_complaint(db, _complaint(asset.id))

    updated = await crud.update_complaint(
        db, complaint.id, ComplaintUpdate(status="repaired", resolved_by=staff.id)
    )

    assert updated.status == "repaired"
    assert updated.resolved_by == staff.id
    history = await get_asset_history(db, asset.id)
    assert len(history) == 1
    assert history[0].change_type == "complaint_resolved"
    assert history[0].new_value == str(complaint.id)
    assert history[0].changed_by == staff.id


async def test_status_change_without_resolver_is_not_logged(db, asset):
    complaint = await crud.create_complaint(db, _complaint(asset.id))

    await crud.update_complaint(db, complaint.id, ComplaintUpdate(status="in-repair"))
    await crud.update_complaint(db, complaint.id, ComplaintUpdate(status="repaired"))

    assert await get_asset_history(db, asset.id) == []


async def test_update_unknown_references(db, asset):
    complaint = await crud.create_complaint(db, _complaint(asset.id))
    complaint_id = complaint.id

    with pytest.raises(NotFoundError, match="Complaint"):
        await crud.update_complaint(db, uuid.uuid4(), ComplaintUpdate(status="urgent"))
    with pytest.raises(NotFoundError, match="User"):
        await crud.update_complaint(
            db, complaint_id, ComplaintUpdate(status="repaired", resolved_by=uuid.uuid4())
        )

    stored = await crud.get_complaint_by_id(db, complaint_id)
    assert stored.status == "needs-repair"


async def test_resolver_is_kept_only_on_repair(db, asset, staff):
    complaint = await crud.create_complaint(db, _complaint(asset.id))

    updated = await crud.update_complaint(
        db, complaint.id, ComplaintUpdate(status="in-repair", resolved_by=staff.id)
    )

    assert updated.status == "in-repair"
    assert updated.resolved_by is None
    assert await get_asset_history(db, asset.id) == []
