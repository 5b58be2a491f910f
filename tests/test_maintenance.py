import uuid
from datetime import datetime, timedelta, timezone

import pytest

from assetkeeper.core.errors import NotFoundError
from assetkeeper.crud import maintenance as crud
from assetkeeper.crud.asset_history import get_asset_history
from assetkeeper.schemas.maintenance import MaintenanceScheduleCreate, MaintenanceScheduleUpdate


def _schedule(asset_id, user_id, days=3, title="Bersihkan filter AC"):
    return MaintenanceScheduleCreate(
        asset_id=asset_id,
        scheduled_by=user_id,
        title=title,
        scheduled_date=datetime.utcnow() + timedelta(days=days),
    )


async def test_create_requires_existing_asset_and_user(db, asset, staff):
    asset_id = asset.id
    with pytest.raises(NotFoundError, match="Asset"):
        await crud.create_maintenance_schedule(db, _schedule(uuid.uuid4(), staff.id))
    with pytest.raises(NotFoundError, match="User"):
        await crud.create_maintenance_schedule(db, _schedule(asset_id, uuid.uuid4()))


async def test_aware_dates_are_stored_as_utc(db, asset, staff):
    when = datetime(2030, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=7)))
    schedule = await crud.create_maintenance_schedule(
        db,
        MaintenanceScheduleCreate(
            asset_id=asset.id, scheduled_by=staff.id, title="Servis", scheduled_date=when
        ),
    )
    assert schedule.scheduled_date == datetime(2030, 1, 1, 2, 0)


async def test_listing_and_upcoming(db, asset, staff):
    later = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id, days=20))
    soon = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id, days=2))
    far = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id, days=45))
    past = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id, days=-1))

    ordered = await crud.get_maintenance_schedules(db)
    assert [s.id for s in ordered] == [past.id, soon.id, later.id, far.id]
    assert len(await crud.get_maintenance_schedules_by_asset_id(db, asset.id)) == 4

    upcoming = await crud.get_upcoming_maintenance(db)
    assert [s.id for s in upcoming] == [soon.id, later.id]


async def test_completion_stamps_and_clears(db, asset, staff):
    schedule = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id))

    done = await crud.update_maintenance_schedule(
        db, schedule.id, MaintenanceScheduleUpdate(is_completed=True)
    )
    assert done.is_completed is True
    stamped = done.completed_at
    assert stamped is not None

    again = await crud.update_maintenance_schedule(
        db, schedule.id, MaintenanceScheduleUpdate(is_completed=True, title="Servis ulang")
    )
    assert again.completed_at == stamped
    assert again.title == "Servis ulang"

    reopened = await crud.update_maintenance_schedule(
        db, schedule.id, MaintenanceScheduleUpdate(is_completed=False)
    )
    assert reopened.completed_at is None


async def test_explicit_completion_time_wins(db, asset, staff):
    schedule = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id))
    finished = datetime(2024, 5, 1, 10, 30)

    done = await crud.update_maintenance_schedule(
        db, schedule.id, MaintenanceScheduleUpdate(is_completed=True, completed_at=finished)
    )
    assert done.completed_at == finished


async def test_update_unknown_schedule(db):
    with pytest.raises(NotFoundError):
        await crud.update_maintenance_schedule(
            db, uuid.uuid4(), MaintenanceScheduleUpdate(title="x")
        )


async def test_mark_completed_logs_history(db, asset, staff):
    schedule = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id))

    done = await crud.mark_maintenance_completed(db, schedule.id)
    assert done.is_completed is True
    assert done.completed_at is not None

    history = await get_asset_history(db, asset.id)
    assert len(history) == 1
    assert history[0].change_type == "maintenance"
    assert history[0].changed_by == staff.id
    assert history[0].description == "Maintenance completed: Bersihkan filter AC"


async def test_calendar_lists_open_schedules(db, asset, staff):
    open_one = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id))
    closed = await crud.create_maintenance_schedule(db, _schedule(asset.id, staff.id, days=4))
    await crud.mark_maintenance_completed(db, closed.id)

    events = await crud.get_calendar_events(db)
    assert len(events) == 1
    event = events[0]
    assert event.id == open_one.id
    assert event.type == "maintenance"
    assert event.asset_name == "Monitor Dell 24"
    assert event.date == open_one.scheduled_date
