from datetime import datetime, timedelta

from assetkeeper.crud import dashboard
from assetkeeper.crud.assets import create_asset, delete_asset
from assetkeeper.crud.complaints import create_complaint
from assetkeeper.crud.maintenance import create_maintenance_schedule, mark_maintenance_completed
from assetkeeper.models.asset import AssetCategory, AssetCondition
from assetkeeper.schemas.asset import AssetCreate
from assetkeeper.schemas.complaint import ComplaintCreate
from assetkeeper.schemas.maintenance import MaintenanceScheduleCreate


async def _seed(db, staff):
    monitor = await create_asset(db, AssetCreate(name="Monitor", category="monitor", owner="IT"))
    await create_asset(db, AssetCreate(name="CPU", category="cpu", condition="good", owner="IT"))
    old = await create_asset(db, AssetCreate(name="Old AC", category="ac", condition="broken", owner="GA"))
    await delete_asset(db, old.id)

    for status in ("needs-repair", "needs-repair", "urgent"):
        await create_complaint(
            db,
            ComplaintCreate(asset_id=monitor.id, sender_name="Rina", description="Rusak", status=status),
        )

    now = datetime.utcnow()
    for days in (2, 10, -3):
        await create_maintenance_schedule(
            db,
            MaintenanceScheduleCreate(
                asset_id=monitor.id,
                scheduled_by=staff.id,
                title=f"Cek {days}",
                scheduled_date=now + timedelta(days=days),
            ),
        )
    done = await create_maintenance_schedule(
        db,
        MaintenanceScheduleCreate(
            asset_id=monitor.id, scheduled_by=staff.id, title="Selesai", scheduled_date=now
        ),
    )
    await mark_maintenance_completed(db, done.id)


async def test_empty_dashboard_fills_zeros(db):
    stats = await dashboard.get_dashboard_stats(db)

    assert stats.total_assets == 0
    assert stats.assets_by_condition == {c.value: 0 for c in AssetCondition}
    assert stats.assets_by_category == {c.value: 0 for c in AssetCategory}
    assert stats.pending_complaints == 0
    assert stats.upcoming_maintenance == 0


async def test_dashboard_stats(db, staff):
    await _seed(db, staff)

    stats = await dashboard.get_dashboard_stats(db)
    assert stats.total_assets == 2
    assert stats.assets_by_condition["new"] == 1
    assert stats.assets_by_condition["good"] == 1
    assert stats.assets_by_condition["broken"] == 0
    assert stats.assets_by_category["ac"] == 0
    assert stats.pending_complaints == 2
    assert stats.upcoming_maintenance == 1


async def test_group_counts_skip_archived(db, staff):
    await _seed(db, staff)

    assert await dashboard.get_assets_by_condition(db) == {"new": 1, "good": 1}
    assert await dashboard.get_assets_by_category(db) == {"monitor": 1, "cpu": 1}
    assert await dashboard.get_complaint_statistics(db) == {"needs-repair": 2, "urgent": 1}


async def test_maintenance_statistics(db, staff):
    await _seed(db, staff)

    stats = await dashboard.get_maintenance_statistics(db)
    assert stats.completed == 1
    assert stats.pending == 3
    assert stats.overdue == 1


async def test_monthly_trends(db, staff):
    await _seed(db, staff)

    trends = await dashboard.get_monthly_asset_trends(db)
    assert trends == {datetime.utcnow().strftime("%Y-%m"): 2}
