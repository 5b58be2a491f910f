"""
Asset lifecycle state machine

An asset is created ACTIVE, can be archived (soft delete) and restored any
number of times, and can only be removed for good from the ARCHIVED state.
"""

from enum import Enum

from assetkeeper.core.errors import PreconditionFailedError


class AssetState(str, Enum):
    """Lifecycle states"""
    ACTIVE = "active"
    ARCHIVED = "archived"
    REMOVED = "removed"


class LifecycleAction(str, Enum):
    """Operations that move an asset between states"""
    ARCHIVE = "archive"
    RESTORE = "restore"
    PURGE = "purge"


def state_of(asset) -> AssetState:
    """Current state of a stored asset row"""
    return AssetState.ARCHIVED if asset.is_archived else AssetState.ACTIVE


def transition(state: AssetState, action: LifecycleAction, asset_id=None) -> AssetState:
    """Return the state reached by applying ``action`` to ``state``

    Raises PreconditionFailedError when the action is not allowed from the
    current state.
    """
    label = f"Asset with ID {asset_id}" if asset_id is not None else "Asset"

    if state == AssetState.REMOVED:
        raise PreconditionFailedError(f"{label} has been permanently deleted")

    if action == LifecycleAction.ARCHIVE:
        # Archiving an archived asset is allowed and stays archived
        return AssetState.ARCHIVED

    if action == LifecycleAction.RESTORE:
        if state != AssetState.ARCHIVED:
            raise PreconditionFailedError(f"{label} is not archived")
        return AssetState.ACTIVE

    if action == LifecycleAction.PURGE:
        if state != AssetState.ARCHIVED:
            raise PreconditionFailedError(
                f"{label} must be archived before permanent deletion"
            )
        return AssetState.REMOVED

    raise ValueError(f"Unknown lifecycle action: {action}")
