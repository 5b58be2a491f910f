"""
Public endpoints reached by scanning an asset's QR label
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.core.errors import NotFoundError
from assetkeeper.crud.assets import get_asset_by_qr_code
from assetkeeper.crud.complaints import create_complaint
from assetkeeper.schemas.asset import AssetResponse
from assetkeeper.schemas.complaint import ComplaintCreate, ComplaintResponse, PublicComplaintCreate
from assetkeeper.services.qr import public_asset_url, render_qr_png

router = APIRouter()


@router.get("/assets/{qr_code}", response_model=AssetResponse)
async def lookup_asset(qr_code: str, db: AsyncSession = Depends(get_db)):
    """Resolve a scanned QR code to its asset"""
    asset = await get_asset_by_qr_code(db, qr_code)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


@router.get("/assets/{qr_code}/qr.png")
async def qr_label(qr_code: str, db: AsyncSession = Depends(get_db)):
    """PNG label encoding the public lookup URL"""
    asset = await get_asset_by_qr_code(db, qr_code)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    png = render_qr_png(public_asset_url(asset.qr_code))
    return Response(content=png, media_type="image/png")


@router.post("/complaints", response_model=ComplaintResponse, status_code=201)
async def submit_complaint(data: PublicComplaintCreate, db: AsyncSession = Depends(get_db)):
    """File a complaint without an account; archived assets are refused"""
    asset = await get_asset_by_qr_code(db, data.qr_code)
    if not asset:
        raise NotFoundError("Asset", data.qr_code)
    return await create_complaint(
        db,
        ComplaintCreate(
            asset_id=asset.id,
            sender_name=data.sender_name,
            description=data.description,
        ),
    )
