# receipt_points/routes/receipts.py
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ..errors import InvalidPayload
from ..schemas import PointsResponse, ProcessResponse, Receipt
from ..services.scoring import score_receipt
from ..store.repository import ScoreStore
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_store(request: Request) -> ScoreStore:
    return request.app.state.store

@router.post("/process", response_model=ProcessResponse)
async def process_receipt(request: Request, store: ScoreStore = Depends(get_store)):
    raw = await request.body()
    # Decode by hand so a bad body is a plain 400, not FastAPI's 422
    try:
        receipt = Receipt.model_validate_json(raw)
    except ValidationError:
        raise InvalidPayload() from None

    points = score_receipt(receipt)
    receipt_id = store.put(points)
    logger.info("Stored receipt %s (retailer=%r, points=%s)", receipt_id, receipt.retailer, points)
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    return PointsResponse(points=store.get(receipt_id))
