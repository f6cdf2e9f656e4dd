# Services/price_router.py
import logging
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from typing import List
from Models import Price
from Models.schemas import PriceRequest, PriceResponse, PriceUpdate
from database import get_pricing_db
from .price_event_handler import handle_price_before_create

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/price",
    tags=["prices"],
    responses={404: {"description": "Price not found"}}
)

def price_not_found(vehicle_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Price for vehicle '{vehicle_id}' not found"
    )

@router.get("", response_model=List[PriceResponse])
async def list_prices(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_pricing_db)
):
    return db.query(Price).order_by(Price.vehicle_id).offset(skip).limit(limit).all()

@router.get("/{vehicle_id}", response_model=PriceResponse)
async def get_price(
    vehicle_id: int,
    db: Session = Depends(get_pricing_db)
):
    price = db.get(Price, vehicle_id)
    if not price:
        raise price_not_found(vehicle_id)
    return price

@router.post("",
    response_model=PriceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a price",
    description="""
    Register a price for a vehicle.
    Currency and price are always generated by the service; only vehicleId is taken from the request.
    """
)
async def create_price(
    price: PriceRequest,
    db: Session = Depends(get_pricing_db)
):
    db_price = handle_price_before_create(Price(**price.model_dump()))
    if db_price.vehicle_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="vehicleId is required"
        )

    db.add(db_price)
    try:
        db.commit()
        db.refresh(db_price)
    except exc.IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Price for vehicle '{price.vehicle_id}' already exists"
        )
    logger.info(f"Created price for vehicle {db_price.vehicle_id}: {db_price.price} {db_price.currency}")
    return db_price

@router.put("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Update a price")
async def update_price(
    vehicle_id: int,
    price: PriceUpdate,
    db: Session = Depends(get_pricing_db)
):
    db_price = db.get(Price, vehicle_id)
    if not db_price:
        raise price_not_found(vehicle_id)

    for field, value in price.model_dump().items():
        setattr(db_price, field, value)

    db.commit()
    logger.info(f"Updated price for vehicle {vehicle_id}: {price.price} {price.currency}")
    return None

@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a price")
async def delete_price(
    vehicle_id: int,
    db: Session = Depends(get_pricing_db)
):
    db_price = db.get(Price, vehicle_id)
    if not db_price:
        raise price_not_found(vehicle_id)
    db.delete(db_price)
    db.commit()
    logger.info(f"Deleted price for vehicle {vehicle_id}")
    return None
