# Services/car_router.py
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from Clients import MapsClient, PriceClient, get_maps_client, get_price_client
from database import get_vehicles_db
from exceptions import CarNotFoundException, UnknownManufacturerException
from Models.schemas import CarRequest, CarResponse
from .car_service import CarService

router = APIRouter(
    prefix="/cars",
    tags=["cars"],
    responses={404: {"description": "Car not found"}}
)

def get_car_service(
    db: Session = Depends(get_vehicles_db),
    price_client: PriceClient = Depends(get_price_client),
    maps_client: MapsClient = Depends(get_maps_client)
) -> CarService:
    return CarService(db, price_client, maps_client)

def car_not_found(e: CarNotFoundException) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=e.message
    )

def unknown_manufacturer(e: UnknownManufacturerException) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=e.message
    )

@router.get("", response_model=List[CarResponse], summary="List all vehicles")
def list_cars(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    service: CarService = Depends(get_car_service)
):
    return service.list(skip=skip, limit=limit)

@router.get("/{car_id}",
    response_model=CarResponse,
    summary="Get a vehicle",
    description="Retrieve a vehicle including its current price and the address of its location."
)
def get_car(
    car_id: int,
    service: CarService = Depends(get_car_service)
):
    try:
        return service.find_by_id(car_id)
    except CarNotFoundException as e:
        raise car_not_found(e)

@router.post("", response_model=CarResponse, status_code=status.HTTP_201_CREATED, summary="Create a vehicle")
def create_car(
    car: CarRequest,
    service: CarService = Depends(get_car_service)
):
    try:
        return service.save(car)
    except UnknownManufacturerException as e:
        raise unknown_manufacturer(e)

@router.put("/{car_id}",
    response_model=CarResponse,
    summary="Update a vehicle",
    description="Overwrite condition, details and coordinates of an existing vehicle."
)
def update_car(
    car_id: int,
    car: CarRequest,
    service: CarService = Depends(get_car_service)
):
    try:
        return service.save(car, car_id=car_id)
    except CarNotFoundException as e:
        raise car_not_found(e)
    except UnknownManufacturerException as e:
        raise unknown_manufacturer(e)

@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a vehicle")
def delete_car(
    car_id: int,
    service: CarService = Depends(get_car_service)
):
    try:
        service.delete(car_id)
    except CarNotFoundException as e:
        raise car_not_found(e)
    return None
