from fastapi import APIRouter, Depends, status
from typing import List
from uuid import UUID

from app.dependencies import get_property_service
from app.models.property import Property
from app.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from app.services.analytics_service import occupancy_rate
from app.services.property_service import PropertyService

router = APIRouter()


def to_response(prop: Property) -> PropertyResponse:
    response = PropertyResponse.model_validate(prop)
    response.occupancy_rate = occupancy_rate(prop)
    return response


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_property(
    property_in: PropertyCreate,
    service: PropertyService = Depends(get_property_service),
):
    """Create a property with its units (all vacant)"""
    return to_response(service.create_property(property_in))


@router.get("/detail/{property_id}", response_model=PropertyResponse)
def get_property(
    property_id: UUID,
    service: PropertyService = Depends(get_property_service),
):
    """Get a specific property"""
    return to_response(service.get_property(property_id))


@router.get("/{landlord_id}", response_model=List[PropertyResponse])
def list_properties(
    landlord_id: str,
    service: PropertyService = Depends(get_property_service),
):
    """Get all properties owned by a landlord"""
    return [to_response(p) for p in service.list_properties(landlord_id)]


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: UUID,
    property_update: PropertyUpdate,
    service: PropertyService = Depends(get_property_service),
):
    """Update name, location or the unit list of a property"""
    return to_response(service.update_property(property_id, property_update))


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    property_id: UUID,
    service: PropertyService = Depends(get_property_service),
):
    """Delete a property (refused while any unit is occupied)"""
    service.delete_property(property_id)
    return None
