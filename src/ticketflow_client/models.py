from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class SeatStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"


class User(_ApiModel):
    id: str
    email: str
    name: str
    role: UserRole = UserRole.USER


class AuthResponse(_ApiModel):
    token: str
    user: User


class Event(_ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    organizer_id: Optional[str] = Field(default=None, alias="organizerId")
    venue_id: Optional[str] = Field(default=None, alias="venueId")
    status: Optional[str] = None
    is_published: Optional[bool] = Field(default=None, alias="isPublished")


class EventSeat(_ApiModel):
    id: str
    section: str
    row: Optional[str] = None
    seat_number: Optional[int] = Field(default=None, alias="seatNumber")
    status: SeatStatus

    @property
    def is_available(self) -> bool:
        return self.status is SeatStatus.AVAILABLE

    @property
    def label(self) -> str:
        number = str(self.seat_number) if self.seat_number is not None else self.id[:6]
        return f"{self.row or ''} {number}"


class ReservationRequest(_ApiModel):
    event_id: str = Field(alias="eventId")
    seat_ids: List[str] = Field(alias="seatIds")


class ReservationResponse(_ApiModel):
    seats: List[EventSeat] = Field(default_factory=list)


class CheckoutRequest(_ApiModel):
    user_id: str = Field(alias="userId")
    event_id: str = Field(alias="eventId")
    seat_ids: List[str] = Field(alias="seatIds")
    tier_id: str = Field(alias="tierId")
    email: str


class CheckoutResponse(_ApiModel):
    order_id: str = Field(alias="orderId")
    client_secret: Optional[str] = Field(default=None, alias="clientSecret")


class HealthResponse(_ApiModel):
    status: Optional[str] = None
