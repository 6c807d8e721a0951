# virtual_art/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List, Dict, Literal, Optional
from datetime import datetime


UserType = Literal["user", "artist", "admin"]
ArtworkStatus = Literal["pending", "published", "rejected", "sold"]
OrderStatus = Literal["pending", "completed", "cancelled"]


# =====================================================
# AUTH / USERS
# =====================================================
class RegisterIn(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1, max_length=255)
    user_type: UserType
    phone: Optional[str] = None
    address: Optional[str] = None
    # opcjonalnie od razu profil artysty
    artist_name: Optional[str] = None
    bio: Optional[str] = None
    portfolio_link: Optional[str] = None


class LoginIn(BaseModel):
    email: EmailStr
    password: str


class UserSummary(BaseModel):
    id: int
    email: str
    full_name: str
    user_type: UserType

    model_config = ConfigDict(from_attributes=True)


class AuthOut(BaseModel):
    token: str
    user: UserSummary


class UserRead(BaseModel):
    """Schema dla uzytkownika (response), bez hasla."""

    id: int
    email: str
    full_name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    user_type: UserType
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = None
    address: Optional[str] = None
    # tylko admin
    user_type: Optional[UserType] = None
    status: Optional[Literal["active", "suspended"]] = None


# =====================================================
# ARTIST PROFILES
# =====================================================
class ArtistProfileIn(BaseModel):
    artist_name: str = Field(..., min_length=1)
    bio: Optional[str] = Field(None, min_length=200, max_length=300)
    portfolio_link: Optional[str] = None
    art_style: Optional[str] = None
    location: Optional[str] = None
    social_links: Dict[str, str] = Field(default_factory=dict)
    years_experience: int = Field(0, ge=0)
    exhibitions: int = Field(0, ge=0)
    awards_won: int = Field(0, ge=0)


class ArtistProfileUpdate(BaseModel):
    artist_name: Optional[str] = Field(None, min_length=1)
    bio: Optional[str] = Field(None, min_length=200, max_length=300)
    portfolio_link: Optional[str] = None
    art_style: Optional[str] = None
    location: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None
    years_experience: Optional[int] = Field(None, ge=0)
    exhibitions: Optional[int] = Field(None, ge=0)
    awards_won: Optional[int] = Field(None, ge=0)


class ArtistProfileOut(BaseModel):
    id: int
    user_id: int
    artist_name: str
    bio: Optional[str] = None
    portfolio_link: Optional[str] = None
    art_style: Optional[str] = None
    location: Optional[str] = None
    social_links: Dict[str, str] = Field(default_factory=dict)
    years_experience: int
    exhibitions: int
    awards_won: int
    artworks_sold: int
    total_sales: float
    avg_rating: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# ARTWORKS
# =====================================================
class ArtworkIn(BaseModel):
    """Schema dla tworzenia dziela (status zawsze pending)."""

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    medium: Optional[str] = None
    price: float = Field(..., ge=0)
    image_url: str = Field(..., min_length=1)


class ArtworkUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    medium: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, min_length=1)
    # approve / reject, tylko admin
    status: Optional[ArtworkStatus] = None


class ArtworkOut(BaseModel):
    id: int
    artist_id: int
    artist_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    category: str
    medium: Optional[str] = None
    price: float
    image_url: str
    status: ArtworkStatus
    created_at: datetime


# =====================================================
# ADDRESS
# =====================================================
class AddressIn(BaseModel):
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    email: EmailStr
    phone: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1, alias="zipCode")
    country: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class AddressUpdate(BaseModel):
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1, alias="zipCode")
    country: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class AddressOut(BaseModel):
    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone: str
    street: str
    city: str
    state: str
    zip_code: str = Field(..., alias="zipCode")
    country: str

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# =====================================================
# ORDERS
# =====================================================
class OrderItemIn(BaseModel):
    product: int
    quantity: int


class OrderCreate(BaseModel):
    """Schema dla tworzenia zamowienia, nazwy pol jak w storefroncie."""

    user_id: int = Field(..., alias="userId")
    items: List[OrderItemIn]
    address: int
    payment_method: Optional[str] = Field(None, alias="paymentMethod")

    model_config = ConfigDict(populate_by_name=True)


class OrderStatusIn(BaseModel):
    status: OrderStatus


class OrderProductOut(BaseModel):
    id: int
    artist_id: int
    title: str
    price: float
    category: str
    image_url: str
    medium: Optional[str] = None


class OrderLineOut(BaseModel):
    product: OrderProductOut
    quantity: int


class OrderBuyerOut(BaseModel):
    id: int
    full_name: str
    email: str


class OrderOut(BaseModel):
    id: int
    user_id: int
    user: OrderBuyerOut
    items: List[OrderLineOut]
    address: Optional[AddressOut] = None
    amount: float
    status: OrderStatus
    payment_type: str
    order_date: datetime


# =====================================================
# REVIEWS / WISHLIST
# =====================================================
class ReviewIn(BaseModel):
    artwork_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewUpdate(BaseModel):
    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None


class ReviewOut(BaseModel):
    id: int
    user_id: int
    user_name: Optional[str] = None
    artist_id: int
    artwork_id: int
    artwork_title: Optional[str] = None
    rating: int
    comment: Optional[str] = None
    created_at: datetime


class WishlistIn(BaseModel):
    artwork_id: int


class WishlistOut(BaseModel):
    id: int
    user_id: int
    artwork_id: int
    artwork: ArtworkOut
    created_at: datetime
