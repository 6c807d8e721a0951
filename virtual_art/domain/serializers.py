# virtual_art/domain/serializers.py
#dicty przeksztalcane w jsona przez response_model routerow
from typing import Any, Dict

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.artist_profile import ArtistProfileModel
from virtual_art.data.models.artwork import ArtworkModel
from virtual_art.data.models.address import AddressModel
from virtual_art.data.models.order import OrderModel
from virtual_art.data.models.review import ReviewModel
from virtual_art.data.models.wishlist import WishlistModel


def user_summary(user: UserModel) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "user_type": user.user_type,
    }


def user_read(user: UserModel) -> Dict[str, Any]:
    return {
        **user_summary(user),
        "phone": user.phone,
        "address": user.address,
        "status": user.status,
        "created_at": user.created_at,
    }


def artist_profile_dict(profile: ArtistProfileModel) -> Dict[str, Any]:
    return {
        "id": profile.id,
        "user_id": profile.user_id,
        "artist_name": profile.artist_name,
        "bio": profile.bio,
        "portfolio_link": profile.portfolio_link,
        "art_style": profile.art_style,
        "location": profile.location,
        "social_links": profile.social_links or {},
        "years_experience": profile.years_experience,
        "exhibitions": profile.exhibitions,
        "awards_won": profile.awards_won,
        "artworks_sold": profile.artworks_sold,
        "total_sales": float(profile.total_sales or 0),
        "avg_rating": float(profile.avg_rating or 0),
        "created_at": profile.created_at,
    }


def artwork_dict(artwork: ArtworkModel) -> Dict[str, Any]:
    return {
        "id": artwork.id,
        "artist_id": artwork.artist_id,
        "artist_name": artwork.artist.full_name if artwork.artist else None,
        "title": artwork.title,
        "description": artwork.description,
        "category": artwork.category,
        "medium": artwork.medium,
        "price": float(artwork.price),
        "image_url": artwork.image_url,
        "status": artwork.status,
        "created_at": artwork.created_at,
    }


def address_dict(address: AddressModel) -> Dict[str, Any]:
    return {
        "id": address.id,
        "first_name": address.first_name,
        "last_name": address.last_name,
        "email": address.email,
        "phone": address.phone,
        "street": address.street,
        "city": address.city,
        "state": address.state,
        "zip_code": address.zip_code,
        "country": address.country,
    }


def order_dict(order: OrderModel) -> Dict[str, Any]:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "user": {
            "id": order.user.id,
            "full_name": order.user.full_name,
            "email": order.user.email,
        },
        "items": [
            {
                "product": {
                    "id": i.product.id,
                    "artist_id": i.product.artist_id,
                    "title": i.product.title,
                    "price": float(i.product.price),
                    "category": i.product.category,
                    "image_url": i.product.image_url,
                    "medium": i.product.medium,
                },
                "quantity": i.quantity,
            }
            for i in order.items
        ],
        "address": address_dict(order.address) if order.address else None,
        "amount": float(order.amount),
        "status": order.status,
        "payment_type": order.payment_type,
        "order_date": order.order_date,
    }


def review_dict(review: ReviewModel) -> Dict[str, Any]:
    return {
        "id": review.id,
        "user_id": review.user_id,
        "user_name": review.user.full_name if review.user else None,
        "artist_id": review.artist_id,
        "artwork_id": review.artwork_id,
        "artwork_title": review.artwork.title if review.artwork else None,
        "rating": review.rating,
        "comment": review.comment,
        "created_at": review.created_at,
    }


def wishlist_dict(item: WishlistModel) -> Dict[str, Any]:
    return {
        "id": item.id,
        "user_id": item.user_id,
        "artwork_id": item.artwork_id,
        "artwork": artwork_dict(item.artwork),
        "created_at": item.created_at,
    }
