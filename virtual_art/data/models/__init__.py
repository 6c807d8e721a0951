#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.artist_profile import ArtistProfileModel
from virtual_art.data.models.artwork import ArtworkModel
from virtual_art.data.models.address import AddressModel
from virtual_art.data.models.order import OrderModel
from virtual_art.data.models.order_item import OrderItemModel
from virtual_art.data.models.review import ReviewModel
from virtual_art.data.models.wishlist import WishlistModel

__all__ = [
    "UserModel",
    "ArtistProfileModel",
    "ArtworkModel",
    "AddressModel",
    "OrderModel",
    "OrderItemModel",
    "ReviewModel",
    "WishlistModel",
]
