#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w Base.metadata

from minicommerce.data.models.user import UserModel
from minicommerce.data.models.category import CategoryModel
from minicommerce.data.models.product import ProductModel
from minicommerce.data.models.order import OrderModel
from minicommerce.data.models.order_line import OrderLineModel
from minicommerce.data.models.review import ReviewModel

__all__ = ["UserModel", "CategoryModel", "ProductModel", "OrderModel", "OrderLineModel", "ReviewModel"]
