from ayurveda_store.models.product import Product
from ayurveda_store.models.order_item import OrderItem
from ayurveda_store.models.order import Order
from ayurveda_store.models.shiprocket_order import ShiprocketOrder
from ayurveda_store.models.appointment import Appointment
from ayurveda_store.models.contact_message import ContactMessage
from ayurveda_store.models.review import ProductReview
from ayurveda_store.models.gallery_image import GalleryImage

# add ALL models here
