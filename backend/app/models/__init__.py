from app.models.account import Account
from app.models.vehicle import Vehicle, VehicleImage
from app.models.engagement import WishlistEntry, TestDrive, Inquiry
from app.models.transaction import Transaction, Payment

__all__ = [
    "Account", "Vehicle", "VehicleImage",
    "WishlistEntry", "TestDrive", "Inquiry",
    "Transaction", "Payment",
]
