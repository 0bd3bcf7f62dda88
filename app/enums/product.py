from enum import Enum

class ProductStatus(str, Enum):
    active = "active"
    inactive = "inactive"
