class StorageError(Exception):
    """Raised when the product store cannot complete a query."""


class UnknownStatusError(ValueError):
    """Raised when a status label has no numeric code."""

    def __init__(self, status):
        super().__init__(f"Unknown product status: {status!r}")
        self.status = status


class DiscountLookupError(Exception):
    """Raised when the discount API is unreachable or answers garbage."""


# ---------- SERVICE ERRORS ----------

class ProductServiceError(Exception):
    pass


class ProductLookupError(ProductServiceError):
    pass


class ProductListError(ProductServiceError):
    pass


class ProductCreateError(ProductServiceError):
    pass


class ProductUpdateError(ProductServiceError):
    pass


class ProductDeleteError(ProductServiceError):
    pass
