"""Domain exceptions shared by the vehicles and pricing services."""


class CarNotFoundException(Exception):
    """Raised when no car is stored under the requested id."""
    def __init__(self, car_id: int = None, message: str = None):
        self.car_id = car_id
        self.message = message or f"Car with ID '{car_id}' not found"
        super().__init__(self.message)


class UnknownManufacturerException(Exception):
    """Raised when a car references a manufacturer code that is not stored."""
    def __init__(self, code: int, message: str = None):
        self.code = code
        self.message = message or f"Unknown manufacturer code '{code}'"
        super().__init__(self.message)


class CollaboratorError(Exception):
    """Raised when a remote collaborator (pricing, maps) fails or is unreachable."""
    def __init__(self, service: str, message: str):
        self.service = service
        self.message = f"{service} service error: {message}"
        super().__init__(self.message)
