class ValidationError(ValueError):
    """Raised when a review input breaks the scheduler's contract."""


class ItemNotFoundError(LookupError):
    def __init__(self, item_id: str):
        super().__init__(f"Review item {item_id} not found")
        self.item_id = item_id
