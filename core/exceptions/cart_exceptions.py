class InvalidRowIDError(Exception):

    def __init__(self, row_id: str):
        self.row_id = row_id

    def __str__(self):
        return f"The cart does not contain rowId {self.row_id}"


class UnknownModelError(Exception):

    def __init__(self, model: str):
        self.model = model

    def __str__(self):
        return f"The supplied model {self.model} does not exist"


class CartAlreadyStoredError(Exception):
    def __init__(self, identifier, instance: str):
        self.identifier = identifier
        self.instance = instance

    def __str__(self):
        return f"A cart with identifier {self.identifier} was already stored for instance {self.instance}"


class InvalidFeeError(ValueError):
    def __init__(self, info: str):
        self.info = info

    def __str__(self):
        return f"Invalid fee value: {self.info}"


class InvalidQuantityError(ValueError):
    def __init__(self, quantity):
        self.quantity = quantity

    def __str__(self):
        return f"Please supply a valid quantity, got {self.quantity}"
