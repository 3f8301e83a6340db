# equipment_service/errors.py

class EquipmentServiceError(Exception):
    pass

class EquipmentMappingError(EquipmentServiceError):
    """
    A row exists for the identity but does not match any known equipment shape.
    `failure` is the decoder's UnrecognizedShape, with the raw row attached.
    """

    def __init__(self, identity, failure):
        self.identity = identity
        self.failure = failure
        super().__init__(f"Unable to map result for {identity}: {failure.raw!r}")
