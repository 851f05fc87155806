from zoo_service.models.schema.zoo import ZooRow
from zoo_service.models.schema.animal import AnimalRow

__all__ = [
    "ZooRow",
    "AnimalRow",
]
