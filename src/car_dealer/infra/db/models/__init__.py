from car_dealer.infra.db.models.base import Base
from car_dealer.infra.db.models.classified import ClassifiedRow, ImageRow
from car_dealer.infra.db.models.taxonomy import MakeRow, ModelRow, ModelVariantRow

__all__ = [
    "Base",
    "ClassifiedRow",
    "ImageRow",
    "MakeRow",
    "ModelRow",
    "ModelVariantRow",
]
