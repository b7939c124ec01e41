from teambuilder.golfer.base_golfer import Golfer
from teambuilder.golfer.factory import (
    GolferFactory,
    create_golfer,
    create_golfer_from_dict,
)

__all__ = [
    "Golfer",
    "GolferFactory",
    "create_golfer",
    "create_golfer_from_dict",
]
