from .maybe import (
    Maybe,
    Present,
    Absent,
    Just,
    Nothing,
    NOTHING,
    InvalidExtraction,
    MaybeMapping,
    MaybePredicate,
    from_nullable,
    just,
    nothing,
)
from .logger import ConsoleLogger, configure_logger, get_logger
