from .timeutil import timestamp, epoch_ms, datetime_to_str, parse_date, parse_bureau_date
from .genutil import (
    camel_to_lower,
    camel_to_title,
    select_value,
    tokenize,
)

from .registry import ClassRegistry
