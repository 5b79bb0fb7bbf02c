from oneliners.domain.arrays import (
    array_equal,
    array_to_object,
    count_array_props,
    extract_array_prop,
    is_array_empty,
    obj_is_array,
)
from oneliners.domain.colors import is_hex, rgb_to_hex
from oneliners.domain.dates import (
    HourOutOfRangeError,
    am_pm_to_hr,
    date_difference,
    is_valid_date,
)
from oneliners.domain.generators import (
    RandomValueGenerator,
    configured_generator,
    gen_hex_color,
    gen_ip,
    gen_random_string,
)
from oneliners.domain.objects import clear_null, invert_object, is_objects_equal, obj_sort
from oneliners.domain.query import params_to_object
from oneliners.domain.runtime import is_node_process, is_promise
from oneliners.domain.strings import (
    convert_to_lowercase,
    convert_to_uppercase,
    is_relative,
    repeat_string,
)

__all__ = [
    # Strings
    "convert_to_lowercase",
    "convert_to_uppercase",
    "is_relative",
    "repeat_string",
    # Colors
    "is_hex",
    "rgb_to_hex",
    # Dates
    "HourOutOfRangeError",
    "am_pm_to_hr",
    "date_difference",
    "is_valid_date",
    # Query strings
    "params_to_object",
    # Runtime checks
    "is_node_process",
    "is_promise",
    # Sequences
    "array_equal",
    "array_to_object",
    "count_array_props",
    "extract_array_prop",
    "is_array_empty",
    "obj_is_array",
    # Mappings
    "clear_null",
    "invert_object",
    "is_objects_equal",
    "obj_sort",
    # Generators
    "RandomValueGenerator",
    "configured_generator",
    "gen_hex_color",
    "gen_ip",
    "gen_random_string",
]
