"""
Functional helpers

Комбинаторы, предикаты и неизменяющие операции над списками, строками
и словарями.
"""

# Combinators
from src.core.functional.combinators import (
    always_false,
    always_null,
    always_true,
    always_undef,
    compose,
    identity,
    log_inline,
    maybe_func,
    partial,
    trace,
)

# Predicates
from src.core.functional.predicates import (
    BOOL_MAP,
    both,
    has_value,
    is_array,
    is_def,
    is_divisible_by,
    is_empty,
    is_even,
    is_function,
    is_number,
    is_object,
    is_string,
    is_string_else,
    is_undefined,
    maybe_bool,
    same_as,
    what_type,
)

# Arrays
from src.core.functional.arrays import (
    RangeArgumentError,
    all_elements_equal,
    arr_to_map,
    chunk,
    clock,
    column_at,
    column_reduce,
    count_by_func,
    count_ock,
    difference,
    el_at,
    filter_,
    filter_at_inc,
    filter_only_indexes,
    find_shared,
    flatten,
    head,
    i_range,
    intersection,
    map_,
    max_in_arr,
    min_in_arr,
    pairs,
    pairs_to_map,
    push,
    range2,
    range_,
    range_gen,
    remove,
    remove_at_index,
    remove_random,
    repeat,
    reverse,
    same_arr,
    same_els,
    split_at,
    symmetric_diff,
    tail,
    transpose,
    truncate,
    union,
    zip_,
    zip_flat,
)

# Strings
from src.core.functional.strings import (
    ALPHA_LOWER,
    ALPHA_NUM,
    ALPHA_UPPER,
    FLOAT_STRING,
    NUMERIC_INT,
    NUMERIC_STRING,
    SIGNED_NUMERIC_STRING,
    always_append,
    any_to_lower_case,
    append,
    count_sub_string,
    interleave,
    interleave2,
    join,
    join2,
    lcp,
    left_pad_with_to,
    negate,
    only_includes,
    prepend,
    quote,
    replace,
    replace_all,
    split,
    string_if_not_empty_else,
    string_is_alpha_numeric,
    string_is_only_digits,
    string_reverse,
    string_strip_non_float_digits,
    strip_leading_char,
    strip_trailing_char,
    to_lower_case,
    to_number,
    to_string,
    to_upper_case,
)

# Objects
from src.core.functional.objects import (
    clone_obj,
    merge_deep,
    obj_to_paths,
    path_or,
    visit_obj_deep,
)

__all__ = [
    # Combinators
    "always_false",
    "always_null",
    "always_true",
    "always_undef",
    "compose",
    "identity",
    "log_inline",
    "maybe_func",
    "partial",
    "trace",
    # Predicates
    "BOOL_MAP",
    "both",
    "has_value",
    "is_array",
    "is_def",
    "is_divisible_by",
    "is_empty",
    "is_even",
    "is_function",
    "is_number",
    "is_object",
    "is_string",
    "is_string_else",
    "is_undefined",
    "maybe_bool",
    "same_as",
    "what_type",
    # Arrays — Exceptions
    "RangeArgumentError",
    # Arrays — Ranges
    "clock",
    "i_range",
    "range2",
    "range_",
    "range_gen",
    # Arrays — Access
    "column_at",
    "el_at",
    "flatten",
    "head",
    "repeat",
    "reverse",
    "tail",
    "transpose",
    "truncate",
    # Arrays — Counting & comparison
    "all_elements_equal",
    "count_by_func",
    "count_ock",
    "filter_",
    "filter_at_inc",
    "map_",
    "same_arr",
    "same_els",
    # Arrays — Grouping
    "arr_to_map",
    "chunk",
    "column_reduce",
    "filter_only_indexes",
    "find_shared",
    "max_in_arr",
    "min_in_arr",
    "pairs",
    "pairs_to_map",
    "split_at",
    "zip_",
    "zip_flat",
    # Arrays — Removal
    "push",
    "remove",
    "remove_at_index",
    "remove_random",
    # Arrays — Set operations
    "difference",
    "intersection",
    "symmetric_diff",
    "union",
    # Strings — Character classes
    "ALPHA_LOWER",
    "ALPHA_NUM",
    "ALPHA_UPPER",
    "FLOAT_STRING",
    "NUMERIC_INT",
    "NUMERIC_STRING",
    "SIGNED_NUMERIC_STRING",
    # Strings — Conversion
    "any_to_lower_case",
    "negate",
    "quote",
    "to_lower_case",
    "to_number",
    "to_string",
    "to_upper_case",
    # Strings — Checks
    "left_pad_with_to",
    "only_includes",
    "string_if_not_empty_else",
    "string_is_alpha_numeric",
    "string_is_only_digits",
    "string_strip_non_float_digits",
    "strip_leading_char",
    "strip_trailing_char",
    # Strings — Operations
    "always_append",
    "append",
    "count_sub_string",
    "interleave",
    "interleave2",
    "join",
    "join2",
    "lcp",
    "prepend",
    "replace",
    "replace_all",
    "split",
    "string_reverse",
    # Objects
    "clone_obj",
    "merge_deep",
    "obj_to_paths",
    "path_or",
    "visit_obj_deep",
]
