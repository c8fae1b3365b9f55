# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The two fixed C++ translation units that get benchmarked.

Both build a tuple from `VALUES` and fold-sum it through `apply`. The only
difference is which tuple implementation they pull in. `VALUES` is never
substituted here: the compiler fills it in from a `-DVALUES=...` definition,
so the file on disk is identical for every tuple size.
"""

from enum import Enum


class Library(str, Enum):
    """Which tuple implementation the generated source uses."""

    STDLIB = "stdlib"
    TUPLET = "tuplet"


STDLIB_TUPLE_CODE = """
#include <tuple>

int my_func() {
    auto tup = std::tuple { VALUES };
    auto sum = [](auto... values) { return (values + ...); };
    return std::apply(sum, tup);
}
"""

TUPLET_TUPLE_CODE = """
#include <tuplet/tuplet.hpp>

int my_func() {
    auto tup = tuplet::tuple { VALUES };
    auto sum = [](auto... values) { return (values + ...); };
    return tuplet::apply(sum, tup);
}
"""

TEMPLATES: dict[Library, str] = {
    Library.STDLIB: STDLIB_TUPLE_CODE,
    Library.TUPLET: TUPLET_TUPLE_CODE,
}


def template_for(library: Library) -> str:
    """Return the source text for the given library."""
    return TEMPLATES[Library(library)]
