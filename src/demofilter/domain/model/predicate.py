"""Grouped predicate type alias.

group -> category -> selected values, in selection order.
Always derived from a flat selection list, never mutated in place.
"""

type GroupedPredicate = dict[str, dict[str, list[str]]]
