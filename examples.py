"""
examples.py - Optional value container, idiom by idiom

Runs the seven labeled demonstrations in order:
1. optional_of_null: four ways to build an empty optional
2. optional_of_null_usage: value_or() and value() on an empty optional
3. optional_of_value_usage: value_or() on a filled optional
4. optional_of_value_other_usage: no map()/filter() counterpart
5. bouncer_patterns: check has_value() before reading
6. fake_repository_return_value: no helper chain counterpart
7. direct_value_access: value(), unpacking and attribute access

For the Java-style API (of, or_, map, filter, ...) see parity_example.py.

Run this file directly:
    python examples.py
"""

from optionals import run_all_examples


if __name__ == "__main__":
    run_all_examples()
