"""
parity_example.py - The showcase scenarios written with the Java-style API

Each scenario prints one line per check, "<description>: <outcome>".
Compare with examples.py, which sticks to the std::optional operations.

Run this file directly:
    python parity_example.py
"""

from optionals import run_parity_examples


if __name__ == "__main__":
    run_parity_examples()
