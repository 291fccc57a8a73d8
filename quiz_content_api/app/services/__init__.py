"""
Service layer abstraction.

``category_engine`` holds the pure query and mutation logic over an
in‑memory collection; ``category_service`` wires it to the JSON
backing document so that API handlers never touch storage directly.
"""
