"""Performance benchmarks for digraphkit.

This package contains microbenchmarks for hot paths in the library,
currently the indexed-heap shortest path tree.
"""
