"""Performance benchmarks for edgegraph.

Microbenchmarks for graph construction and depth-first traversal.
"""
