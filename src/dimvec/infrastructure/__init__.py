"""
Infrastructure layer of dimvec: container implementations.

Subpackages
-----------
- cardinality: rectangular / variable / unbounded / empty policies.
- nvec: `NVecBase` / `NVecMutBase`, child views and element slots.
- adapters: storage adapters and the adapter registry.
- vecs: constant, procedural, sparse and empty containers; the `V` builder.
- transformations: cache, completion, hooks, jagged and matrix views.
"""
