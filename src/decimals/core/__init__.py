"""
Core domain models, arithmetic algorithms, and text codecs.

Everything here works on explicit configuration snapshots and knows nothing
about the ambient default engine.
"""
