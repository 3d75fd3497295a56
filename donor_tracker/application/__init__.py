"""Application layer: DTOs, result types, interfaces, services.

Depends only on domain and protocol definitions. Infrastructure
implements the interfaces (store, upstream donor source).
"""
