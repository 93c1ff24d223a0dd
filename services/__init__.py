"""
Service modules: per-service requests, results, nested types, errors and clients.

Each module binds its base request to the protocol the service speaks and
exposes one client class with a method per operation.
"""
