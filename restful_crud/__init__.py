"""
RESTful CRUD API

Generic repository, per-entity services and versioned, hypermedia-annotated endpoints.
"""
