"""Resolver package for the GraphQL schema.

Root query and mutation types delegate to the functions defined in the
sibling modules; each function opens its own session from the context's
session factory.
"""
