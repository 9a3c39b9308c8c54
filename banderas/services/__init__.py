"""
Service layer: business rules between the HTTP handlers and the
repositories, plus the storage, identity provider and email collaborators.
"""
