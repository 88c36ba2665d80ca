"""
Application layer.

Orchestrates domain objects through use cases and application services.
Collaborators such as repositories are declared as Protocols here and
implemented in the infrastructure layer.
"""
