"""
GraphQL Genre Enum

Exposes the model's Genre enumeration as the `Genre` GraphQL enum.
"""

import strawberry

from library_api.models.genre import Genre

GenreEnum = strawberry.enum(Genre, name="Genre", description="Book genres")
