"""
Domain layer: entities, access rules, errors and repository contracts.
Nothing here depends on FastAPI, Pydantic or the database driver.
"""
